# persistent_homology/reduction/calculation.py
from __future__ import annotations

"""
End-to-end persistence: complex -> boundary matrix -> reduction -> pairing
-> diagrams.

The reduction itself is sequential. Independent complexes (a batch, or the
two halves of a double filtration) are processed in a thread pool and
joined in input order.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, Optional

from ..config import PersistenceConfig, resolve_config
from ..diagrams.diagram import PersistenceDiagram, make_persistence_diagrams, merge
from ..matrices.boundary_matrix import BoundaryMatrix
from ..matrices.dualization import dualize, translate_dual_pair
from ..topology.complex import SimplicialComplex
from ..topology.filtrations import lower_filtration, upper_filtration
from .algorithms import get_algorithm
from .pairing import PersistencePairing

__all__ = [
    "calculate_persistence_pairing",
    "calculate_persistence_diagrams",
    "calculate_persistence_diagrams_batch",
    "calculate_double_persistence",
]

logger = logging.getLogger(__name__)


def calculate_persistence_pairing(
    M: BoundaryMatrix,
    config: Optional[PersistenceConfig] = None,
    *,
    max_index: Optional[int] = None,
) -> PersistencePairing:
    """
    Reduce a boundary matrix and read off its persistence pairing.

    Parameters
    ----------
    M : BoundaryMatrix
        Left untouched; the reduction runs on a copy (or on the dual).
    config : PersistenceConfig, optional
    max_index : int, optional
        Only columns ``0..max_index-1`` are reduced, and only pairs with both
        indices below ``max_index`` are reported. Used for the allowable
        prefix of a partitioned complex. Not available together with
        ``config.dualize``.

    Returns
    -------
    PersistencePairing
    """
    cfg = resolve_config(config)
    if cfg.dualize and max_index is not None:
        raise ValueError("max_index cannot be combined with dualize=True; reduce the primal matrix instead.")

    algorithm = get_algorithm(cfg.algorithm)
    n = M.num_columns
    stop = n if max_index is None else min(int(max_index), n)

    t0 = time.perf_counter()
    work = dualize(M) if cfg.dualize else M.copy()
    result = algorithm(work, max_index=max_index)

    pairs: Dict[int, int] = {}
    if cfg.dualize:
        for j, i in result.lows.items():
            creator, destroyer = translate_dual_pair(i, j, n)
            pairs[destroyer] = creator
        used = set(pairs) | set(pairs.values())
        essential = [k for k in range(n) if k not in used]
    else:
        for j, i in result.lows.items():
            if i < stop:
                pairs[j] = i
        creators = set(pairs.values())
        essential = [j for j in range(stop) if j not in result.lows and j not in creators]

    if not cfg.include_all_unpaired_creators and essential:
        dims = M.dimensions
        top = max(dims)
        essential = [k for k in essential if dims[k] != top]

    logger.debug(
        "%s reduction%s of %d columns: %d pairs, %d essential, %d column additions in %.3fs",
        algorithm.name, " (dual)" if cfg.dualize else "", stop,
        len(pairs), len(essential), result.column_additions, time.perf_counter() - t0,
    )
    return PersistencePairing(pairs=pairs, essential=essential, size=n)


def calculate_persistence_diagrams(
    K: SimplicialComplex,
    config: Optional[PersistenceConfig] = None,
) -> List[PersistenceDiagram]:
    """
    Persistence diagrams of a filtered complex, one per dimension
    ``0..K.dimension``. The complex must already be sorted into a filtration.
    """
    cfg = resolve_config(config)
    if len(K) == 0:
        return []

    M = BoundaryMatrix.from_complex(K, representation=cfg.representation, check_order=cfg.check_order)
    pairing = calculate_persistence_pairing(M, cfg)
    return make_persistence_diagrams(pairing, K, max_dimension=K.dimension)


def calculate_persistence_diagrams_batch(
    complexes: Iterable[SimplicialComplex],
    config: Optional[PersistenceConfig] = None,
    max_workers: Optional[int] = None,
) -> List[List[PersistenceDiagram]]:
    """Diagrams for several independent complexes, returned in input order."""
    cfg = resolve_config(config)
    complexes = list(complexes)
    if not complexes:
        return []

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(calculate_persistence_diagrams, K, cfg) for K in complexes]
        return [f.result() for f in futures]


def calculate_double_persistence(
    K: SimplicialComplex,
    config: Optional[PersistenceConfig] = None,
    max_workers: int = 2,
) -> List[PersistenceDiagram]:
    """
    Persistence of a signed-weight complex through its two semi-filtrations.

    The negative half (``lower_filtration``) and the positive half
    (``upper_filtration``) are computed independently and their diagrams are
    merged dimension by dimension. Both halves contain every vertex at
    weight 0, so the essential classes of dimension 0 are counted once per
    half.

    Returns
    -------
    list of PersistenceDiagram
        One merged diagram per dimension, up to the larger of the two
        halves' top dimensions. A dimension present in only one half keeps
        that half's diagram.
    """
    cfg = resolve_config(config)
    halves = [lower_filtration(K), upper_filtration(K)]
    lower, upper = calculate_persistence_diagrams_batch(halves, cfg, max_workers=max_workers)

    out: List[PersistenceDiagram] = []
    for d in range(max(len(lower), len(upper))):
        if d < len(lower) and d < len(upper):
            out.append(merge(lower[d], upper[d]))
        else:
            out.append((lower[d] if d < len(lower) else upper[d]).copy())
    return out
