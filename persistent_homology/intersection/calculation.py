# persistent_homology/intersection/calculation.py
from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional, Sequence, Union

from ..config import PersistenceConfig, resolve_config
from ..diagrams.diagram import PersistenceDiagram, make_persistence_diagrams
from ..matrices.boundary_matrix import BoundaryMatrix
from ..reduction.calculation import calculate_persistence_pairing
from ..topology.complex import SimplicialComplex
from .stratification import Perversity, Stratification, StratumLike, is_allowable, partition

__all__ = [
    "calculate_intersection_homology",
]

logger = logging.getLogger(__name__)


def calculate_intersection_homology(
    K: SimplicialComplex,
    strata: Union[Stratification, Sequence[StratumLike]],
    perversity: Union[Perversity, Sequence[int]],
    config: Optional[PersistenceConfig] = None,
) -> List[PersistenceDiagram]:
    """
    Persistent intersection homology of a filtered, stratified complex.

    Parameters
    ----------
    K : SimplicialComplex
        Sorted into a filtration.
    strata : Stratification or sequence of strata
        X_0 <= ... <= X_n, usually with X_n = K.
    perversity : Perversity or sequence of int
    config : PersistenceConfig, optional
        ``algorithm`` and ``representation`` are honoured. The reduction is
        always primal (no dualization) and keeps every unpaired allowable
        creator.

    Returns
    -------
    list of PersistenceDiagram
        Non-empty diagrams only, diagonal points removed. Each diagram keeps
        its dimension tag, so the list may skip dimensions.

    Notes
    -----
    The simplices are split into allowable ones followed by the rest. The
    boundary matrix covers the whole split complex but only the allowable
    columns are reduced, and only pairs and cycles among allowable simplices
    are reported.
    """
    stratification = strata if isinstance(strata, Stratification) else Stratification(strata)
    perversity = perversity if isinstance(perversity, Perversity) else Perversity(tuple(perversity))
    cfg = replace(resolve_config(config), dualize=False, include_all_unpaired_creators=True)

    if len(K) == 0:
        return []

    L, s = partition(K, lambda simplex: is_allowable(simplex, stratification, perversity))
    logger.debug(
        "intersection homology: %d of %d simplices allowable for perversity %s",
        s, len(L), perversity.values,
    )

    M = BoundaryMatrix.from_complex(L, representation=cfg.representation, check_order=False)
    pairing = calculate_persistence_pairing(M, cfg, max_index=s)

    diagrams = make_persistence_diagrams(pairing, L, max_dimension=L.dimension)
    out = []
    for D in diagrams:
        D.remove_diagonal()
        if len(D) > 0:
            out.append(D)
    return out
