# persistent_homology/reduction/algorithms.py
from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol, Set, Union

from ..matrices.boundary_matrix import BoundaryMatrix

__all__ = [
    "ReductionResult",
    "ReductionAlgorithm",
    "StandardReduction",
    "TwistReduction",
    "ALGORITHMS",
    "get_algorithm",
]

logger = logging.getLogger(__name__)


@dataclass
class ReductionResult:
    """
    Outcome of a column reduction.

    lows : dict
        column j -> its lowest one after reduction, for every processed
        column that did not reduce to zero.
    cleared : set
        Columns zeroed by the twist shortcut without elimination.
    column_additions : int
        Number of column additions performed (work counter).
    """
    lows: Dict[int, int] = field(default_factory=dict)
    cleared: Set[int] = field(default_factory=set)
    column_additions: int = 0


class ReductionAlgorithm(Protocol):
    """Strategy interface: reduce M in place, only columns < max_index."""
    name: str

    def __call__(self, M: BoundaryMatrix, max_index: Optional[int] = None) -> ReductionResult:
        ...


def _stop(M: BoundaryMatrix, max_index: Optional[int]) -> int:
    n = M.num_columns
    if max_index is None:
        return n
    if max_index < 0:
        raise ValueError(f"max_index must be non-negative. Got {max_index}.")
    return min(int(max_index), n)


def _reduce_column(M: BoundaryMatrix, j: int, owner: Dict[int, int]) -> tuple:
    """Eliminate column j against earlier pivots. Returns (low, additions)."""
    additions = 0
    low = M.maximum_index(j)
    while low is not None and low in owner:
        M.add_column(owner[low], j)
        additions += 1
        low = M.maximum_index(j)
    return low, additions


# ============================================================
# Standard algorithm
# ============================================================

@dataclass(frozen=True)
class StandardReduction:
    """
    Left-to-right column elimination.

    For each column j: while its lowest one r is already owned by an earlier
    column k, add column k into column j. A column that ends non-empty
    becomes the owner of its lowest one (pair r -> j); an empty column is a
    cycle.
    """
    name: str = "standard"

    def __call__(self, M: BoundaryMatrix, max_index: Optional[int] = None) -> ReductionResult:
        stop = _stop(M, max_index)
        owner: Dict[int, int] = {}
        result = ReductionResult()

        for j in range(stop):
            low, adds = _reduce_column(M, j, owner)
            result.column_additions += adds
            if low is not None:
                owner[low] = j

        result.lows = {j: low for low, j in owner.items()}
        logger.debug(
            "standard reduction: %d columns, %d pairs, %d column additions",
            stop, len(result.lows), result.column_additions,
        )
        return result


# ============================================================
# Twist algorithm
# ============================================================

@dataclass(frozen=True)
class TwistReduction:
    """
    Standard elimination with clearing, processing dimensions high to low.

    Once column j (dimension d) ends with lowest one i, the simplex i pairs
    upwards and column i (dimension d-1) must reduce to zero; it is cleared
    right away and skipped when dimension d-1 is processed. Dimension-0
    columns have no boundary; they are never visited or cleared. A cleared
    column is a creator, not an essential class: callers must read it from
    ``lows``.
    """
    name: str = "twist"

    def __call__(self, M: BoundaryMatrix, max_index: Optional[int] = None) -> ReductionResult:
        stop = _stop(M, max_index)
        owner: Dict[int, int] = {}
        result = ReductionResult()

        by_dim: Dict[int, List[int]] = defaultdict(list)
        for j in range(stop):
            by_dim[M.dimension_of(j)].append(j)

        for d in range(M.max_dimension, 0, -1):
            for j in by_dim.get(d, ()):
                if j in result.cleared:
                    continue
                low, adds = _reduce_column(M, j, owner)
                result.column_additions += adds
                if low is None:
                    continue
                owner[low] = j
                if low < stop and d > 1:
                    M.clear_column(low)
                    result.cleared.add(low)

        result.lows = {j: low for low, j in owner.items()}
        logger.debug(
            "twist reduction: %d columns, %d pairs, %d cleared, %d column additions",
            stop, len(result.lows), len(result.cleared), result.column_additions,
        )
        return result


# ============================================================
# Registry
# ============================================================

ALGORITHMS: Dict[str, ReductionAlgorithm] = {
    "standard": StandardReduction(),
    "twist": TwistReduction(),
}


def get_algorithm(algorithm: Union[str, ReductionAlgorithm]) -> ReductionAlgorithm:
    """Resolve a strategy name (or pass a strategy instance through)."""
    if isinstance(algorithm, str):
        try:
            return ALGORITHMS[algorithm]
        except KeyError:
            raise ValueError(
                f"Unknown reduction algorithm {algorithm!r}. Expected one of {sorted(ALGORITHMS)}."
            ) from None
    if not callable(algorithm):
        raise TypeError(f"algorithm must be a name or a callable strategy. Got {type(algorithm)!r}.")
    return algorithm
