# persistent_homology/topology/filtrations.py
from __future__ import annotations

"""
Filtration orders and filtration builders.

An order is anything with ``key(simplex) -> tuple``; ``SimplicialComplex.sort``
accepts these objects (or a bare key callable). All orders here end their key
with ``(dimension, vertices)`` so equal primary values are broken
deterministically and faces precede cofaces.
"""

from dataclasses import dataclass, field
from typing import Hashable, Mapping, Protocol, Sequence, Tuple, Union

import numpy as np

from ..errors import NotFound
from .complex import SimplicialComplex
from .simplex import Simplex

__all__ = [
    "FiltrationOrder",
    "DataOrder",
    "AbsoluteOrder",
    "LowerStarOrder",
    "UpperStarOrder",
    "lower_star_filtration",
    "upper_star_filtration",
    "semi_filtration",
    "lower_filtration",
    "upper_filtration",
]

VertexValues = Union[Mapping[Hashable, float], Sequence[float], np.ndarray]


class FiltrationOrder(Protocol):
    """Total order on simplices, expressed as a sort key."""

    def key(self, simplex: Simplex) -> Tuple:
        ...


# ============================================================
# Orders
# ============================================================

@dataclass(frozen=True)
class DataOrder:
    """Weight (ascending or descending), then dimension, then vertices."""
    descending: bool = False

    def key(self, simplex: Simplex) -> Tuple:
        w = -simplex.weight if self.descending else simplex.weight
        return (w, simplex.dimension, simplex.vertices)


@dataclass(frozen=True)
class AbsoluteOrder:
    """
    Order by absolute weight; ties on |w| put the negative weight first,
    then dimension, then vertices.

    ``descending=True`` visits large |w| first (the tie rules stay the same).
    """
    descending: bool = False

    def key(self, simplex: Simplex) -> Tuple:
        a = abs(simplex.weight)
        return (-a if self.descending else a, simplex.weight, simplex.dimension, simplex.vertices)


def _vertex_value(values: VertexValues, v: Hashable) -> float:
    try:
        return float(values[v])  # type: ignore[index]
    except (KeyError, IndexError):
        raise NotFound(f"No function value for vertex {v!r}.") from None


@dataclass(frozen=True)
class LowerStarOrder:
    """Order by the maximum vertex value of each simplex (sublevel sets)."""
    values: VertexValues = field(hash=False, compare=False)

    def key(self, simplex: Simplex) -> Tuple:
        m = max(_vertex_value(self.values, v) for v in simplex)
        return (m, simplex.dimension, simplex.vertices)


@dataclass(frozen=True)
class UpperStarOrder:
    """Order by the minimum vertex value, largest first (superlevel sets)."""
    values: VertexValues = field(hash=False, compare=False)

    def key(self, simplex: Simplex) -> Tuple:
        m = min(_vertex_value(self.values, v) for v in simplex)
        return (-m, simplex.dimension, simplex.vertices)


# ============================================================
# Builders
# ============================================================

def lower_star_filtration(K: SimplicialComplex, values: VertexValues) -> SimplicialComplex:
    """Re-weight each simplex by the max of its vertex values and sort ascending."""
    L = SimplicialComplex(
        s.with_weight(max(_vertex_value(values, v) for v in s)) for s in K
    )
    return L.sort(DataOrder())


def upper_star_filtration(K: SimplicialComplex, values: VertexValues) -> SimplicialComplex:
    """Re-weight each simplex by the min of its vertex values and sort descending."""
    L = SimplicialComplex(
        s.with_weight(min(_vertex_value(values, v) for v in s)) for s in K
    )
    return L.sort(DataOrder(descending=True))


def semi_filtration(K: SimplicialComplex, *, upper: bool = False) -> SimplicialComplex:
    """
    Keep one sign of a signed-weight complex.

    Vertices are always present at weight 0. Higher simplices are kept only
    if their weight is strictly positive (``upper``) or strictly negative
    (lower); the others are dropped. The result is not sorted.
    """
    kept = []
    for s in K:
        if s.dimension == 0:
            kept.append(s.with_weight(0.0))
        elif (upper and s.weight > 0.0) or (not upper and s.weight < 0.0):
            kept.append(s)
    return SimplicialComplex(kept)


def lower_filtration(K: SimplicialComplex) -> SimplicialComplex:
    """Negative half, from 0 downwards (descending weights)."""
    return semi_filtration(K, upper=False).sort(DataOrder(descending=True))


def upper_filtration(K: SimplicialComplex) -> SimplicialComplex:
    """Positive half, from 0 upwards (ascending weights)."""
    return semi_filtration(K, upper=True).sort(DataOrder())
