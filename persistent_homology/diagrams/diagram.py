# persistent_homology/diagrams/diagram.py
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Union

import numpy as np

from ..errors import StructuralViolation
from ..topology.complex import SimplicialComplex

if TYPE_CHECKING:
    from ..reduction.pairing import PersistencePairing

__all__ = [
    "Point",
    "PersistenceDiagram",
    "make_persistence_diagrams",
    "merge",
    "normalize",
]

INF = float("inf")


class Point(NamedTuple):
    birth: float
    death: float = INF

    @property
    def is_essential(self) -> bool:
        return np.isinf(self.death)

    @property
    def persistence(self) -> float:
        """|death - birth|; infinite for essential points."""
        if self.is_essential:
            return INF
        return abs(self.death - self.birth)


class PersistenceDiagram:
    """
    Multiset of (birth, death) points of one homological dimension.

    Essential classes carry ``death = inf`` until ``remove_unpaired`` drops
    them. Points on the diagonal (birth == death) are kept until
    ``remove_diagonal``.
    """

    def __init__(self, dimension: int = 0, points: Iterable = ()):
        self.dimension = int(dimension)
        self._points: List[Point] = []
        for p in points:
            self.add(*p)

    def add(self, birth: float, death: float = INF) -> None:
        self._points.append(Point(float(birth), float(death)))

    @property
    def points(self) -> List[Point]:
        return list(self._points)

    # ----------------------------
    # Post-processing
    # ----------------------------

    def remove_diagonal(self) -> int:
        """Drop points with birth == death. Returns the number removed."""
        before = len(self._points)
        self._points = [p for p in self._points if p.birth != p.death]
        return before - len(self._points)

    def remove_unpaired(self) -> int:
        """Drop essential points. Returns the number removed."""
        before = len(self._points)
        self._points = [p for p in self._points if not p.is_essential]
        return before - len(self._points)

    # ----------------------------
    # Summaries
    # ----------------------------

    @property
    def betti(self) -> int:
        """Number of essential classes."""
        return sum(1 for p in self._points if p.is_essential)

    def persistence(self) -> np.ndarray:
        """Lifetimes |death - birth| of the finite points."""
        return np.array([p.persistence for p in self._points if not p.is_essential], dtype=float)

    def to_array(self) -> np.ndarray:
        """(n, 2) array of (birth, death); essential points have death = inf."""
        if not self._points:
            return np.zeros((0, 2), dtype=float)
        return np.array(self._points, dtype=float)

    def copy(self) -> "PersistenceDiagram":
        return PersistenceDiagram(self.dimension, self._points)

    def to_text(self, *, decimals: int = 4) -> str:
        r = int(decimals)
        lines = [f"Persistence diagram, dimension {self.dimension}: {len(self)} points, betti {self.betti}"]
        for p in sorted(self._points):
            death = "inf" if p.is_essential else f"{p.death:.{r}f}"
            lines.append(f"  ({p.birth:.{r}f}, {death})")
        return "\n".join(lines)

    # ----------------------------
    # Python protocol
    # ----------------------------

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __bool__(self) -> bool:
        return bool(self._points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PersistenceDiagram):
            return NotImplemented
        return self.dimension == other.dimension and sorted(self._points) == sorted(other._points)

    def __repr__(self) -> str:
        return f"PersistenceDiagram(dimension={self.dimension}, n={len(self)}, betti={self.betti})"


# ============================================================
# Construction
# ============================================================

def make_persistence_diagrams(
    pairing: PersistencePairing,
    source: Union[SimplicialComplex, Sequence[float], np.ndarray],
    dimensions: Optional[Sequence[int]] = None,
    *,
    max_dimension: Optional[int] = None,
) -> List[PersistenceDiagram]:
    """
    Turn an index pairing into one diagram per dimension.

    Parameters
    ----------
    pairing : PersistencePairing
    source : SimplicialComplex or array of weights
        Weights (and, for a complex, dimensions) indexed like the pairing.
    dimensions : sequence of int, optional
        Required when ``source`` is a weight array.
    max_dimension : int, optional
        Diagrams are returned for dimensions 0..max_dimension (default: the
        largest simplex dimension). Empty dimensions give empty diagrams.

    Returns
    -------
    list of PersistenceDiagram, index = dimension.
    """
    if isinstance(source, SimplicialComplex):
        weights = source.weights()
        dims = source.dimensions()
    else:
        if dimensions is None:
            raise ValueError("dimensions are required when passing raw weights.")
        weights = np.asarray(source, dtype=float).reshape(-1)
        dims = np.asarray(dimensions, dtype=int).reshape(-1)
        if weights.shape != dims.shape:
            raise ValueError(f"weights and dimensions must align. Got {weights.shape} and {dims.shape}.")

    if max_dimension is None:
        max_dimension = int(dims.max()) if dims.size else -1

    diagrams = [PersistenceDiagram(d) for d in range(max_dimension + 1)]

    for creator, destroyer in pairing:
        d = int(dims[creator])
        if d > max_dimension:
            continue
        if destroyer is None:
            diagrams[d].add(weights[creator])
        else:
            diagrams[d].add(weights[creator], weights[destroyer])

    return diagrams


def merge(D: PersistenceDiagram, E: PersistenceDiagram) -> PersistenceDiagram:
    """Union of two diagrams of the same dimension."""
    if D.dimension != E.dimension:
        raise StructuralViolation(
            f"Persistence diagram dimensions have to agree. Got {D.dimension} and {E.dimension}."
        )
    return PersistenceDiagram(D.dimension, list(D) + list(E))


def normalize(D: PersistenceDiagram, lo: float, hi: float) -> PersistenceDiagram:
    """
    Affinely map finite values from [lo, hi] to [0, 1].

    Essential deaths stay infinite; ``lo == hi`` leaves the values unchanged.
    """
    lo, hi = float(lo), float(hi)
    if lo == hi:
        return D.copy()
    span = hi - lo
    out = PersistenceDiagram(D.dimension)
    for p in D:
        death = p.death if p.is_essential else (p.death - lo) / span
        out.add((p.birth - lo) / span, death)
    return out
