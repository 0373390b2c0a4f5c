# persistent_homology/topology/simplex.py
from __future__ import annotations

from itertools import combinations
from numbers import Integral
from typing import Any, Hashable, Iterable, Iterator, Tuple

__all__ = [
    "Simplex",
    "canon_simplex",
]

Vertex = Hashable


def canon_simplex(sig: Iterable[Vertex]) -> Tuple[Vertex, ...]:
    """Sorted vertex tuple; raises on duplicates or an empty vertex set."""
    verts = tuple(sorted(sig))
    if len(verts) == 0:
        raise ValueError("A simplex needs at least one vertex.")
    if len(set(verts)) != len(verts):
        raise ValueError(f"Simplex vertices must be distinct. Got {verts}.")
    return verts


class Simplex:
    """
    Immutable simplex: a set of distinct vertices annotated with a weight.

    Equality and hashing only look at the vertex set. The weight (filtration
    value) is an annotation, so a face computed from vertices alone can be
    looked up in a complex.

    The default total order compares ``(weight, dimension, vertices)``.
    With equal weights every proper face sorts strictly before its cofaces.
    """

    __slots__ = ("_vertices", "_weight")

    def __init__(self, vertices: Iterable[Vertex], weight: float = 0.0):
        if isinstance(vertices, Integral):
            vertices = (vertices,)
        object.__setattr__(self, "_vertices", canon_simplex(vertices))
        object.__setattr__(self, "_weight", float(weight))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Simplex is immutable.")

    # ----------------------------
    # Basic properties
    # ----------------------------

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        return self._vertices

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def dimension(self) -> int:
        return len(self._vertices) - 1

    def with_weight(self, weight: float) -> "Simplex":
        return Simplex(self._vertices, weight)

    def filtration_key(self) -> Tuple[float, int, Tuple[Vertex, ...]]:
        return (self._weight, self.dimension, self._vertices)

    # ----------------------------
    # Faces
    # ----------------------------

    def boundary(self) -> Iterator["Simplex"]:
        """Codimension-1 faces (none for a vertex). Faces inherit the weight."""
        if self.dimension == 0:
            return
        for verts in combinations(self._vertices, len(self._vertices) - 1):
            yield Simplex(verts, self._weight)

    def faces(self) -> Iterator["Simplex"]:
        """All proper, non-empty faces, largest first."""
        for size in range(len(self._vertices) - 1, 0, -1):
            for verts in combinations(self._vertices, size):
                yield Simplex(verts, self._weight)

    def is_face_of(self, other: "Simplex") -> bool:
        """True if self is a (not necessarily proper) face of other."""
        return set(self._vertices).issubset(other._vertices)

    def contains(self, vertex: Vertex) -> bool:
        return vertex in self._vertices

    # ----------------------------
    # Python protocol
    # ----------------------------

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._vertices

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Simplex):
            return NotImplemented
        return self._vertices == other._vertices

    def __hash__(self) -> int:
        return hash(self._vertices)

    def __lt__(self, other: "Simplex") -> bool:
        if not isinstance(other, Simplex):
            return NotImplemented
        return self.filtration_key() < other.filtration_key()

    def __reduce__(self):
        return (Simplex, (self._vertices, self._weight))

    def __repr__(self) -> str:
        verts = ",".join(str(v) for v in self._vertices)
        return f"Simplex({{{verts}}}, weight={self._weight:g})"
