# persistent_homology/topology/complex.py
from __future__ import annotations

from typing import Callable, Dict, Iterable, Iterator, List, Set, Union

import networkx as nx
import numpy as np

from ..errors import NotFound, StructuralViolation
from .simplex import Simplex

__all__ = [
    "SimplicialComplex",
]


OrderLike = Union[None, Callable[[Simplex], object], object]


def _key_function(order: OrderLike) -> Callable[[Simplex], object]:
    if order is None:
        return Simplex.filtration_key
    key = getattr(order, "key", None)
    if callable(key):
        return key
    if callable(order):
        return order  # type: ignore[return-value]
    raise TypeError(f"order must be a FiltrationOrder or a key callable. Got {type(order)!r}.")


class SimplicialComplex:
    """
    Ordered collection of simplices (a filtered complex).

    Position ``i`` in the complex is the filtration index of the simplex and
    is the same index used by the boundary matrix built from it. The complex
    does not close itself under faces: the caller supplies a face-closed set
    and sorts it (``sort``) into a filtration. ``validate`` checks both.

    Notes
    -----
    - ``remove`` refuses to break face closure; ``remove_without_validation``
      is the unchecked fast path for collapse-style algorithms that preserve
      closure by construction.
    - ``append`` / ``replace`` do not re-sort.
    """

    def __init__(self, simplices: Iterable[Union[Simplex, Iterable]] = ()):
        self._simplices: List[Simplex] = []
        self._index: Dict[Simplex, int] = {}
        for s in simplices:
            self.append(s)

    # ----------------------------
    # Construction / mutation
    # ----------------------------

    def append(self, simplex: Union[Simplex, Iterable]) -> None:
        s = simplex if isinstance(simplex, Simplex) else Simplex(simplex)
        if s in self._index:
            raise StructuralViolation(f"Duplicate simplex {s!r}.")
        self._index[s] = len(self._simplices)
        self._simplices.append(s)

    def sort(self, order: OrderLike = None) -> "SimplicialComplex":
        """
        Sort in place by a total order and return self.

        ``order`` is a FiltrationOrder (anything with ``key(simplex)``) or a
        plain key callable; the default is (weight, dimension, vertices).
        """
        key = _key_function(order)
        self._simplices.sort(key=key)
        self._reindex()
        return self

    def remove(self, simplex: Simplex) -> None:
        """Remove a simplex that is not a face of any other simplex."""
        s = self._simplices[self.index(simplex)]
        cofaces = self.cofaces_of(s)
        if cofaces:
            raise StructuralViolation(
                f"Cannot remove {s!r}: it is a face of {cofaces[0]!r}."
            )
        self.remove_without_validation(s)

    def remove_without_validation(self, simplex: Simplex) -> None:
        """
        Remove a simplex without checking face closure.

        Precondition: the caller guarantees that no remaining simplex has
        ``simplex`` as a face (e.g. an elementary collapse removing a free
        face together with its unique coface).
        """
        i = self.index(simplex)
        del self._index[self._simplices[i]]
        del self._simplices[i]
        for k in range(i, len(self._simplices)):
            self._index[self._simplices[k]] = k

    def replace(self, old: Simplex, new: Simplex) -> None:
        """Put ``new`` at the position of ``old``. Does not re-sort."""
        i = self.index(old)
        if new != old and new in self._index:
            raise StructuralViolation(f"Duplicate simplex {new!r}.")
        del self._index[self._simplices[i]]
        self._simplices[i] = new
        self._index[new] = i

    def copy(self) -> "SimplicialComplex":
        K = SimplicialComplex()
        K._simplices = list(self._simplices)
        K._index = dict(self._index)
        return K

    def _reindex(self) -> None:
        self._index = {s: i for i, s in enumerate(self._simplices)}

    # ----------------------------
    # Queries
    # ----------------------------

    def index(self, simplex: Union[Simplex, Iterable]) -> int:
        s = simplex if isinstance(simplex, Simplex) else Simplex(simplex)
        try:
            return self._index[s]
        except KeyError:
            raise NotFound(f"Simplex {s!r} is not part of the complex.") from None

    def at(self, i: int) -> Simplex:
        n = len(self._simplices)
        if not (0 <= i < n):
            raise IndexError(f"Index {i} out of range for complex of size {n}.")
        return self._simplices[i]

    def range(self, dimension: int) -> List[Simplex]:
        """Simplices of exactly ``dimension``, in filtration order."""
        return [s for s in self._simplices if s.dimension == dimension]

    def faces_of(self, simplex: Simplex) -> List[Simplex]:
        """Codimension-1 faces of ``simplex`` that are present, in filtration order."""
        idx = sorted(self._index[f] for f in simplex.boundary() if f in self._index)
        return [self._simplices[i] for i in idx]

    def cofaces_of(self, simplex: Simplex) -> List[Simplex]:
        """Codimension-1 cofaces of ``simplex`` that are present, in filtration order."""
        verts = set(simplex.vertices)
        return [
            t for t in self.range(simplex.dimension + 1)
            if verts.issubset(t.vertices)
        ]

    @property
    def dimension(self) -> int:
        """Maximum simplex dimension; -1 for the empty complex."""
        if not self._simplices:
            return -1
        return max(s.dimension for s in self._simplices)

    def vertices(self) -> List:
        verts: Set = set()
        for s in self._simplices:
            verts.update(s.vertices)
        return sorted(verts)

    def weights(self) -> np.ndarray:
        return np.array([s.weight for s in self._simplices], dtype=float)

    def dimensions(self) -> np.ndarray:
        return np.array([s.dimension for s in self._simplices], dtype=int)

    def one_skeleton(self) -> nx.Graph:
        """Graph of vertices and edges; edges carry their weight."""
        G = nx.Graph()
        for s in self._simplices:
            if s.dimension == 0:
                G.add_node(s.vertices[0], weight=s.weight)
            elif s.dimension == 1:
                a, b = s.vertices
                G.add_edge(a, b, weight=s.weight)
        return G

    # ----------------------------
    # Validation
    # ----------------------------

    def validate(self) -> None:
        """
        Check face closure and the filtration invariant.

        Raises NotFound for a missing face and StructuralViolation for a face
        that does not precede its coface.
        """
        for i, s in enumerate(self._simplices):
            for f in s.boundary():
                j = self._index.get(f)
                if j is None:
                    raise NotFound(f"Face {f!r} of {s!r} is missing from the complex.")
                if j >= i:
                    raise StructuralViolation(
                        f"Face {f!r} (index {j}) does not precede its coface {s!r} (index {i})."
                    )

    def is_valid_filtration(self) -> bool:
        try:
            self.validate()
        except (NotFound, StructuralViolation):
            return False
        return True

    # ----------------------------
    # Python protocol
    # ----------------------------

    def __len__(self) -> int:
        return len(self._simplices)

    def __iter__(self) -> Iterator[Simplex]:
        return iter(self._simplices)

    def __getitem__(self, i: int) -> Simplex:
        return self._simplices[i]

    def __contains__(self, simplex: object) -> bool:
        if not isinstance(simplex, Simplex):
            try:
                simplex = Simplex(simplex)  # type: ignore[arg-type]
            except (TypeError, ValueError):
                return False
        return simplex in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimplicialComplex):
            return NotImplemented
        return self._simplices == other._simplices

    def __repr__(self) -> str:
        return f"SimplicialComplex(n={len(self)}, dim={self.dimension})"

    def to_text(self) -> str:
        lines = [repr(self)]
        lines.extend(f"  [{i}] {s!r}" for i, s in enumerate(self._simplices))
        return "\n".join(lines)
