# persistent_homology/matrices/boundary_matrix.py
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import numpy as np

from ..errors import StructuralViolation
from ..topology.complex import SimplicialComplex
from .representations import Column, make_column

__all__ = [
    "BoundaryMatrix",
]


class BoundaryMatrix:
    """
    Square sparse GF(2) boundary matrix, stored column by column.

    Column ``j`` holds the indices of the codimension-1 faces of simplex ``j``
    of the complex it was built from; index ``i`` always denotes the simplex
    at position ``i``. Each column also records the dimension of its
    simplex, which the twist reduction and dualization rely on.

    Parameters
    ----------
    columns : list of Column
    dimensions : sequence of int
        Dimension of the simplex behind each column.
    max_dimension : int, optional
        Dimension of the ambient complex. Defaults to ``max(dimensions)``.
        Dualization maps ``d -> max_dimension - d`` and keeps this value.
    representation : {"set", "vector"}
    """

    def __init__(
        self,
        columns: List[Column],
        dimensions: Sequence[int],
        *,
        max_dimension: Optional[int] = None,
        representation: str = "set",
    ):
        if len(columns) != len(dimensions):
            raise ValueError(
                f"columns and dimensions must have equal length. Got {len(columns)} and {len(dimensions)}."
            )
        self._columns = list(columns)
        self._dimensions = [int(d) for d in dimensions]
        if max_dimension is None:
            max_dimension = max(self._dimensions, default=0)
        self._max_dimension = int(max_dimension)
        self._representation = representation

    # ----------------------------
    # Construction
    # ----------------------------

    @classmethod
    def from_complex(
        cls,
        K: SimplicialComplex,
        *,
        representation: str = "set",
        check_order: bool = True,
    ) -> "BoundaryMatrix":
        """
        Build the boundary matrix of K in one pass.

        Faces are looked up with ``K.index`` (a missing face raises NotFound).
        With ``check_order`` a face that does not precede its coface raises
        StructuralViolation; partitioned complexes (intersection homology)
        turn the check off.
        """
        columns: List[Column] = []
        dims: List[int] = []
        for j, s in enumerate(K):
            rows = [K.index(f) for f in s.boundary()]
            if check_order:
                for i in rows:
                    if i >= j:
                        raise StructuralViolation(
                            f"Face at index {i} does not precede its coface {s!r} at index {j}."
                        )
            columns.append(make_column(representation, rows))
            dims.append(s.dimension)
        return cls(columns, dims, max_dimension=max(K.dimension, 0), representation=representation)

    @classmethod
    def from_columns(
        cls,
        columns: Sequence[Iterable[int]],
        dimensions: Sequence[int],
        *,
        max_dimension: Optional[int] = None,
        representation: str = "set",
    ) -> "BoundaryMatrix":
        n = len(columns)
        cols = []
        for j, rows in enumerate(columns):
            col = make_column(representation, rows)
            m = col.maximum()
            if m is not None and (m >= n or min(col.rows()) < 0):
                raise IndexError(f"Column {j} has a row index outside [0, {n}).")
            cols.append(col)
        return cls(cols, dimensions, max_dimension=max_dimension, representation=representation)

    @classmethod
    def from_dense(
        cls,
        A: np.ndarray,
        dimensions: Sequence[int],
        *,
        max_dimension: Optional[int] = None,
        representation: str = "set",
    ) -> "BoundaryMatrix":
        A = np.asarray(A) % 2
        if A.ndim != 2 or A.shape[0] != A.shape[1]:
            raise ValueError(f"A must be a square 2D array. Got shape {A.shape}.")
        cols = [np.flatnonzero(A[:, j]) for j in range(A.shape[1])]
        return cls.from_columns(cols, dimensions, max_dimension=max_dimension, representation=representation)

    # ----------------------------
    # Shape / metadata
    # ----------------------------

    @property
    def num_columns(self) -> int:
        return len(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    @property
    def max_dimension(self) -> int:
        return self._max_dimension

    @property
    def representation(self) -> str:
        return self._representation

    @property
    def dimensions(self) -> List[int]:
        return list(self._dimensions)

    def dimension_of(self, j: int) -> int:
        self._check(j)
        return self._dimensions[j]

    def num_nonzeros(self) -> int:
        return sum(len(c) for c in self._columns)

    def _check(self, j: int) -> None:
        n = len(self._columns)
        if not (0 <= j < n):
            raise IndexError(f"Column index {j} out of range [0, {n}).")

    # ----------------------------
    # Column operations
    # ----------------------------

    def column(self, j: int) -> List[int]:
        self._check(j)
        return self._columns[j].rows()

    def set_column(self, j: int, rows: Iterable[int]) -> None:
        self._check(j)
        rows = list(rows)
        for i in rows:
            self._check(int(i))
        self._columns[j].set_rows(rows)

    def add_column(self, source: int, target: int) -> None:
        """column[target] <- column[target] XOR column[source]."""
        self._check(source)
        self._check(target)
        self._columns[target].add(self._columns[source])

    def maximum_index(self, j: int) -> Optional[int]:
        """Lowest one (largest row index) of column j; None when the column is empty."""
        self._check(j)
        return self._columns[j].maximum()

    def is_empty(self, j: int) -> bool:
        self._check(j)
        return self._columns[j].is_empty()

    def clear_column(self, j: int) -> None:
        self._check(j)
        self._columns[j].clear()

    # ----------------------------
    # Conversion
    # ----------------------------

    def copy(self) -> "BoundaryMatrix":
        return BoundaryMatrix(
            [c.copy() for c in self._columns],
            self._dimensions,
            max_dimension=self._max_dimension,
            representation=self._representation,
        )

    def to_dense(self) -> np.ndarray:
        n = len(self._columns)
        A = np.zeros((n, n), dtype=np.uint8)
        for j, c in enumerate(self._columns):
            rows = c.rows()
            if rows:
                A[rows, j] = 1
        return A

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundaryMatrix):
            return NotImplemented
        if len(self) != len(other) or self._dimensions != other._dimensions:
            return False
        return all(a.rows() == b.rows() for a, b in zip(self._columns, other._columns))

    def __repr__(self) -> str:
        return (
            f"BoundaryMatrix(n={len(self)}, nnz={self.num_nonzeros()}, "
            f"max_dim={self._max_dimension}, representation={self._representation!r})"
        )

    def to_text(self) -> str:
        lines = [repr(self)]
        for j, c in enumerate(self._columns):
            lines.append(f"  {j} [dim {self._dimensions[j]}]: {c.rows()}")
        return "\n".join(lines)
