# persistent_homology/matrices/dualization.py
from __future__ import annotations

from typing import List, Tuple

from .boundary_matrix import BoundaryMatrix

__all__ = [
    "dualize",
    "translate_dual_pair",
]


def dualize(M: BoundaryMatrix) -> BoundaryMatrix:
    """
    Anti-transpose of a boundary matrix (the coboundary matrix of the
    reversed filtration).

    With n columns, old index i becomes n-1-i and rows/columns swap roles:
    dual column n-1-i holds n-1-j for every column j that contains row i.
    Dimensions become ``max_dimension - d`` so the dual is again graded
    from 0 upwards; ``max_dimension`` is kept and dualizing twice returns
    the original matrix.
    """
    n = M.num_columns
    dual_rows: List[List[int]] = [[] for _ in range(n)]
    for j in range(n):
        for i in M.column(j):
            dual_rows[n - 1 - i].append(n - 1 - j)

    top = M.max_dimension
    dims = [top - d for d in reversed(M.dimensions)]
    return BoundaryMatrix.from_columns(
        dual_rows,
        dims,
        max_dimension=top,
        representation=M.representation,
    )


def translate_dual_pair(i: int, j: int, n: int) -> Tuple[int, int]:
    """
    Map a dual pair (row i, column j) to the primal (creator, destroyer).

    A dual pair (i, j) with i < j corresponds to the primal pair
    (n-1-j, n-1-i), again with creator < destroyer.
    """
    return (n - 1 - j, n - 1 - i)
