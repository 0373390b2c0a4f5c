"""
Sparse GF(2) boundary matrices, their column representations, and
dualization.
"""

from __future__ import annotations

from .representations import (
    REPRESENTATIONS,
    Column,
    SortedColumn,
    VectorColumn,
    make_column,
)
from .boundary_matrix import BoundaryMatrix
from .dualization import dualize, translate_dual_pair

__all__ = [
    "Column",
    "SortedColumn",
    "VectorColumn",
    "REPRESENTATIONS",
    "make_column",
    "BoundaryMatrix",
    "dualize",
    "translate_dual_pair",
]
