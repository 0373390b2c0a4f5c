# persistent_homology/matrices/representations.py
from __future__ import annotations

"""
Column storage strategies for GF(2) boundary matrices.

A column is the set of row indices holding a 1. Two interchangeable
implementations share the ``Column`` interface:

- ``SortedColumn`` ("set"): sorted unique numpy array. Addition is a
  sorted symmetric difference; the maximum is the last entry, O(1).
- ``VectorColumn`` ("vector"): unordered Python list. Appending is O(1),
  removal and the maximum are O(size); the maximum is cached until the
  column changes.

The choice affects speed only, never the reduction result.
"""

from typing import Dict, Iterable, List, Optional, Protocol, Type

import numpy as np

__all__ = [
    "Column",
    "SortedColumn",
    "VectorColumn",
    "REPRESENTATIONS",
    "make_column",
]


class Column(Protocol):
    """Capability interface used by the reduction algorithms."""

    def add(self, other: "Column") -> None:
        """self <- self XOR other (GF(2) column addition), in place."""
        ...

    def maximum(self) -> Optional[int]:
        """Largest row index present, or None for an empty column."""
        ...

    def is_empty(self) -> bool:
        ...

    def rows(self) -> List[int]:
        """Row indices in increasing order."""
        ...

    def set_rows(self, rows: Iterable[int]) -> None:
        ...

    def clear(self) -> None:
        ...

    def copy(self) -> "Column":
        ...

    def __len__(self) -> int:
        ...


def _as_index_array(rows: Iterable[int]) -> np.ndarray:
    if isinstance(rows, np.ndarray):
        arr = rows.astype(np.int64, copy=False).reshape(-1)
    else:
        arr = np.fromiter((int(r) for r in rows), dtype=np.int64)
    return np.unique(arr)


# ============================================================
# Sorted representation
# ============================================================

class SortedColumn:
    """Sorted unique row indices stored in an int64 numpy array."""

    name = "set"
    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[int] = ()):
        self._rows = _as_index_array(rows)

    def add(self, other: Column) -> None:
        if isinstance(other, SortedColumn):
            theirs = other._rows
        else:
            theirs = _as_index_array(other.rows())
        if theirs.size == 0:
            return
        if self._rows.size == 0:
            self._rows = theirs.copy()
            return
        self._rows = np.setxor1d(self._rows, theirs, assume_unique=True)

    def maximum(self) -> Optional[int]:
        if self._rows.size == 0:
            return None
        return int(self._rows[-1])

    def is_empty(self) -> bool:
        return self._rows.size == 0

    def rows(self) -> List[int]:
        return [int(r) for r in self._rows]

    def as_array(self) -> np.ndarray:
        return self._rows.copy()

    def set_rows(self, rows: Iterable[int]) -> None:
        self._rows = _as_index_array(rows)

    def clear(self) -> None:
        self._rows = np.empty(0, dtype=np.int64)

    def copy(self) -> "SortedColumn":
        c = SortedColumn()
        c._rows = self._rows.copy()
        return c

    def __len__(self) -> int:
        return int(self._rows.size)

    def __repr__(self) -> str:
        return f"SortedColumn({self.rows()})"


# ============================================================
# Vector representation
# ============================================================

class VectorColumn:
    """Unordered row indices in a Python list, with a cached maximum."""

    name = "vector"
    __slots__ = ("_rows", "_max", "_max_valid")

    def __init__(self, rows: Iterable[int] = ()):
        self._rows: List[int] = []
        self._max: Optional[int] = None
        self._max_valid = True
        self.set_rows(rows)

    def push(self, row: int) -> None:
        """Append a row index that is not yet present (no duplicate check)."""
        row = int(row)
        self._rows.append(row)
        if self._max_valid and (self._max is None or row > self._max):
            self._max = row

    def remove(self, row: int) -> None:
        self._rows.remove(int(row))
        self._max_valid = False

    def add(self, other: Column) -> None:
        theirs = other._rows if isinstance(other, VectorColumn) else other.rows()
        if not theirs:
            return
        mine = set(self._rows)
        incoming = set(theirs)
        self._rows = [r for r in self._rows if r not in incoming]
        self._rows.extend(r for r in theirs if r not in mine)
        self._max_valid = False

    def maximum(self) -> Optional[int]:
        if not self._max_valid:
            self._max = max(self._rows) if self._rows else None
            self._max_valid = True
        return self._max

    def is_empty(self) -> bool:
        return not self._rows

    def rows(self) -> List[int]:
        return sorted(self._rows)

    def set_rows(self, rows: Iterable[int]) -> None:
        # GF(2): presence only, duplicates collapse
        self._rows = list(dict.fromkeys(int(r) for r in rows))
        self._max_valid = False

    def clear(self) -> None:
        self._rows = []
        self._max = None
        self._max_valid = True

    def copy(self) -> "VectorColumn":
        c = VectorColumn()
        c._rows = list(self._rows)
        c._max = self._max
        c._max_valid = self._max_valid
        return c

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return f"VectorColumn({self.rows()})"


# ============================================================
# Registry
# ============================================================

REPRESENTATIONS: Dict[str, Type] = {
    SortedColumn.name: SortedColumn,
    VectorColumn.name: VectorColumn,
}


def make_column(representation: str, rows: Iterable[int] = ()) -> Column:
    try:
        cls = REPRESENTATIONS[representation]
    except KeyError:
        raise ValueError(
            f"Unknown representation {representation!r}. Expected one of {sorted(REPRESENTATIONS)}."
        ) from None
    return cls(rows)
