# persistent_homology/errors.py
from __future__ import annotations

"""
Exception taxonomy.

- StructuralViolation: a filtration or stratification invariant is broken
  (face after coface, strata not nested, merging diagrams of different
  dimensions). Always fatal to the operation.
- NotFound: a simplex / vertex / index lookup missed.

Both subclass the builtin exception a caller would naturally catch
(ValueError / KeyError), so ``except ValueError`` keeps working.
Degenerate inputs (empty complex, empty diagram) are not errors: they
produce empty results.
"""

__all__ = [
    "PersistentHomologyError",
    "StructuralViolation",
    "NotFound",
]


class PersistentHomologyError(Exception):
    """Base class for all errors raised by this package."""


class StructuralViolation(PersistentHomologyError, ValueError):
    """A filtration or stratification invariant does not hold."""


class NotFound(PersistentHomologyError, KeyError):
    """A simplex or index lookup failed."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""
