# persistent_homology/diagrams/norms.py
from __future__ import annotations

import warnings

import numpy as np

from .diagram import PersistenceDiagram

__all__ = [
    "total_persistence",
    "p_norm",
    "infinity_norm",
]


def _lifetimes(D: PersistenceDiagram) -> np.ndarray:
    pers = D.persistence()
    if pers.size == 0 and len(D) > 0:
        warnings.warn(
            f"Diagram of dimension {D.dimension} has only essential points; its norm is 0.",
            RuntimeWarning,
        )
    return pers


def total_persistence(D: PersistenceDiagram, p: float = 1.0) -> float:
    """
    Sum of |death - birth|^p over the finite points.

    Essential points are ignored. An empty diagram has total persistence 0.
    """
    p = float(p)
    if p <= 0:
        raise ValueError(f"p must be positive. Got {p}.")
    pers = _lifetimes(D)
    if pers.size == 0:
        return 0.0
    return float(np.sum(pers ** p))


def p_norm(D: PersistenceDiagram, p: float = 2.0) -> float:
    """(total_persistence(D, p))^(1/p)."""
    p = float(p)
    if p <= 0:
        raise ValueError(f"p must be positive. Got {p}.")
    return float(total_persistence(D, p) ** (1.0 / p))


def infinity_norm(D: PersistenceDiagram) -> float:
    """Largest finite |death - birth|; 0 for an empty diagram."""
    pers = _lifetimes(D)
    if pers.size == 0:
        return 0.0
    return float(np.max(pers))
