# persistent_homology/diagrams/distances.py
from __future__ import annotations

"""
Distances between persistence diagrams.

- hausdorff_distance: max-min over the two point sets (Euclidean in the plane).
- bottleneck_distance / wasserstein_distance: optimal partial matchings in
  which any finite point may instead be matched to its diagonal projection
  (L-infinity ground metric).

Essential points (death = inf) are only ever compared with essential points,
by birth. Two diagrams with different numbers of essential points are at
infinite bottleneck / Wasserstein distance.
"""

from typing import Tuple

import numpy as np
from scipy.optimize import linear_sum_assignment
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import maximum_bipartite_matching
from scipy.spatial.distance import cdist

from ..errors import StructuralViolation
from .diagram import PersistenceDiagram

__all__ = [
    "hausdorff_distance",
    "bottleneck_distance",
    "wasserstein_distance",
]

INF = float("inf")


def _split(D: PersistenceDiagram) -> Tuple[np.ndarray, np.ndarray]:
    """(finite (n,2) array, sorted essential births)."""
    A = D.to_array()
    ess = np.isinf(A[:, 1])
    return A[~ess], np.sort(A[ess, 0])


def _check_dimensions(D: PersistenceDiagram, E: PersistenceDiagram) -> None:
    if D.dimension != E.dimension:
        raise StructuralViolation(
            f"Cannot compare diagrams of dimensions {D.dimension} and {E.dimension}."
        )


# ============================================================
# Hausdorff
# ============================================================

def hausdorff_distance(D: PersistenceDiagram, E: PersistenceDiagram) -> float:
    """
    Hausdorff distance between the point sets of two diagrams.

    Returns 0 when both diagrams are empty and inf when exactly one is.
    The diagonal plays no role here.
    """
    _check_dimensions(D, E)
    if len(D) == 0 and len(E) == 0:
        return 0.0
    if len(D) == 0 or len(E) == 0:
        return INF

    Df, De = _split(D)
    Ef, Ee = _split(E)

    n, m = len(Df) + len(De), len(Ef) + len(Ee)
    dist = np.full((n, m), INF, dtype=float)
    if len(Df) and len(Ef):
        dist[: len(Df), : len(Ef)] = cdist(Df, Ef)
    if len(De) and len(Ee):
        dist[len(Df):, len(Ef):] = cdist(De[:, None], Ee[:, None])

    return float(max(dist.min(axis=1).max(), dist.min(axis=0).max()))


# ============================================================
# Matching distances
# ============================================================

def _augmented_cost(X: np.ndarray, Y: np.ndarray) -> np.ndarray:
    """
    Square (n+m) cost matrix for matching X against Y with diagonal slots.

    Rows: X points then m diagonal slots; columns: Y points then n diagonal
    slots. X_i may go to its own diagonal slot, Y_j to its own; two diagonal
    slots match for free.
    """
    n, m = len(X), len(Y)
    C = np.full((n + m, m + n), INF, dtype=float)
    if n and m:
        C[:n, :m] = cdist(X, Y, metric="chebyshev")
    if n:
        C[np.arange(n), m + np.arange(n)] = np.abs(X[:, 1] - X[:, 0]) / 2.0
    if m:
        C[n + np.arange(m), np.arange(m)] = np.abs(Y[:, 1] - Y[:, 0]) / 2.0
    C[n:, m:] = 0.0
    return C


def _bottleneck_finite(X: np.ndarray, Y: np.ndarray) -> float:
    if len(X) == 0 and len(Y) == 0:
        return 0.0
    C = _augmented_cost(X, Y)
    size = C.shape[0]
    candidates = np.unique(C[np.isfinite(C)])

    # smallest threshold admitting a perfect matching
    lo, hi = 0, len(candidates) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        graph = csr_matrix((C <= candidates[mid]).astype(np.int8))
        matching = maximum_bipartite_matching(graph, perm_type="column")
        if np.all(matching >= 0) and matching.size == size:
            hi = mid
        else:
            lo = mid + 1
    return float(candidates[lo])


def bottleneck_distance(D: PersistenceDiagram, E: PersistenceDiagram) -> float:
    """
    Bottleneck distance: the smallest eps such that a matching with every
    matched pair (or point-to-diagonal) at L-infinity distance <= eps exists.
    """
    _check_dimensions(D, E)
    Df, De = _split(D)
    Ef, Ee = _split(E)
    if len(De) != len(Ee):
        return INF

    ess = float(np.max(np.abs(De - Ee))) if len(De) else 0.0
    return max(ess, _bottleneck_finite(Df, Ef))


def wasserstein_distance(D: PersistenceDiagram, E: PersistenceDiagram, p: float = 2.0) -> float:
    """
    p-Wasserstein distance with L-infinity ground metric.

    Parameters
    ----------
    p : float
        Exponent, must be positive.
    """
    p = float(p)
    if p <= 0:
        raise ValueError(f"p must be positive. Got {p}.")
    _check_dimensions(D, E)
    Df, De = _split(D)
    Ef, Ee = _split(E)
    if len(De) != len(Ee):
        return INF

    total = float(np.sum(np.abs(De - Ee) ** p)) if len(De) else 0.0
    if len(Df) or len(Ef):
        C = _augmented_cost(Df, Ef) ** p
        rows, cols = linear_sum_assignment(C)
        total += float(C[rows, cols].sum())
    return total ** (1.0 / p)
