"""
Persistence diagrams: construction from a pairing, post-processing, norms
and distances.
"""

from __future__ import annotations

from .diagram import Point, PersistenceDiagram, make_persistence_diagrams, merge, normalize
from .norms import infinity_norm, p_norm, total_persistence
from .distances import bottleneck_distance, hausdorff_distance, wasserstein_distance

__all__ = [
    "Point",
    "PersistenceDiagram",
    "make_persistence_diagrams",
    "merge",
    "normalize",
    "p_norm",
    "total_persistence",
    "infinity_norm",
    "hausdorff_distance",
    "bottleneck_distance",
    "wasserstein_distance",
]
