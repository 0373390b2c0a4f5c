"""
Persistent intersection homology: stratifications, perversities, the
allowability partition, and the restricted reduction.
"""

from __future__ import annotations

from .stratification import (
    Perversity,
    Stratification,
    intersection_dimension,
    is_allowable,
    partition,
)
from .calculation import calculate_intersection_homology

__all__ = [
    "Stratification",
    "Perversity",
    "intersection_dimension",
    "is_allowable",
    "partition",
    "calculate_intersection_homology",
]
