"""
Column reduction of boundary matrices and the end-to-end persistence
entry points.
"""

from __future__ import annotations

from .algorithms import (
    ALGORITHMS,
    ReductionAlgorithm,
    ReductionResult,
    StandardReduction,
    TwistReduction,
    get_algorithm,
)
from .pairing import PersistencePairing
from .calculation import (
    calculate_double_persistence,
    calculate_persistence_diagrams,
    calculate_persistence_diagrams_batch,
    calculate_persistence_pairing,
)

__all__ = [
    "ReductionResult",
    "ReductionAlgorithm",
    "StandardReduction",
    "TwistReduction",
    "ALGORITHMS",
    "get_algorithm",
    "PersistencePairing",
    "calculate_persistence_pairing",
    "calculate_persistence_diagrams",
    "calculate_persistence_diagrams_batch",
    "calculate_double_persistence",
]
