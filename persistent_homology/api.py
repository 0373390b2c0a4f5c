from __future__ import annotations

"""
Public API re-exports for persistent_homology.

Import style:
    from persistent_homology.api import SimplicialComplex, calculate_persistence_diagrams, ...

Notes
-----
- This file is curated; lower-level pieces (column representations,
  reduction results, filtration order objects) stay in their subpackages.
"""

# ----------------------------
# Configuration / errors
# ----------------------------
from .config import DEFAULT_CONFIG, PersistenceConfig
from .errors import NotFound, PersistentHomologyError, StructuralViolation

# ----------------------------
# Complexes
# ----------------------------
from .topology import (
    AbsoluteOrder,
    DataOrder,
    LowerStarOrder,
    Simplex,
    SimplicialComplex,
    UpperStarOrder,
    barycentric_subdivision,
    cone,
    lower_filtration,
    lower_star_filtration,
    spine,
    suspension,
    upper_filtration,
    upper_star_filtration,
)

# ----------------------------
# Matrices and reduction
# ----------------------------
from .matrices import BoundaryMatrix, dualize
from .reduction import (
    PersistencePairing,
    StandardReduction,
    TwistReduction,
    calculate_double_persistence,
    calculate_persistence_diagrams,
    calculate_persistence_diagrams_batch,
    calculate_persistence_pairing,
)

# ----------------------------
# Diagrams
# ----------------------------
from .diagrams import (
    PersistenceDiagram,
    bottleneck_distance,
    hausdorff_distance,
    infinity_norm,
    make_persistence_diagrams,
    merge,
    normalize,
    p_norm,
    total_persistence,
    wasserstein_distance,
)

# ----------------------------
# Intersection homology
# ----------------------------
from .intersection import (
    Perversity,
    Stratification,
    calculate_intersection_homology,
    is_allowable,
    partition,
)

__all__ = [
    # config / errors
    "PersistenceConfig",
    "DEFAULT_CONFIG",
    "PersistentHomologyError",
    "StructuralViolation",
    "NotFound",
    # complexes
    "Simplex",
    "SimplicialComplex",
    "DataOrder",
    "AbsoluteOrder",
    "LowerStarOrder",
    "UpperStarOrder",
    "lower_star_filtration",
    "upper_star_filtration",
    "lower_filtration",
    "upper_filtration",
    "cone",
    "suspension",
    "barycentric_subdivision",
    "spine",
    # matrices / reduction
    "BoundaryMatrix",
    "dualize",
    "StandardReduction",
    "TwistReduction",
    "PersistencePairing",
    "calculate_persistence_pairing",
    "calculate_persistence_diagrams",
    "calculate_persistence_diagrams_batch",
    "calculate_double_persistence",
    # diagrams
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
    # intersection homology
    "Stratification",
    "Perversity",
    "is_allowable",
    "partition",
    "calculate_intersection_homology",
]
