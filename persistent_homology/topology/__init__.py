"""
Simplices, filtered simplicial complexes, filtration orders, and
combinatorial constructions.

Typical usage
-------------
>>> from persistent_homology.topology import Simplex, SimplicialComplex
>>> K = SimplicialComplex([[0], [1], [2], [0, 1], [0, 2], [1, 2]]).sort()
"""

from __future__ import annotations

from .simplex import Simplex, canon_simplex
from .complex import SimplicialComplex
from .filtrations import (
    AbsoluteOrder,
    DataOrder,
    FiltrationOrder,
    LowerStarOrder,
    UpperStarOrder,
    lower_filtration,
    lower_star_filtration,
    semi_filtration,
    upper_filtration,
    upper_star_filtration,
)
from .constructions import barycentric_subdivision, cone, suspension
from .spine import free_face, is_principal, principal_faces, spine

__all__ = [
    "Simplex",
    "canon_simplex",
    "SimplicialComplex",
    "FiltrationOrder",
    "DataOrder",
    "AbsoluteOrder",
    "LowerStarOrder",
    "UpperStarOrder",
    "lower_star_filtration",
    "upper_star_filtration",
    "semi_filtration",
    "lower_filtration",
    "upper_filtration",
    "cone",
    "suspension",
    "barycentric_subdivision",
    "is_principal",
    "free_face",
    "principal_faces",
    "spine",
]
