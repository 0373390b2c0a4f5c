# persistent_homology/__init__.py
from __future__ import annotations

"""
persistent_homology: persistent homology and persistent intersection
homology of filtered simplicial complexes over GF(2).

Recommended usage:
    import persistent_homology as ph

    K = ph.SimplicialComplex([[0], [1], [2], [0, 1], [0, 2], [1, 2]]).sort()
    diagrams = ph.calculate_persistence_diagrams(K)

Public API:
    - Curated user-facing symbols are re-exported from :mod:`persistent_homology.api`.
    - Subpackages (``topology``, ``matrices``, ``reduction``, ``diagrams``,
      ``intersection``) expose the lower-level pieces.
"""

import logging

# ------------------------------------------------------------
# Version
# ------------------------------------------------------------
try:
    from ._version import __version__  # type: ignore
except ImportError:  # pragma: no cover
    __version__ = "0+unknown"

# ------------------------------------------------------------
# Curated public API re-export
# ------------------------------------------------------------
from .api import *  # noqa: F401,F403
from .api import __all__ as _api_all

from . import diagrams, intersection, matrices, reduction, topology

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    *_api_all,
    "topology",
    "matrices",
    "reduction",
    "diagrams",
    "intersection",
]
