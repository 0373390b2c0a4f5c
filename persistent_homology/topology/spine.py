# persistent_homology/topology/spine.py
from __future__ import annotations

"""
Elementary simplicial collapses and the spine of a complex.

A simplex is *principal* if it is not a face of any other simplex; a face
of a principal simplex is *free* if that simplex is its only coface.
Removing a principal simplex together with a free face is an elementary
collapse, which preserves the homotopy type. Collapsing until no such pair
is left yields the spine.

Both removals of a collapse keep the complex face-closed by construction,
so they go through ``remove_without_validation``.
"""

from typing import Dict, List, Optional, Set

from .complex import SimplicialComplex
from .simplex import Simplex

__all__ = [
    "is_principal",
    "free_face",
    "principal_faces",
    "spine",
]


def is_principal(s: Simplex, K: SimplicialComplex) -> bool:
    """Vertices are never principal here: they have no free face."""
    if s.dimension == 0:
        return False
    return len(K.cofaces_of(s)) == 0


def free_face(s: Simplex, K: SimplicialComplex) -> Optional[Simplex]:
    """A free codimension-1 face of principal ``s``, or None."""
    if not is_principal(s, K):
        return None
    for f in K.faces_of(s):
        if len(K.cofaces_of(f)) == 1:
            return f
    return None


def principal_faces(K: SimplicialComplex) -> List[Simplex]:
    """Principal simplices that have at least one free face."""
    return [s for s in K if free_face(s, K) is not None]


def _coface_counts(K: SimplicialComplex) -> Dict[Simplex, int]:
    counts = {s: 0 for s in K}
    for s in K:
        for f in s.boundary():
            if f in counts:
                counts[f] += 1
    return counts


def spine(K: SimplicialComplex) -> SimplicialComplex:
    """
    Collapse K until no principal simplex has a free face.

    Returns a new complex in the same relative order as K.
    """
    L = K.copy()
    counts = _coface_counts(L)
    stack: List[Simplex] = [s for s in L if s.dimension > 0 and counts[s] == 0]
    removed: Set[Simplex] = set()

    while stack:
        s = stack.pop()
        if s in removed or counts[s] != 0:
            continue

        tau = None
        for f in s.boundary():
            if f not in removed and counts.get(f) == 1:
                tau = f
                break
        if tau is None:
            continue

        L.remove_without_validation(s)
        L.remove_without_validation(tau)
        removed.update((s, tau))

        for f in s.boundary():
            if f in removed or f not in counts:
                continue
            counts[f] -= 1
            if counts[f] == 0 and f.dimension > 0:
                stack.append(f)

        for g in tau.boundary():
            if g not in counts:
                continue
            counts[g] -= 1
            if counts[g] == 1:
                # g just became free: its remaining coface may now collapse
                stack.extend(c for c in L.cofaces_of(g) if counts[c] == 0)
            elif counts[g] == 0 and g.dimension > 0:
                stack.append(g)

        # faces of s that just became free
        stack.extend(c for f in s.boundary() if f not in removed and f in counts
                     for c in L.cofaces_of(f) if counts[c] == 0)

    return L
