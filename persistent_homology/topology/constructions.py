# persistent_homology/topology/constructions.py
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .complex import SimplicialComplex
from .simplex import Simplex

__all__ = [
    "cone",
    "suspension",
    "barycentric_subdivision",
]


def _next_vertex(K: SimplicialComplex) -> int:
    verts = K.vertices()
    if not verts:
        return 0
    try:
        return int(max(int(v) for v in verts)) + 1
    except (TypeError, ValueError) as e:
        raise ValueError("Constructions need integer vertex ids.") from e


def _max_weight(K: SimplicialComplex) -> float:
    return max((s.weight for s in K), default=0.0)


def _cone_simplices(K: SimplicialComplex, apex: int, weight: float) -> List[Simplex]:
    out = [Simplex((apex,), weight)]
    for s in K:
        out.append(Simplex(s.vertices + (apex,), max(s.weight, weight)))
    return out


def cone(
    K: SimplicialComplex,
    *,
    apex: Optional[int] = None,
    weight: Optional[float] = None,
) -> SimplicialComplex:
    """
    Cone over K: K plus an apex vertex joined to every simplex.

    The apex gets ``weight`` (default: the largest weight in K) and every
    joined simplex gets ``max(weight(s), weight)``, so the result sorts into
    a valid filtration. ``|cone(K)| = 2|K| + 1``.
    """
    a = _next_vertex(K) if apex is None else int(apex)
    w = _max_weight(K) if weight is None else float(weight)
    C = SimplicialComplex(list(K) + _cone_simplices(K, a, w))
    return C.sort()


def suspension(K: SimplicialComplex, *, weight: Optional[float] = None) -> SimplicialComplex:
    """Two cones over K glued along K. ``|suspension(K)| = 3|K| + 2``."""
    a = _next_vertex(K)
    b = a + 1
    w = _max_weight(K) if weight is None else float(weight)
    S = SimplicialComplex(list(K) + _cone_simplices(K, a, w) + _cone_simplices(K, b, w))
    return S.sort()


def barycentric_subdivision(K: SimplicialComplex) -> SimplicialComplex:
    """
    Barycentric subdivision.

    Original vertices keep their ids; the barycenter of every higher
    simplex gets a fresh id (in filtration order of K). A new simplex is a
    flag sigma_0 < ... < sigma_k of faces in K and carries the weight of
    sigma_k.
    """
    next_id = _next_vertex(K)
    bary: Dict[Simplex, int] = {}
    for s in K:
        if s.dimension == 0:
            bary[s] = s.vertices[0]
        else:
            bary[s] = next_id
            next_id += 1

    # flags ending in s, as tuples of barycenter ids
    flags: Dict[Simplex, List[Tuple[int, ...]]] = {}

    def flags_ending_in(s: Simplex) -> List[Tuple[int, ...]]:
        if s in flags:
            return flags[s]
        out: List[Tuple[int, ...]] = [(bary[s],)]
        for f in s.faces():
            if f in bary:
                out.extend(c + (bary[s],) for c in flags_ending_in(f))
        flags[s] = out
        return out

    L = SimplicialComplex()
    for s in K:
        for c in flags_ending_in(s):
            L.append(Simplex(c, s.weight))
    return L.sort()
