# persistent_homology/intersection/stratification.py
from __future__ import annotations

"""
Stratifications, perversities, and the allowability condition.

A stratification is a nested sequence X_0 <= X_1 <= ... <= X_n of
subcomplexes, X_n being the whole space; X_{n-k} is the stratum of
codimension k. A simplex s is allowable for a perversity p if, for every
k = 1..n with s meeting X_{n-k},

    dim(s & X_{n-k}) <= dim(s) - k + p(k),

where s & X is the largest face of s contained in X.
"""

from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, List, Sequence, Tuple, Union

from ..errors import StructuralViolation
from ..topology.complex import SimplicialComplex
from ..topology.simplex import Simplex, canon_simplex

__all__ = [
    "Stratification",
    "Perversity",
    "intersection_dimension",
    "is_allowable",
    "partition",
]

SimplexKey = Tuple
StratumLike = Union[SimplicialComplex, Iterable]


def _simplex_set(stratum: StratumLike) -> FrozenSet[SimplexKey]:
    out = set()
    for s in stratum:
        if isinstance(s, Simplex):
            out.add(s.vertices)
        elif isinstance(s, int):
            out.add((s,))
        else:
            out.add(canon_simplex(s))
    return frozenset(out)


class Stratification:
    """
    Nested strata X_0 <= ... <= X_n, each given as a complex or as an
    iterable of simplices (vertex collections).

    Raises
    ------
    ValueError
        Fewer than two strata.
    StructuralViolation
        A stratum is not contained in the next one.
    """

    def __init__(self, strata: Sequence[StratumLike]):
        strata = list(strata)
        if len(strata) < 2:
            raise ValueError(f"A stratification needs at least two strata. Got {len(strata)}.")
        self._strata: List[FrozenSet[SimplexKey]] = [_simplex_set(X) for X in strata]

        for i in range(len(self._strata) - 1):
            missing = self._strata[i] - self._strata[i + 1]
            if missing:
                example = sorted(missing)[0]
                raise StructuralViolation(
                    f"Strata are not nested: simplex {example} of X_{i} is missing from X_{i + 1}."
                )

    @property
    def n(self) -> int:
        """Index of the top stratum (the number of codimensions)."""
        return len(self._strata) - 1

    def stratum(self, i: int) -> FrozenSet[SimplexKey]:
        if not (0 <= i <= self.n):
            raise IndexError(f"Stratum index {i} out of range [0, {self.n}].")
        return self._strata[i]

    def codimension_stratum(self, k: int) -> FrozenSet[SimplexKey]:
        """X_{n-k}."""
        return self.stratum(self.n - k)

    def __len__(self) -> int:
        return len(self._strata)

    def __repr__(self) -> str:
        sizes = ", ".join(str(len(X)) for X in self._strata)
        return f"Stratification(n={self.n}, sizes=[{sizes}])"


@dataclass(frozen=True)
class Perversity:
    """
    Integer sequence indexed by codimension: ``p(k) = values[k-1]`` for
    ``1 <= k <= len(values)``, and 0 beyond.
    """
    values: Tuple[int, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "values", tuple(int(v) for v in self.values))

    def __call__(self, k: int) -> int:
        if 1 <= k <= len(self.values):
            return self.values[k - 1]
        return 0

    def __len__(self) -> int:
        return len(self.values)


def intersection_dimension(simplex: Simplex, stratum: FrozenSet[SimplexKey]) -> int:
    """Dimension of the largest face of ``simplex`` lying in ``stratum``; -1 if none."""
    if simplex.vertices in stratum:
        return simplex.dimension
    for face in simplex.faces():
        if face.vertices in stratum:
            return face.dimension
    return -1


def is_allowable(simplex: Simplex, stratification: Stratification, perversity: Perversity) -> bool:
    d = simplex.dimension
    for k in range(1, stratification.n + 1):
        dim_int = intersection_dimension(simplex, stratification.codimension_stratum(k))
        if dim_int < 0:
            continue
        if dim_int > d - k + perversity(k):
            return False
    return True


def partition(
    K: SimplicialComplex,
    predicate: Callable[[Simplex], bool],
) -> Tuple[SimplicialComplex, int]:
    """
    Stable split of K into the simplices satisfying ``predicate`` followed
    by the rest.

    Returns
    -------
    L : SimplicialComplex
        Same simplices as K; generally not a valid filtration any more.
    s : int
        Number of simplices satisfying the predicate (L[:s]).
    """
    good, bad = [], []
    for simplex in K:
        (good if predicate(simplex) else bad).append(simplex)
    return SimplicialComplex(good + bad), len(good)
