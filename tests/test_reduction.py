"""Tests for the reduction algorithms, pairings and the persistence entry points."""
from dataclasses import replace

import numpy as np
import pytest


def triangle_boundary():
    from persistent_homology.topology import SimplicialComplex
    return SimplicialComplex([[0], [1], [2], [0, 1], [0, 2], [1, 2]]).sort()


def filled_triangle():
    from persistent_homology.topology import SimplicialComplex
    return SimplicialComplex([[0], [1], [2], [0, 1], [0, 2], [1, 2], [0, 1, 2]]).sort()


def tetrahedron_boundary():
    from persistent_homology.topology import SimplicialComplex
    return SimplicialComplex([
        [0], [1], [2], [3],
        [0, 1], [0, 2], [0, 3], [1, 2], [1, 3], [2, 3],
        [0, 1, 2], [0, 1, 3], [0, 2, 3], [1, 2, 3],
    ]).sort()


def random_lower_star(seed):
    """Subdivided solid tetrahedron with random vertex values."""
    from persistent_homology.topology import (
        SimplicialComplex, barycentric_subdivision, lower_star_filtration,
    )
    from itertools import combinations
    simplices = [list(c) for k in range(1, 5) for c in combinations(range(4), k)]
    K = barycentric_subdivision(SimplicialComplex(simplices).sort())
    rng = np.random.default_rng(seed)
    values = {v: float(x) for v, x in zip(K.vertices(), rng.random(len(K.vertices())))}
    return lower_star_filtration(K, values)


def betti(diagrams):
    return [D.betti for D in diagrams]


class TestAlgorithms:
    def test_standard_on_filled_triangle(self):
        from persistent_homology.matrices import BoundaryMatrix
        from persistent_homology.reduction import StandardReduction
        M = BoundaryMatrix.from_complex(filled_triangle())
        result = StandardReduction()(M)
        assert result.lows == {3: 1, 4: 2, 6: 5}
        assert result.cleared == set()
        assert M.is_empty(5)

    def test_twist_clears_creators(self):
        from persistent_homology.matrices import BoundaryMatrix
        from persistent_homology.reduction import TwistReduction
        M = BoundaryMatrix.from_complex(filled_triangle())
        result = TwistReduction()(M)
        assert result.lows == {3: 1, 4: 2, 6: 5}
        assert result.cleared == {5}
        assert M.is_empty(5)

    def test_twist_never_clears_vertices(self):
        from persistent_homology.matrices import BoundaryMatrix
        from persistent_homology.reduction import TwistReduction
        K = random_lower_star(3)
        M = BoundaryMatrix.from_complex(K)
        result = TwistReduction()(M)
        assert result.cleared
        assert all(K.at(i).dimension > 0 for i in result.cleared)
        assert result.cleared <= set(result.lows.values())

    @pytest.mark.parametrize("name", ["standard", "twist"])
    def test_deterministic(self, name):
        from persistent_homology.matrices import BoundaryMatrix
        from persistent_homology.reduction import get_algorithm
        K = random_lower_star(0)
        M = BoundaryMatrix.from_complex(K)
        algorithm = get_algorithm(name)
        first = algorithm(M.copy())
        second = algorithm(M.copy())
        assert first.lows == second.lows
        assert first.column_additions == second.column_additions

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_standard_and_twist_agree(self, seed):
        from persistent_homology.matrices import BoundaryMatrix
        from persistent_homology.reduction import StandardReduction, TwistReduction
        for representation in ("set", "vector"):
            M = BoundaryMatrix.from_complex(random_lower_star(seed), representation=representation)
            standard = StandardReduction()(M.copy())
            twist = TwistReduction()(M.copy())
            assert standard.lows == twist.lows

    def test_max_index_restricts_columns(self):
        from persistent_homology.matrices import BoundaryMatrix
        from persistent_homology.reduction import StandardReduction, TwistReduction
        M = BoundaryMatrix.from_complex(filled_triangle())
        assert StandardReduction()(M.copy(), max_index=5).lows == {3: 1, 4: 2}
        assert TwistReduction()(M.copy(), max_index=5).lows == {3: 1, 4: 2}
        with pytest.raises(ValueError):
            StandardReduction()(M.copy(), max_index=-1)

    def test_registry(self):
        from persistent_homology.reduction import ALGORITHMS, TwistReduction, get_algorithm
        assert set(ALGORITHMS) == {"standard", "twist"}
        strategy = TwistReduction()
        assert get_algorithm(strategy) is strategy
        with pytest.raises(ValueError):
            get_algorithm("chunk")
        with pytest.raises(TypeError):
            get_algorithm(3)


class TestPairing:
    def test_iteration_order(self):
        from persistent_homology.reduction import PersistencePairing
        p = PersistencePairing(pairs={3: 1, 4: 2}, essential=[0, 5], size=6)
        assert list(p) == [(1, 3), (2, 4), (0, None), (5, None)]
        assert len(p) == 4
        assert (1, 3) in p
        assert (0, None) in p
        assert (1, 4) not in p
        assert p.creators() == [1, 2]
        assert p.destroyers() == [3, 4]
        assert p.creator_of(4) == 2
        assert p.is_valid()

    def test_invalid_pairings(self):
        from persistent_homology.reduction import PersistencePairing
        assert not PersistencePairing(pairs={1: 3}).is_valid()
        assert not PersistencePairing(pairs={3: 1, 4: 1}).is_valid()
        assert not PersistencePairing(pairs={3: 1}, essential=[3]).is_valid()

    @pytest.mark.parametrize("dualize", [True, False])
    def test_pairing_of_triangle(self, dualize):
        from persistent_homology.config import PersistenceConfig
        from persistent_homology.matrices import BoundaryMatrix
        from persistent_homology.reduction import calculate_persistence_pairing
        M = BoundaryMatrix.from_complex(triangle_boundary())
        p = calculate_persistence_pairing(M, PersistenceConfig(dualize=dualize))
        assert p.pairs == {3: 1, 4: 2}
        assert p.essential == [0, 5]
        assert p.size == 6
        assert p.is_valid()
        # the input matrix is left untouched
        assert M.column(5) == [1, 2]

    def test_dualize_with_max_index(self):
        from persistent_homology.matrices import BoundaryMatrix
        from persistent_homology.reduction import calculate_persistence_pairing
        M = BoundaryMatrix.from_complex(triangle_boundary())
        with pytest.raises(ValueError):
            calculate_persistence_pairing(M, max_index=3)


class TestPersistenceDiagrams:
    def test_triangle_boundary(self):
        from persistent_homology.reduction import calculate_persistence_diagrams
        D = calculate_persistence_diagrams(triangle_boundary())
        assert len(D) == 2
        assert [d.dimension for d in D] == [0, 1]
        assert betti(D) == [1, 1]
        D[0].remove_diagonal()
        assert len(D[0]) == 1

    def test_filled_triangle(self):
        from persistent_homology.reduction import calculate_persistence_diagrams
        D = calculate_persistence_diagrams(filled_triangle())
        assert betti(D) == [1, 0, 0]

    def test_sphere_and_suspension(self):
        from persistent_homology.reduction import calculate_persistence_diagrams
        from persistent_homology.topology import suspension
        K = tetrahedron_boundary()
        assert betti(calculate_persistence_diagrams(K)) == [1, 0, 1]
        assert betti(calculate_persistence_diagrams(suspension(K))) == [1, 0, 0, 1]

    def test_spine_preserves_betti_numbers(self):
        from persistent_homology.reduction import calculate_persistence_diagrams
        from persistent_homology.topology import barycentric_subdivision, spine
        K = barycentric_subdivision(tetrahedron_boundary())
        assert betti(calculate_persistence_diagrams(spine(K))) == [1, 0, 1]

    def test_weighted_points(self):
        from persistent_homology.reduction import calculate_persistence_diagrams
        from persistent_homology.topology import Simplex, SimplicialComplex
        K = SimplicialComplex([Simplex([0], 0.0), Simplex([1], 1.0), Simplex([0, 1], 2.0)]).sort()
        D = calculate_persistence_diagrams(K)
        assert len(D) == 2
        assert sorted(D[0].points) == [(0.0, float("inf")), (1.0, 2.0)]
        assert len(D[1]) == 0

    def test_all_configurations_agree(self):
        from persistent_homology.config import PersistenceConfig
        from persistent_homology.reduction import calculate_persistence_diagrams
        K = random_lower_star(3)
        expected = calculate_persistence_diagrams(K)
        for algorithm in ("standard", "twist"):
            for representation in ("set", "vector"):
                for dualize in (True, False):
                    cfg = PersistenceConfig(algorithm=algorithm, representation=representation, dualize=dualize)
                    assert calculate_persistence_diagrams(K, cfg) == expected
        assert betti(expected) == [1, 0, 0, 0]

    def test_drop_top_dimensional_unpaired_creators(self):
        from persistent_homology.config import DEFAULT_CONFIG
        from persistent_homology.reduction import calculate_persistence_diagrams
        for dualize in (True, False):
            cfg = replace(DEFAULT_CONFIG, include_all_unpaired_creators=False, dualize=dualize)
            assert betti(calculate_persistence_diagrams(triangle_boundary(), cfg)) == [1, 0]

    def test_empty_complex(self):
        from persistent_homology.reduction import calculate_persistence_diagrams
        from persistent_homology.topology import SimplicialComplex
        assert calculate_persistence_diagrams(SimplicialComplex()) == []

    def test_unsorted_complex_is_rejected(self):
        from persistent_homology.errors import StructuralViolation
        from persistent_homology.reduction import calculate_persistence_diagrams
        from persistent_homology.topology import SimplicialComplex
        with pytest.raises(StructuralViolation):
            calculate_persistence_diagrams(SimplicialComplex([[0, 1], [0], [1]]))

    def test_invalid_config(self):
        from persistent_homology.config import PersistenceConfig
        from persistent_homology.reduction import calculate_persistence_diagrams
        with pytest.raises(ValueError):
            calculate_persistence_diagrams(triangle_boundary(), PersistenceConfig(representation="dense"))
        with pytest.raises(ValueError):
            PersistenceConfig(algorithm="chunk").validate()


class TestBatchAndDouble:
    def test_batch_keeps_input_order(self):
        from persistent_homology.reduction import calculate_persistence_diagrams_batch
        out = calculate_persistence_diagrams_batch(
            [triangle_boundary(), filled_triangle(), tetrahedron_boundary()], max_workers=2
        )
        assert [betti(D) for D in out] == [[1, 1], [1, 0, 0], [1, 0, 1]]
        assert calculate_persistence_diagrams_batch([]) == []

    def test_double_filtration(self):
        from persistent_homology.reduction import calculate_double_persistence
        from persistent_homology.topology import Simplex, SimplicialComplex
        K = SimplicialComplex([
            Simplex([0]), Simplex([1]), Simplex([2]),
            Simplex([0, 1], -1.0), Simplex([0, 2], -3.0), Simplex([1, 2], 2.0),
        ])
        D = calculate_double_persistence(K)
        assert [d.dimension for d in D] == [0, 1]
        finite = sorted(p for p in D[0] if not p.is_essential)
        assert finite == [(0.0, -3.0), (0.0, -1.0), (0.0, 2.0)]
        assert D[0].betti == 3
        assert len(D[1]) == 0

    def test_double_filtration_keeps_both_halves(self):
        from persistent_homology.reduction import calculate_double_persistence
        from persistent_homology.topology import Simplex, SimplicialComplex
        K = SimplicialComplex([
            Simplex([0]), Simplex([1]), Simplex([2]),
            Simplex([0, 1], -1.0), Simplex([0, 2], -1.0), Simplex([1, 2], -1.0),
            Simplex([0, 1, 2], -2.0),
            Simplex([3]), Simplex([0, 3], 1.0),
        ])
        D = calculate_double_persistence(K)
        assert [d.dimension for d in D] == [0, 1, 2]
        finite = sorted(p for p in D[0] if not p.is_essential)
        assert finite == [(0.0, -1.0), (0.0, -1.0), (0.0, 1.0)]
        assert D[0].betti == 5
        assert D[1].points == [(-1.0, -2.0)]
        assert len(D[2]) == 0

    def test_double_filtration_of_empty_complex(self):
        from persistent_homology.reduction import calculate_double_persistence
        from persistent_homology.topology import SimplicialComplex
        assert calculate_double_persistence(SimplicialComplex()) == []
