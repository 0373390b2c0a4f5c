"""Tests for column representations, boundary matrices and dualization."""
import numpy as np
import pytest


def filled_triangle():
    from persistent_homology.topology import SimplicialComplex
    return SimplicialComplex([[0], [1], [2], [0, 1], [0, 2], [1, 2], [0, 1, 2]]).sort()


class TestRepresentations:
    @pytest.mark.parametrize("name", ["set", "vector"])
    def test_add_is_symmetric_difference(self, name):
        from persistent_homology.matrices import make_column
        a = make_column(name, [3, 1, 1])
        assert a.rows() == [1, 3]
        a.add(make_column(name, [1, 2]))
        assert a.rows() == [2, 3]
        assert a.maximum() == 3
        assert len(a) == 2

    @pytest.mark.parametrize("name", ["set", "vector"])
    def test_empty_column(self, name):
        from persistent_homology.matrices import make_column
        a = make_column(name, [0, 4])
        a.add(make_column(name, [4, 0]))
        assert a.is_empty()
        assert a.maximum() is None
        b = make_column(name, [5])
        b.clear()
        assert b.is_empty()

    def test_mixed_representations(self):
        from persistent_homology.matrices import SortedColumn, VectorColumn
        a = SortedColumn([1, 5])
        a.add(VectorColumn([5, 7]))
        assert a.rows() == [1, 7]
        b = VectorColumn([1, 5])
        b.add(SortedColumn([1]))
        assert b.rows() == [5]

    def test_vector_push_remove(self):
        from persistent_homology.matrices import VectorColumn
        c = VectorColumn()
        c.push(4)
        c.push(9)
        c.push(2)
        assert c.maximum() == 9
        c.remove(9)
        assert c.maximum() == 4
        d = c.copy()
        d.push(10)
        assert c.maximum() == 4
        assert d.maximum() == 10

    def test_unknown_representation(self):
        from persistent_homology.matrices import make_column
        with pytest.raises(ValueError):
            make_column("dense", [1])


class TestBoundaryMatrix:
    @pytest.mark.parametrize("representation", ["set", "vector"])
    def test_from_complex(self, representation):
        from persistent_homology.matrices import BoundaryMatrix
        M = BoundaryMatrix.from_complex(filled_triangle(), representation=representation)
        assert M.num_columns == 7
        assert M.column(6) == [3, 4, 5]
        assert M.column(5) == [1, 2]
        assert M.column(0) == []
        assert M.max_dimension == 2
        assert M.dimensions == [0, 0, 0, 1, 1, 1, 2]
        assert M.num_nonzeros() == 9
        assert M.to_dense().sum() == 9
        assert M.representation == representation

    def test_order_check(self):
        from persistent_homology.errors import NotFound, StructuralViolation
        from persistent_homology.matrices import BoundaryMatrix
        from persistent_homology.topology import SimplicialComplex
        K = SimplicialComplex([[0, 1], [0], [1]])
        with pytest.raises(StructuralViolation):
            BoundaryMatrix.from_complex(K)
        M = BoundaryMatrix.from_complex(K, check_order=False)
        assert M.column(0) == [1, 2]
        with pytest.raises(NotFound):
            BoundaryMatrix.from_complex(SimplicialComplex([[0], [0, 1]]))

    def test_column_operations(self):
        from persistent_homology.matrices import BoundaryMatrix
        M = BoundaryMatrix.from_complex(filled_triangle())
        assert M.maximum_index(4) == 2
        M.add_column(3, 4)
        assert M.column(4) == [1, 2]
        M.add_column(5, 4)
        assert M.is_empty(4)
        assert M.maximum_index(4) is None
        M.set_column(4, [0, 2])
        assert M.column(4) == [0, 2]
        M.clear_column(6)
        assert M.is_empty(6)
        assert M.dimension_of(6) == 2

    def test_index_errors(self):
        from persistent_homology.matrices import BoundaryMatrix
        M = BoundaryMatrix.from_complex(filled_triangle())
        with pytest.raises(IndexError):
            M.maximum_index(7)
        with pytest.raises(IndexError):
            M.add_column(-1, 2)
        with pytest.raises(IndexError):
            M.set_column(3, [9])
        with pytest.raises(IndexError):
            BoundaryMatrix.from_columns([[1], [2]], [0, 1])

    def test_dense_round_trip(self):
        from persistent_homology.matrices import BoundaryMatrix
        M = BoundaryMatrix.from_complex(filled_triangle())
        A = M.to_dense()
        assert A.dtype == np.uint8
        N = BoundaryMatrix.from_dense(A, M.dimensions)
        assert N == M
        with pytest.raises(ValueError):
            BoundaryMatrix.from_dense(np.zeros((2, 3)), [0, 0, 0])

    def test_copy_is_independent(self):
        from persistent_homology.matrices import BoundaryMatrix
        M = BoundaryMatrix.from_complex(filled_triangle())
        N = M.copy()
        N.clear_column(6)
        assert M.column(6) == [3, 4, 5]
        assert M != N


class TestDualization:
    @pytest.mark.parametrize("representation", ["set", "vector"])
    def test_involution(self, representation):
        from persistent_homology.matrices import BoundaryMatrix, dualize
        M = BoundaryMatrix.from_complex(filled_triangle(), representation=representation)
        D = dualize(M)
        assert D.representation == representation
        assert dualize(D) == M

    def test_anti_transpose(self):
        from persistent_homology.matrices import BoundaryMatrix, dualize
        M = BoundaryMatrix.from_complex(filled_triangle())
        D = dualize(M)
        A = M.to_dense()
        assert np.array_equal(D.to_dense(), A[::-1, ::-1].T)
        assert D.dimensions == [0, 1, 1, 1, 2, 2, 2]
        assert D.max_dimension == 2
        # the triangle (old index 6) is the first dual column and has no coboundary
        assert D.column(0) == []
        # vertex 0 (old index 0) is a coface of edges {0,1} and {0,2} in the dual
        assert D.column(6) == [2, 3]

    def test_translate_dual_pair(self):
        from persistent_homology.matrices import translate_dual_pair
        assert translate_dual_pair(0, 2, 6) == (3, 5)
