"""
Tests for Matrix4x4.

Covers construction, transformation and composition, the determinant
family (2x2 determinants, minors, Laplace expansion), the cofactor sign
pattern, transpose, and 3x3 sub-matrix extraction.
"""

import pytest
from fractions import Fraction

import sympy as sp

from exact_vecmath.core.exceptions import ShapeError, TermDivisionError
from exact_vecmath.linalg import (
    Matrix3x3,
    Matrix4x4,
    Vector4,
    all_but,
    identity,
    scaling,
    translation,
    zero_matrix,
)
from exact_vecmath.terms import Symbol, evaluate, negate, one, symbols, zero


def marker(row, col):
    """The symbol at (row, col) of the marker_matrix fixture."""
    return Symbol(f"a{row}{col}")


def evaluate_matrix(matrix, bindings):
    """Evaluate every entry of a matrix to a Fraction."""
    return Matrix4x4([[evaluate(t, bindings) for t in row] for row in matrix.elements])


# =============================================================================
# Construction
# =============================================================================

class TestMatrixCreation:
    """Tests for the 4x4 shape contract."""

    def test_accepts_4x4(self):
        m = Matrix4x4([[0] * 4 for _ in range(4)])
        assert m == zero_matrix()

    def test_rejects_wrong_row_count(self):
        with pytest.raises(ShapeError, match="4 rows"):
            Matrix4x4([[0] * 4 for _ in range(3)])
        with pytest.raises(ShapeError):
            Matrix4x4([[0] * 4 for _ in range(5)])

    def test_rejects_wrong_row_length(self):
        rows = [[0] * 4 for _ in range(4)]
        rows[2] = [0, 0, 0]
        with pytest.raises(ShapeError, match="row 2"):
            Matrix4x4(rows)

    def test_rejects_non_sequence_rows(self):
        with pytest.raises(ShapeError):
            Matrix4x4([1, 2, 3, 4])
        with pytest.raises(ShapeError):
            Matrix4x4("abcd")

    def test_shape_error_is_value_error(self):
        with pytest.raises(ValueError):
            Matrix4x4([])

    def test_rejects_float_entries(self):
        with pytest.raises(TypeError):
            Matrix4x4([[0.5] * 4 for _ in range(4)])

    def test_input_rows_are_copied(self):
        rows = [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]]
        m = Matrix4x4(rows)
        rows[0][0] = 9
        assert m == identity()

    def test_immutable(self, identity_matrix):
        with pytest.raises(AttributeError):
            identity_matrix._elements = ()
        with pytest.raises(TypeError):
            identity_matrix.elements[0][0] = zero

    def test_access(self, dense_matrix):
        assert dense_matrix[1, 2] == 2
        assert dense_matrix.row(3) == (9, 7, 9, 3)
        assert dense_matrix.column(0) == (3, 5, 5, 9)

    def test_access_out_of_range(self, dense_matrix):
        with pytest.raises(IndexError):
            dense_matrix[4, 0]
        with pytest.raises(IndexError):
            dense_matrix.row(-1)

    def test_hashable(self, dense_matrix):
        assert len({dense_matrix, Matrix4x4(dense_matrix.elements)}) == 1


# =============================================================================
# Transformation and Composition
# =============================================================================

class TestTransform:
    """Tests for matrix-vector products."""

    def test_identity_transform(self, identity_matrix, symbolic_vector):
        assert identity_matrix.transform(symbolic_vector) == symbolic_vector

    def test_translation(self):
        assert translation(5, 6, 7).transform(Vector4(1, 2, 3)) == Vector4(6, 8, 10, 1)

    def test_translation_leaves_directions(self):
        """Directions (w = 0) are not translated."""
        assert translation(5, 6, 7).transform(Vector4(1, 2, 3, 0)) == Vector4(1, 2, 3, 0)

    def test_column_vector_convention(self, dense_matrix):
        """Row i of the result is row i of the matrix dotted with the vector."""
        result = dense_matrix.transform(Vector4(1, 0, 0, 0))
        assert result == Vector4(*dense_matrix.column(0))
        result = dense_matrix.transform(Vector4(1, 1, 1, 1))
        assert result == Vector4(9, 22, 21, 28)

    def test_matmul_operator(self, dense_matrix):
        v = Vector4(1, 2, 3, 4)
        assert dense_matrix @ v == dense_matrix.transform(v)


class TestScaleAndDivide:
    """Tests for scaling all entries by a common factor."""

    def test_scale_by_one_returns_same_matrix(self, marker_matrix):
        assert marker_matrix.scale_by(one) is marker_matrix
        assert marker_matrix.scale_by(1) is marker_matrix

    def test_divide_by_one_returns_same_matrix(self, marker_matrix):
        assert marker_matrix.divide_by(one) is marker_matrix

    def test_scale_by(self, identity_matrix):
        scaled = identity_matrix.scale_by(3)
        assert scaled == Matrix4x4([[3, 0, 0, 0], [0, 3, 0, 0], [0, 0, 3, 0], [0, 0, 0, 3]])

    def test_divide_by(self, dense_matrix):
        halved = dense_matrix.divide_by(2)
        assert halved[0, 0] == sp.Rational(3, 2)
        assert halved.scale_by(2) == dense_matrix

    def test_divide_by_zero_propagates(self, dense_matrix):
        with pytest.raises(TermDivisionError):
            dense_matrix.divide_by(0)


class TestMultiplyMatrix:
    """Tests for matrix composition."""

    def test_right_identity(self, marker_matrix, identity_matrix):
        assert marker_matrix.multiply_matrix(identity_matrix) == marker_matrix

    def test_left_identity(self, marker_matrix, identity_matrix):
        assert identity_matrix.multiply_matrix(marker_matrix) == marker_matrix

    def test_right_identity_with_hand_built_entries(self, identity_matrix):
        """Entries built directly with sympy still satisfy m @ I == m."""
        a, b = symbols('a b')
        m = Matrix4x4([
            [sp.Add(2, a, evaluate=False), 0, 0, 0],
            [0, sp.Mul(b, a, evaluate=False), 0, 0],
            [0, 0, 1, 0],
            [0, 0, 0, 1],
        ])
        assert m.multiply_matrix(identity_matrix) == m
        assert m[1, 1] == a * b

    def test_translations_compose(self):
        composed = translation(1, 2, 3).multiply_matrix(translation(4, 5, 6))
        assert composed == translation(5, 7, 9)

    def test_cross_multiply_is_dot_product(self, dense_matrix, triangular_matrix):
        """Entry [row][col] of the product is row . column."""
        product = dense_matrix.multiply_matrix(triangular_matrix)
        for row in range(4):
            for col in range(4):
                expected = sum(
                    evaluate(a) * evaluate(b)
                    for a, b in zip(dense_matrix.row(row), triangular_matrix.column(col))
                )
                assert evaluate(product[row, col]) == expected
                assert evaluate(Matrix4x4.cross_multiply(
                    dense_matrix, row, triangular_matrix, col
                )) == expected

    def test_matmul_operator(self, dense_matrix, triangular_matrix):
        assert dense_matrix @ triangular_matrix == dense_matrix.multiply_matrix(triangular_matrix)

    def test_composition_order(self):
        """(A @ B) v == A (B v)."""
        a = translation(1, 0, 0)
        b = scaling(2, 2, 2)
        v = Vector4(1, 1, 1)
        assert (a @ b).transform(v) == a.transform(b.transform(v))
        assert (a @ b).transform(v) == Vector4(3, 2, 2, 1)


# =============================================================================
# Determinant Family
# =============================================================================

class TestAllBut:
    """Tests for the index-exclusion helper."""

    def test_ascending_order(self):
        assert all_but(0) == [1, 2, 3]
        assert all_but(1) == [0, 2, 3]
        assert all_but(2) == [0, 1, 3]
        assert all_but(3) == [0, 1, 2]

    def test_out_of_range(self):
        with pytest.raises(IndexError):
            all_but(4)


class TestDeterminant2x2:
    """Tests for determinant2x2."""

    def test_value(self, dense_matrix):
        # rows 0,1 / cols 0,1: 3*9 - 1*5
        assert dense_matrix.determinant2x2(0, 1, 0, 1) == 22

    def test_order_as_passed(self, dense_matrix):
        """Swapping the columns negates the result."""
        assert dense_matrix.determinant2x2(0, 1, 1, 0) == -22
        assert dense_matrix.determinant2x2(1, 0, 0, 1) == -22

    def test_symbolic_form(self, marker_matrix):
        expected = marker(2, 1) * marker(3, 3) - marker(2, 3) * marker(3, 1)
        assert marker_matrix.determinant2x2(2, 3, 1, 3) == expected


class TestMinor:
    """Tests for minor(row, col)."""

    def test_identity_minors(self, identity_matrix):
        for row in range(4):
            for col in range(4):
                expected = one if row == col else zero
                assert identity_matrix.minor(row, col) == expected

    def test_triangular_minors(self, triangular_matrix):
        assert triangular_matrix.minor(0, 0) == 24
        assert triangular_matrix.minor(3, 3) == 6
        assert triangular_matrix.minor(0, 1) == 0
        assert triangular_matrix.minor(1, 0) == 24

    def test_matches_expansion_along_first_remaining_row(self, marker_matrix):
        """minor(1, 2) expands the 3x3 of rows {0,2,3} and cols {0,1,3}."""
        m = marker_matrix
        expected = (
            marker(0, 0) * m.determinant2x2(2, 3, 1, 3)
            - marker(0, 1) * m.determinant2x2(2, 3, 0, 3)
            + marker(0, 3) * m.determinant2x2(2, 3, 0, 1)
        )
        assert m.minor(1, 2) == sp.expand(expected)

    def test_matches_reduced_determinant(self, dense_matrix):
        for row in range(4):
            for col in range(4):
                assert dense_matrix.minor(row, col) == dense_matrix.without(row, col).determinant()

    def test_symbolic_minor_evaluates_like_numeric(self, marker_matrix, marker_bindings):
        numeric = evaluate_matrix(marker_matrix, marker_bindings)
        for row in range(4):
            for col in range(4):
                assert evaluate(marker_matrix.minor(row, col), marker_bindings) == evaluate(numeric.minor(row, col))


class TestDeterminant:
    """Tests for the Laplace expansion along row 0."""

    def test_identity(self, identity_matrix):
        assert identity_matrix.determinant() == one

    def test_triangular(self, triangular_matrix):
        assert triangular_matrix.determinant() == 24

    def test_dense(self, dense_matrix):
        assert dense_matrix.determinant() == 98

    def test_row_swap_negates(self):
        swapped = Matrix4x4([
            [0, 1, 0, 0],
            [1, 0, 0, 0],
            [0, 0, 1, 0],
            [0, 0, 0, 1],
        ])
        assert swapped.determinant() == -1

    def test_translation_is_unimodular(self):
        assert translation(Symbol('tx'), 2, 3).determinant() == one

    def test_multiplicative(self, dense_matrix, triangular_matrix):
        product = dense_matrix.multiply_matrix(triangular_matrix)
        assert product.determinant() == dense_matrix.determinant() * triangular_matrix.determinant()

    def test_transpose_invariant(self, dense_matrix):
        assert dense_matrix.transpose().determinant() == dense_matrix.determinant()

    def test_singular(self):
        m = Matrix4x4([
            [1, 2, 3, 4],
            [2, 4, 6, 8],
            [0, 1, 0, 1],
            [1, 0, 1, 0],
        ])
        assert m.determinant() == zero

    def test_symbolic_equal_rows_is_zero(self, marker_matrix):
        """Two equal symbolic rows give exactly zero, not an unreduced sum."""
        rows = [list(marker_matrix.row(r)) for r in range(4)]
        rows[2] = rows[0]
        singular = Matrix4x4(rows)
        assert singular.determinant() == zero
        with pytest.raises(TermDivisionError):
            singular.divide_by(singular.determinant())

    def test_symbolic_evaluates_like_numeric(self, marker_matrix, marker_bindings):
        numeric = evaluate_matrix(marker_matrix, marker_bindings)
        assert evaluate(marker_matrix.determinant(), marker_bindings) == evaluate(numeric.determinant())

    def test_diagonal_symbolic(self):
        a, b, c, d = (Symbol(n) for n in 'abcd')
        m = Matrix4x4([[a, 0, 0, 0], [0, b, 0, 0], [0, 0, c, 0], [0, 0, 0, d]])
        assert evaluate(m.determinant(), {'a': 2, 'b': 3, 'c': 5, 'd': 7}) == 210
        assert m.determinant() == a * b * c * d


class TestMinorsAndCofactors:
    """Tests for minors() and cofactors()."""

    def test_minors_matrix(self, dense_matrix):
        minors = dense_matrix.minors()
        for row in range(4):
            for col in range(4):
                assert minors[row, col] == dense_matrix.minor(row, col)

    def test_identity_minors_matrix(self, identity_matrix):
        assert identity_matrix.minors() == identity_matrix

    def test_cofactors_sign_pattern(self, marker_matrix):
        """Entries with odd row + col are negated; the rest are untouched."""
        cofactors = marker_matrix.cofactors()
        for row in range(4):
            for col in range(4):
                original = marker_matrix[row, col]
                if (row + col) % 2 == 0:
                    assert cofactors[row, col] == original
                else:
                    assert cofactors[row, col] == negate(original)

    def test_cofactors_acts_on_own_entries(self, dense_matrix):
        """cofactors() does not compute minors first."""
        assert dense_matrix.cofactors()[0, 1] == -1
        assert dense_matrix.cofactors()[1, 1] == 9

    def test_cofactors_twice_is_identity(self, marker_matrix):
        assert marker_matrix.cofactors().cofactors() == marker_matrix

    def test_adjugate(self, dense_matrix, identity_matrix):
        """M @ minors().cofactors().transpose() == det(M) * I."""
        adjugate = dense_matrix.minors().cofactors().transpose()
        det = dense_matrix.determinant()
        assert dense_matrix.multiply_matrix(adjugate) == identity_matrix.scale_by(det)
        assert adjugate.multiply_matrix(dense_matrix) == identity_matrix.scale_by(det)

    def test_symbolic_adjugate(self, marker_matrix, identity_matrix):
        """The adjugate identity holds for a fully symbolic matrix."""
        adjugate = marker_matrix.minors().cofactors().transpose()
        det = marker_matrix.determinant()
        assert marker_matrix.multiply_matrix(adjugate) == identity_matrix.scale_by(det)

    def test_inverse_from_building_blocks(self, triangular_matrix, identity_matrix):
        adjugate = triangular_matrix.minors().cofactors().transpose()
        inverse = adjugate.divide_by(triangular_matrix.determinant())
        assert triangular_matrix.multiply_matrix(inverse) == identity_matrix


# =============================================================================
# Restructuring
# =============================================================================

class TestTranspose:
    """Tests for transpose()."""

    def test_swaps_indices(self, marker_matrix):
        t = marker_matrix.transpose()
        for row in range(4):
            for col in range(4):
                assert t[row, col] == marker_matrix[col, row]

    def test_involution(self, marker_matrix):
        assert marker_matrix.transpose().transpose() == marker_matrix

    def test_identity_symmetric(self, identity_matrix):
        assert identity_matrix.transpose() == identity_matrix


class TestWithout:
    """Tests for 3x3 sub-matrix extraction."""

    def test_identity_without_row1_col2(self, identity_matrix):
        reduced = identity_matrix.without(1, 2)
        assert isinstance(reduced, Matrix3x3)
        assert reduced == Matrix3x3([[1, 0, 0], [0, 0, 0], [0, 0, 1]])

    def test_preserves_order(self, marker_matrix):
        reduced = marker_matrix.without(2, 0)
        names = [[str(t) for t in row] for row in reduced.elements]
        assert names == [
            ['a01', 'a02', 'a03'],
            ['a11', 'a12', 'a13'],
            ['a31', 'a32', 'a33'],
        ]

    def test_out_of_range(self, identity_matrix):
        with pytest.raises(IndexError):
            identity_matrix.without(4, 0)


class TestMatrix3x3:
    """Tests for the reduced output type."""

    def test_shape_checked(self):
        with pytest.raises(ShapeError):
            Matrix3x3([[1, 0, 0], [0, 1, 0]])
        with pytest.raises(ShapeError):
            Matrix3x3([[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0]])

    def test_access(self):
        m = Matrix3x3([[1, 2, 3], [4, 5, 6], [7, 8, 10]])
        assert m[2, 2] == 10
        assert m.row(1) == (4, 5, 6)

    def test_determinant(self):
        assert Matrix3x3([[1, 2, 3], [4, 5, 6], [7, 8, 10]]).determinant() == -3

    def test_repr(self):
        assert repr(Matrix3x3([[1, 0, 0], [0, 1, 0], [0, 0, 1]])) == (
            "Matrix3x3([[1, 0, 0], [0, 1, 0], [0, 0, 1]])"
        )


class TestFactories:
    """Tests for matrix factories."""

    def test_identity_entries(self):
        m = identity()
        for row in range(4):
            for col in range(4):
                assert m[row, col] == (1 if row == col else 0)

    def test_translation_last_column(self):
        m = translation(1, 2, 3)
        assert m.column(3) == (1, 2, 3, 1)

    def test_scaling_diagonal(self):
        m = scaling(2, Fraction(1, 2), 3)
        assert [m[i, i] for i in range(4)] == [2, sp.Rational(1, 2), 3, 1]
        assert m.determinant() == 3

    def test_zero_matrix(self):
        assert zero_matrix().determinant() == zero
        assert all(t == zero for row in zero_matrix().elements for t in row)
