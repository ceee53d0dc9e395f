"""Tests for matrices and transforms.

Tests cover:
- Construction, indexing, equality and multiplication
- Transpose, submatrix, minor, cofactor and determinant
- Inversion, including singular matrices
- Translation, scaling, rotation, shearing and view transforms
- Chaining transforms in application order
"""

import math

import pytest


class TestMatrixBasics:
    """Test construction and multiplication."""

    def test_construct_and_index(self):
        """Test reading entries by (row, col)."""
        from tracy.core.matrix import Matrix

        m = Matrix([[1, 2, 3, 4], [5.5, 6.5, 7.5, 8.5], [9, 10, 11, 12], [13.5, 14.5, 15.5, 16.5]])

        assert m.order == 4
        assert m[0, 3] == 4.0
        assert m[1, 0] == 5.5
        assert m[3, 2] == 15.5

    def test_rejects_non_square(self):
        """Test that a non-square matrix raises ValueError."""
        from tracy.core.matrix import Matrix

        with pytest.raises(ValueError, match="square"):
            Matrix([[1, 2, 3], [4, 5, 6]])

    def test_equality(self):
        """Test approximate equality and order mismatch."""
        from tracy.core.matrix import Matrix

        a = Matrix([[1, 2], [3, 4]])

        assert a == Matrix([[1, 2], [3, 4.00001]])
        assert a != Matrix([[1, 2], [3, 5]])
        assert a != Matrix.identity(3)

    def test_multiply_matrices(self):
        """Test multiplying two 4x4 matrices."""
        from tracy.core.matrix import Matrix

        a = Matrix([[1, 2, 3, 4], [5, 6, 7, 8], [9, 8, 7, 6], [5, 4, 3, 2]])
        b = Matrix([[-2, 1, 2, 3], [3, 2, 1, -1], [4, 3, 6, 5], [1, 2, 7, 8]])

        expected = Matrix([[20, 22, 50, 48], [44, 54, 114, 108], [40, 58, 110, 102], [16, 26, 46, 42]])
        assert a * b == expected
        assert a @ b == expected

    def test_multiply_order_mismatch(self):
        """Test that multiplying matrices of different orders raises."""
        from tracy.core.matrix import Matrix

        with pytest.raises(ValueError, match="order"):
            Matrix.identity(4) * Matrix.identity(3)

    def test_multiply_by_scalar_raises(self):
        """Test that scalars are not valid matrix operands."""
        from tracy.core.matrix import Matrix

        with pytest.raises(TypeError):
            Matrix.identity() * 3

    def test_multiply_tuple(self):
        """Test multiplying a matrix by a tuple."""
        from tracy.core.matrix import Matrix
        from tracy.core.tuples import Tuple4

        a = Matrix([[1, 2, 3, 4], [2, 4, 4, 2], [8, 6, 4, 1], [0, 0, 0, 1]])

        assert a * Tuple4(1, 2, 3, 1) == Tuple4(18, 24, 33, 1)

    def test_identity_is_neutral(self):
        """Test that the identity leaves matrices and tuples unchanged."""
        from tracy.core.matrix import Matrix
        from tracy.core.tuples import Tuple4

        a = Matrix([[0, 1, 2, 4], [1, 2, 4, 8], [2, 4, 8, 16], [4, 8, 16, 32]])
        t = Tuple4(1, 2, 3, 4)

        assert a * Matrix.identity() == a
        assert Matrix.identity() * t == t


class TestMatrixAlgebra:
    """Test transpose, determinants and inverses."""

    def test_transpose(self):
        """Test transposing swaps rows and columns."""
        from tracy.core.matrix import Matrix

        a = Matrix([[0, 9, 3, 0], [9, 8, 0, 8], [1, 8, 5, 3], [0, 0, 5, 8]])

        assert a.transpose() == Matrix([[0, 9, 1, 0], [9, 8, 8, 0], [3, 0, 5, 5], [0, 8, 3, 8]])
        assert Matrix.identity().transpose() == Matrix.identity()

    def test_determinant_2x2(self):
        """Test the determinant of a 2x2 matrix."""
        from tracy.core.matrix import Matrix

        assert Matrix([[1, 5], [-3, 2]]).determinant() == pytest.approx(17.0)

    def test_submatrix(self):
        """Test removing a row and a column."""
        from tracy.core.matrix import Matrix

        a = Matrix([[1, 5, 0], [-3, 2, 7], [0, 6, -3]])

        assert a.submatrix(0, 2) == Matrix([[-3, 2], [0, 6]])

    def test_minor_and_cofactor(self):
        """Test minors and cofactors of a 3x3 matrix."""
        from tracy.core.matrix import Matrix

        a = Matrix([[3, 5, 0], [2, -1, -7], [6, -1, 5]])

        assert a.minor(0, 0) == pytest.approx(-12.0)
        assert a.cofactor(0, 0) == pytest.approx(-12.0)
        assert a.minor(1, 0) == pytest.approx(25.0)
        assert a.cofactor(1, 0) == pytest.approx(-25.0)

    def test_determinant_3x3(self):
        """Test the determinant of a 3x3 matrix."""
        from tracy.core.matrix import Matrix

        a = Matrix([[1, 2, 6], [-5, 8, -4], [2, 6, 4]])

        assert a.cofactor(0, 0) == pytest.approx(56.0)
        assert a.cofactor(0, 1) == pytest.approx(12.0)
        assert a.cofactor(0, 2) == pytest.approx(-46.0)
        assert a.determinant() == pytest.approx(-196.0)

    def test_determinant_4x4(self):
        """Test the determinant of a 4x4 matrix."""
        from tracy.core.matrix import Matrix

        a = Matrix([[-2, -8, 3, 5], [-3, 1, 7, 3], [1, 2, -9, 6], [-6, 7, 7, -9]])

        assert a.cofactor(0, 0) == pytest.approx(690.0)
        assert a.cofactor(0, 1) == pytest.approx(447.0)
        assert a.cofactor(0, 2) == pytest.approx(210.0)
        assert a.cofactor(0, 3) == pytest.approx(51.0)
        assert a.determinant() == pytest.approx(-4071.0)

    def test_singular_matrix_has_no_inverse(self):
        """Test that inverse() returns None when the determinant is zero."""
        from tracy.core.matrix import Matrix

        a = Matrix([[-4, 2, -2, -3], [9, 6, 2, 6], [0, -5, 1, -5], [0, 0, 0, 0]])

        assert a.determinant() == 0.0
        assert not a.is_invertible
        assert a.inverse() is None

    def test_inverse(self):
        """Test inverting a 4x4 matrix."""
        from tracy.core.matrix import Matrix

        a = Matrix([[-5, 2, 6, -8], [1, -5, 1, 8], [7, 7, -6, -7], [1, -3, 7, 4]])
        b = a.inverse()

        assert a.determinant() == pytest.approx(532.0)
        assert a.cofactor(2, 3) == pytest.approx(-160.0)
        assert b[3, 2] == pytest.approx(-160.0 / 532.0)
        assert a.cofactor(3, 2) == pytest.approx(105.0)
        assert b[2, 3] == pytest.approx(105.0 / 532.0)
        assert b == Matrix(
            [
                [0.21805, 0.45113, 0.24060, -0.04511],
                [-0.80827, -1.45677, -0.44361, 0.52068],
                [-0.07895, -0.22368, -0.05263, 0.19737],
                [-0.52256, -0.81391, -0.30075, 0.30639],
            ]
        )

    def test_product_times_inverse_restores_matrix(self):
        """Test that (A * B) * inverse(B) == A."""
        from tracy.core.matrix import Matrix

        a = Matrix([[3, -9, 7, 3], [3, -8, 2, -9], [-4, 4, 4, 1], [-6, 5, -1, 1]])
        b = Matrix([[8, 2, 2, 2], [3, -1, 7, 0], [7, 0, 5, 4], [6, -2, 0, 5]])

        assert (a * b) * b.inverse() == a

    def test_inverse_round_trip_on_tuples(self):
        """Test that applying M then its inverse reproduces points and vectors."""
        from tracy.core.matrix import chain, rotation_x, scaling, shearing, translation
        from tracy.core.tuples import point, vector

        m = chain(scaling(2, 3, 4), rotation_x(0.7), shearing(1, 0, 0.5, 0, 0, 0.25), translation(1, -2, 3))
        inv = m.inverse()

        for t in (point(1, 2, 3), point(-4, 0.5, 9), vector(0, 1, -1)):
            assert inv * (m * t) == t


class TestTransforms:
    """Test transform constructors."""

    def test_translation(self):
        """Test translating points, and that vectors are unaffected."""
        from tracy.core.matrix import translation
        from tracy.core.tuples import point, vector

        t = translation(5, -3, 2)

        assert t * point(-3, 4, 5) == point(2, 1, 7)
        assert t.inverse() * point(-3, 4, 5) == point(-8, 7, 3)
        assert t * vector(-3, 4, 5) == vector(-3, 4, 5)

    def test_scaling(self):
        """Test scaling points and vectors, and reflection by negative scale."""
        from tracy.core.matrix import scaling
        from tracy.core.tuples import point, vector

        s = scaling(2, 3, 4)

        assert s * point(-4, 6, 8) == point(-8, 18, 32)
        assert s * vector(-4, 6, 8) == vector(-8, 18, 32)
        assert s.inverse() * vector(-4, 6, 8) == vector(-2, 2, 2)
        assert scaling(-1, 1, 1) * point(2, 3, 4) == point(-2, 3, 4)

    def test_rotations(self):
        """Test quarter rotations around each axis."""
        from tracy.core.matrix import rotation_x, rotation_y, rotation_z
        from tracy.core.tuples import point

        s = math.sqrt(2) / 2

        assert rotation_x(math.pi / 4) * point(0, 1, 0) == point(0, s, s)
        assert rotation_x(math.pi / 2) * point(0, 1, 0) == point(0, 0, 1)
        assert rotation_x(math.pi / 4).inverse() * point(0, 1, 0) == point(0, s, -s)
        assert rotation_y(math.pi / 4) * point(0, 0, 1) == point(s, 0, s)
        assert rotation_y(math.pi / 2) * point(0, 0, 1) == point(1, 0, 0)
        assert rotation_z(math.pi / 4) * point(0, 1, 0) == point(-s, s, 0)
        assert rotation_z(math.pi / 2) * point(0, 1, 0) == point(-1, 0, 0)

    @pytest.mark.parametrize(
        "params,expected",
        [
            ((1, 0, 0, 0, 0, 0), (5, 3, 4)),
            ((0, 1, 0, 0, 0, 0), (6, 3, 4)),
            ((0, 0, 1, 0, 0, 0), (2, 5, 4)),
            ((0, 0, 0, 1, 0, 0), (2, 7, 4)),
            ((0, 0, 0, 0, 1, 0), (2, 3, 6)),
            ((0, 0, 0, 0, 0, 1), (2, 3, 7)),
        ],
    )
    def test_shearing(self, params, expected):
        """Test each shearing component moves one coordinate by another."""
        from tracy.core.matrix import shearing
        from tracy.core.tuples import point

        assert shearing(*params) * point(2, 3, 4) == point(*expected)

    def test_chain_applies_in_order(self):
        """Test that chain(a, b, c) applies a first and equals c * b * a."""
        from tracy.core.matrix import chain, rotation_x, scaling, translation
        from tracy.core.tuples import point

        a = rotation_x(math.pi / 2)
        b = scaling(5, 5, 5)
        c = translation(10, 5, 7)

        assert chain(a, b, c) * point(1, 0, 1) == point(15, 0, 7)
        assert chain(a, b, c) == c * b * a
        assert chain() == a * a.inverse()


class TestViewTransform:
    """Test the view transform."""

    def test_default_orientation_is_identity(self):
        """Test looking down -z from the origin."""
        from tracy.core.matrix import Matrix, view_transform
        from tracy.core.tuples import point, vector

        t = view_transform(point(0, 0, 0), point(0, 0, -1), vector(0, 1, 0))

        assert t == Matrix.identity()

    def test_looking_in_positive_z_mirrors(self):
        """Test looking down +z flips x and z."""
        from tracy.core.matrix import scaling, view_transform
        from tracy.core.tuples import point, vector

        t = view_transform(point(0, 0, 0), point(0, 0, 1), vector(0, 1, 0))

        assert t == scaling(-1, 1, -1)

    def test_view_moves_the_world(self):
        """Test that the eye position becomes a translation."""
        from tracy.core.matrix import translation, view_transform
        from tracy.core.tuples import point, vector

        t = view_transform(point(0, 0, 8), point(0, 0, 0), vector(0, 1, 0))

        assert t == translation(0, 0, -8)

    def test_arbitrary_view(self):
        """Test an arbitrary eye, target and up vector."""
        from tracy.core.matrix import Matrix, view_transform
        from tracy.core.tuples import point, vector

        t = view_transform(point(1, 3, 2), point(4, -2, 8), vector(1, 1, 0))

        assert t == Matrix(
            [
                [-0.50709, 0.50709, 0.67612, -2.36643],
                [0.76772, 0.60609, 0.12122, -2.82843],
                [-0.35857, 0.59761, -0.71714, 0.00000],
                [0.00000, 0.00000, 0.00000, 1.00000],
            ]
        )
