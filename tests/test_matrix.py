"""Tests for the matrix kernel and transform builders."""

import math

import numpy as np
import pytest

from matrix import (Matrix4, SingularMatrixError, cofactor, determinant, minor, rotation_x,
                    rotation_y, rotation_z, scaling, shearing, submatrix, translation,
                    view_transform)
from tuples import Tuple, point, vector


SQRT2_2 = math.sqrt(2) / 2

A = Matrix4(
    -5, 2, 6, -8,
    1, -5, 1, 8,
    7, 7, -6, -7,
    1, -3, 7, 4,
)


class TestMatrixAlgebra:
    def test_identity_by_default(self):
        assert Matrix4() == Matrix4.identity()
        assert Matrix4.identity()[0, 0] == 1.0
        assert Matrix4.identity()[0, 1] == 0.0

    def test_wrong_entry_count(self):
        with pytest.raises(ValueError):
            Matrix4(1, 2, 3)

    def test_multiply_matrices(self):
        a = Matrix4(1, 2, 3, 4, 5, 6, 7, 8, 9, 8, 7, 6, 5, 4, 3, 2)
        b = Matrix4(-2, 1, 2, 3, 3, 2, 1, -1, 4, 3, 6, 5, 1, 2, 7, 8)
        expected = Matrix4(20, 22, 50, 48, 44, 54, 114, 108, 40, 58, 110, 102, 16, 26, 46, 42)
        assert a @ b == expected

    def test_multiply_by_tuple(self):
        a = Matrix4(1, 2, 3, 4, 2, 4, 4, 2, 8, 6, 4, 1, 0, 0, 0, 1)
        assert a @ Tuple(1, 2, 3, 1) == Tuple(18, 24, 33, 1)

    def test_identity_is_neutral(self):
        assert A @ Matrix4.identity() == A
        assert Matrix4.identity() @ Tuple(1, 2, 3, 4) == Tuple(1, 2, 3, 4)

    def test_transpose(self):
        a = Matrix4(0, 9, 3, 0, 9, 8, 0, 8, 1, 8, 5, 3, 0, 0, 5, 8)
        expected = Matrix4(0, 9, 1, 0, 9, 8, 8, 0, 3, 0, 5, 5, 0, 8, 3, 8)
        assert a.transpose() == expected
        assert Matrix4.identity().transpose() == Matrix4.identity()


class TestCofactorExpansion:
    def test_determinant_2x2(self):
        assert determinant(np.array([[1.0, 5.0], [-3.0, 2.0]])) == 17

    def test_submatrix(self):
        m = np.array([[1.0, 5.0, 0.0], [-3.0, 2.0, 7.0], [0.0, 6.0, -3.0]])
        np.testing.assert_array_equal(submatrix(m, 0, 2), [[-3.0, 2.0], [0.0, 6.0]])

    def test_minor_and_cofactor_3x3(self):
        m = np.array([[3.0, 5.0, 0.0], [2.0, -1.0, -7.0], [6.0, -1.0, 5.0]])
        assert minor(m, 1, 0) == 25
        assert minor(m, 0, 0) == -12
        assert cofactor(m, 0, 0) == -12
        assert cofactor(m, 1, 0) == -25

    def test_determinant_3x3(self):
        m = np.array([[1.0, 2.0, 6.0], [-5.0, 8.0, -4.0], [2.0, 6.0, 4.0]])
        assert cofactor(m, 0, 0) == 56
        assert cofactor(m, 0, 1) == 12
        assert cofactor(m, 0, 2) == -46
        assert determinant(m) == -196

    def test_determinant_4x4(self):
        m = Matrix4(-2, -8, 3, 5, -3, 1, 7, 3, 1, 2, -9, 6, -6, 7, 7, -9)
        assert cofactor(m.values, 0, 0) == 690
        assert cofactor(m.values, 0, 1) == 447
        assert cofactor(m.values, 0, 2) == 210
        assert cofactor(m.values, 0, 3) == 51
        assert m.determinant() == -4071


class TestInverse:
    def test_invertible(self):
        m = Matrix4(6, 4, 4, 4, 5, 5, 7, 6, 4, -9, 3, -7, 9, 1, 7, -6)
        assert m.determinant() == pytest.approx(-2120)
        assert m.is_invertible()

    def test_singular_matrix_raises(self):
        m = Matrix4(-4, 2, -2, -3, 9, 6, 2, 6, 0, -5, 1, -5, 0, 0, 0, 0)
        assert m.determinant() == 0
        assert not m.is_invertible()
        with pytest.raises(SingularMatrixError):
            m.inverse()

    def test_inverse_values(self):
        b = A.inverse()
        assert A.determinant() == pytest.approx(532)
        assert cofactor(A.values, 2, 3) == pytest.approx(-160)
        assert b[3, 2] == pytest.approx(-160 / 532)
        assert cofactor(A.values, 3, 2) == pytest.approx(105)
        assert b[2, 3] == pytest.approx(105 / 532)
        expected = Matrix4(
            0.21805, 0.45113, 0.24060, -0.04511,
            -0.80827, -1.45677, -0.44361, 0.52068,
            -0.07895, -0.22368, -0.05263, 0.19737,
            -0.52256, -0.81391, -0.30075, 0.30639,
        )
        assert b == expected

    def test_multiply_product_by_inverse(self):
        a = Matrix4(3, -9, 7, 3, 3, -8, 2, -9, -4, 4, 4, 1, -6, 5, -1, 1)
        b = Matrix4(8, 2, 2, 2, 3, -1, 7, 0, 7, 0, 5, 4, 6, -2, 0, 5)
        assert (a @ b) @ b.inverse() == a

    @pytest.mark.parametrize("transform", [
        translation(5, -3, 2),
        scaling(2, 3, 4),
        rotation_x(math.pi / 3),
        rotation_y(-1.2),
        rotation_z(0.4),
        shearing(1, 0.5, 0, 0.25, 0, 1),
        Matrix4.identity().translate(1, 2, 3).rotate_y(0.7).scale(2, 0.5, 3),
    ])
    def test_inverse_times_transform_is_identity(self, transform):
        assert transform.inverse() @ transform == Matrix4.identity()


class TestTransforms:
    def test_translation(self):
        transform = translation(5, -3, 2)
        assert transform @ point(-3, 4, 5) == point(2, 1, 7)
        assert transform.inverse() @ point(-3, 4, 5) == point(-8, 7, 3)

    def test_translation_ignores_vectors(self):
        assert translation(5, -3, 2) @ vector(-3, 4, 5) == vector(-3, 4, 5)

    def test_scaling(self):
        assert scaling(2, 3, 4) @ point(-4, 6, 8) == point(-8, 18, 32)
        assert scaling(2, 3, 4) @ vector(-4, 6, 8) == vector(-8, 18, 32)
        assert scaling(2, 3, 4).inverse() @ vector(-4, 6, 8) == vector(-2, 2, 2)

    def test_reflection_is_negative_scaling(self):
        assert scaling(-1, 1, 1) @ point(2, 3, 4) == point(-2, 3, 4)

    def test_rotation_x(self):
        p = point(0, 1, 0)
        assert rotation_x(math.pi / 4) @ p == point(0, SQRT2_2, SQRT2_2)
        assert rotation_x(math.pi / 2) @ p == point(0, 0, 1)
        assert rotation_x(math.pi / 4).inverse() @ p == point(0, SQRT2_2, -SQRT2_2)

    def test_rotation_y(self):
        p = point(0, 0, 1)
        assert rotation_y(math.pi / 4) @ p == point(SQRT2_2, 0, SQRT2_2)
        assert rotation_y(math.pi / 2) @ p == point(1, 0, 0)

    def test_rotation_z(self):
        p = point(0, 1, 0)
        assert rotation_z(math.pi / 4) @ p == point(-SQRT2_2, SQRT2_2, 0)
        assert rotation_z(math.pi / 2) @ p == point(-1, 0, 0)

    @pytest.mark.parametrize("params, expected", [
        ((1, 0, 0, 0, 0, 0), point(5, 3, 4)),
        ((0, 1, 0, 0, 0, 0), point(6, 3, 4)),
        ((0, 0, 1, 0, 0, 0), point(2, 5, 4)),
        ((0, 0, 0, 1, 0, 0), point(2, 7, 4)),
        ((0, 0, 0, 0, 1, 0), point(2, 3, 6)),
        ((0, 0, 0, 0, 0, 1), point(2, 3, 7)),
    ])
    def test_shearing(self, params, expected):
        assert shearing(*params) @ point(2, 3, 4) == expected

    def test_fluent_calls_apply_in_reverse_order(self):
        transform = Matrix4.identity().translate(10, 5, 7).scale(5, 5, 5).rotate_x(math.pi / 2)
        assert transform @ point(1, 0, 1) == point(15, 0, 7)
        assert transform == translation(10, 5, 7) @ scaling(5, 5, 5) @ rotation_x(math.pi / 2)

    def test_fluent_shear(self):
        assert Matrix4.identity().shear(1, 0, 0, 0, 0, 0) == shearing(1, 0, 0, 0, 0, 0)


class TestViewTransform:
    def test_default_orientation(self):
        t = view_transform(point(0, 0, 0), point(0, 0, -1), vector(0, 1, 0))
        assert t == Matrix4.identity()

    def test_looking_in_positive_z(self):
        t = view_transform(point(0, 0, 0), point(0, 0, 1), vector(0, 1, 0))
        assert t == scaling(-1, 1, -1)

    def test_moves_the_world(self):
        t = view_transform(point(0, 0, 8), point(0, 0, 0), vector(0, 1, 0))
        assert t == translation(0, 0, -8)

    def test_arbitrary_view(self):
        t = view_transform(point(1, 3, 2), point(4, -2, 8), vector(1, 1, 0))
        expected = Matrix4(
            -0.50709, 0.50709, 0.67612, -2.36643,
            0.76772, 0.60609, 0.12122, -2.82843,
            -0.35857, 0.59761, -0.71714, 0.00000,
            0.00000, 0.00000, 0.00000, 1.00000,
        )
        assert t == expected
