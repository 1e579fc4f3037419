import math

import numpy as np

from scene_settings import EPSILON
from tuples import Tuple


class SingularMatrixError(ArithmeticError):
    """Raised when inverting a matrix whose determinant is zero."""


# =============================================================================
# Cofactor expansion on raw numpy arrays (any square size >= 2)
# =============================================================================

def submatrix(values, row, col):
    """Drop one row and one column."""
    return np.delete(np.delete(values, row, axis=0), col, axis=1)


def determinant(values):
    """Determinant by recursive cofactor expansion along the first row."""
    if values.shape[0] == 2:
        return values[0, 0] * values[1, 1] - values[0, 1] * values[1, 0]

    det = 0.0
    for col in range(values.shape[1]):
        det += values[0, col] * cofactor(values, 0, col)
    return det


def minor(values, row, col):
    return determinant(submatrix(values, row, col))


def cofactor(values, row, col):
    m = minor(values, row, col)
    return m if (row + col) % 2 == 0 else -m


def inverse(values):
    """
    Adjugate divided by the determinant.

    The cofactor of (row, col) is written to (col, row), which folds the
    transpose into the same pass.
    """
    det = determinant(values)
    if abs(det) < EPSILON:
        raise SingularMatrixError("Matrix is not invertible (determinant = {})".format(det))

    size = values.shape[0]
    result = np.empty((size, size), dtype=np.float64)
    for row in range(size):
        for col in range(size):
            result[col, row] = cofactor(values, row, col) / det
    return result


# =============================================================================
# 4x4 transform matrix
# =============================================================================

class Matrix4:
    __slots__ = ("values",)

    def __init__(self, *entries):
        if len(entries) == 0:
            self.values = np.identity(4, dtype=np.float64)
        elif len(entries) == 16:
            self.values = np.array(entries, dtype=np.float64).reshape((4, 4))
        else:
            raise ValueError("Matrix4 takes 0 or 16 entries, got {}".format(len(entries)))

    @classmethod
    def from_array(cls, values):
        m = cls.__new__(cls)
        m.values = np.asarray(values, dtype=np.float64).reshape((4, 4))
        return m

    @classmethod
    def identity(cls):
        return cls()

    def __getitem__(self, index):
        return float(self.values[index])

    def __matmul__(self, other):
        if isinstance(other, Matrix4):
            return Matrix4.from_array(self.values @ other.values)
        if isinstance(other, Tuple):
            return Tuple.from_array(self.values @ other.values)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        return bool(np.all(np.abs(self.values - other.values) < EPSILON))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        rows = ", ".join("[" + ", ".join("{:.5f}".format(v) for v in row) + "]" for row in self.values)
        return "Matrix4({})".format(rows)

    def transpose(self):
        return Matrix4.from_array(self.values.T.copy())

    def determinant(self):
        return float(determinant(self.values))

    def is_invertible(self):
        return abs(self.determinant()) >= EPSILON

    def inverse(self):
        return Matrix4.from_array(inverse(self.values))

    # Fluent builders right-multiply, so the last call is applied to a point first:
    # identity().translate(...).scale(...) scales, then translates.

    def translate(self, x, y, z):
        return self @ translation(x, y, z)

    def scale(self, x, y, z):
        return self @ scaling(x, y, z)

    def rotate_x(self, r):
        return self @ rotation_x(r)

    def rotate_y(self, r):
        return self @ rotation_y(r)

    def rotate_z(self, r):
        return self @ rotation_z(r)

    def shear(self, xy, xz, yx, yz, zx, zy):
        return self @ shearing(xy, xz, yx, yz, zx, zy)


def translation(x, y, z):
    return Matrix4(
        1.0, 0.0, 0.0, x,
        0.0, 1.0, 0.0, y,
        0.0, 0.0, 1.0, z,
        0.0, 0.0, 0.0, 1.0,
    )


def scaling(x, y, z):
    return Matrix4(
        x, 0.0, 0.0, 0.0,
        0.0, y, 0.0, 0.0,
        0.0, 0.0, z, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def rotation_x(r):
    c, s = math.cos(r), math.sin(r)
    return Matrix4(
        1.0, 0.0, 0.0, 0.0,
        0.0, c, -s, 0.0,
        0.0, s, c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def rotation_y(r):
    c, s = math.cos(r), math.sin(r)
    return Matrix4(
        c, 0.0, s, 0.0,
        0.0, 1.0, 0.0, 0.0,
        -s, 0.0, c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def rotation_z(r):
    c, s = math.cos(r), math.sin(r)
    return Matrix4(
        c, -s, 0.0, 0.0,
        s, c, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def shearing(xy, xz, yx, yz, zx, zy):
    return Matrix4(
        1.0, xy, xz, 0.0,
        yx, 1.0, yz, 0.0,
        zx, zy, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def view_transform(from_point, to, up):
    """Orient the world relative to an eye at from_point looking at to."""
    forward = (to - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)

    orientation = Matrix4(
        left.x, left.y, left.z, 0.0,
        true_up.x, true_up.y, true_up.z, 0.0,
        -forward.x, -forward.y, -forward.z, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)
