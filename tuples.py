import numpy as np

from scene_settings import EPSILON


class Tuple:
    """
    Homogeneous coordinate (x, y, z, w) backed by a numpy array.

    w == 1 marks a point, w == 0 a vector. Instances are treated as
    immutable: every operation returns a new Tuple.
    """
    __slots__ = ("values",)

    def __init__(self, x, y, z, w):
        self.values = np.array([x, y, z, w], dtype=np.float64)

    @classmethod
    def from_array(cls, values):
        t = cls.__new__(cls)
        t.values = np.asarray(values, dtype=np.float64)
        return t

    @property
    def x(self):
        return float(self.values[0])

    @property
    def y(self):
        return float(self.values[1])

    @property
    def z(self):
        return float(self.values[2])

    @property
    def w(self):
        return float(self.values[3])

    def is_point(self):
        return abs(self.values[3] - 1.0) < EPSILON

    def is_vector(self):
        return abs(self.values[3]) < EPSILON

    def __getitem__(self, index):
        return float(self.values[index])

    def __add__(self, other):
        return Tuple.from_array(self.values + other.values)

    def __sub__(self, other):
        return Tuple.from_array(self.values - other.values)

    def __mul__(self, scalar):
        return Tuple.from_array(self.values * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Tuple.from_array(self.values / scalar)

    def __neg__(self):
        return Tuple.from_array(-self.values)

    def __eq__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return bool(np.all(np.abs(self.values - other.values) < EPSILON))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return "Tuple({:.5f}, {:.5f}, {:.5f}, {:.5f})".format(*self.values)

    def magnitude(self):
        return float(np.linalg.norm(self.values))

    def normalize(self):
        return Tuple.from_array(self.values / np.linalg.norm(self.values))

    def dot(self, other):
        return float(np.dot(self.values, other.values))

    def cross(self, other):
        """Cross product of the xyz parts; always a vector."""
        c = np.cross(self.values[:3], other.values[:3])
        return vector(c[0], c[1], c[2])

    def reflect(self, normal):
        """Reflect this vector around normal."""
        return self - normal * (2.0 * self.dot(normal))


def point(x, y, z):
    return Tuple(x, y, z, 1.0)


def vector(x, y, z):
    return Tuple(x, y, z, 0.0)


def reflect(incoming, normal):
    return incoming.reflect(normal)
