import numpy as np

from scene_settings import EPSILON


class Color:
    """RGB triple. Channels are unclamped; clamping happens when the image is saved."""
    __slots__ = ("values",)

    def __init__(self, red, green, blue):
        self.values = np.array([red, green, blue], dtype=np.float64)

    @classmethod
    def from_array(cls, values):
        c = cls.__new__(cls)
        c.values = np.asarray(values, dtype=np.float64)
        return c

    @property
    def red(self):
        return float(self.values[0])

    @property
    def green(self):
        return float(self.values[1])

    @property
    def blue(self):
        return float(self.values[2])

    def __add__(self, other):
        return Color.from_array(self.values + other.values)

    def __sub__(self, other):
        return Color.from_array(self.values - other.values)

    def __mul__(self, other):
        # Color * Color is the Hadamard product
        if isinstance(other, Color):
            return Color.from_array(self.values * other.values)
        return Color.from_array(self.values * other)

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return bool(np.all(np.abs(self.values - other.values) < EPSILON))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return "Color({:.5f}, {:.5f}, {:.5f})".format(*self.values)


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
