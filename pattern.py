import math

from color import Color
from matrix import Matrix4


class Pattern:
    """
    Base class for surface patterns. Each pattern keeps its own inverse
    transform, independent of the shape it is attached to.
    """

    def __init__(self, first, second):
        self.first = first
        self.second = second
        self.inverse_transform = Matrix4.identity()

    def set_transform(self, transform):
        self.inverse_transform = transform.inverse()

    def get_inverse_transform(self):
        return self.inverse_transform

    def color_at(self, local_point):
        raise NotImplementedError

    def color_at_object(self, shape, world_point):
        object_point = shape.inverse_transform @ world_point
        pattern_point = self.inverse_transform @ object_point
        return self.color_at(pattern_point)


class StripePattern(Pattern):
    def color_at(self, local_point):
        if math.floor(local_point.x) % 2 == 0:
            return self.first
        return self.second


class GradientPattern(Pattern):
    def color_at(self, local_point):
        fraction = local_point.x - math.floor(local_point.x)
        return self.first + (self.second - self.first) * fraction


class RingPattern(Pattern):
    def color_at(self, local_point):
        distance = math.sqrt(local_point.x ** 2 + local_point.z ** 2)
        if math.floor(distance) % 2 == 0:
            return self.first
        return self.second


class CheckerPattern(Pattern):
    """3D checker: alternates along all three axes."""

    def color_at(self, local_point):
        total = math.floor(local_point.x) + math.floor(local_point.y) + math.floor(local_point.z)
        if total % 2 == 0:
            return self.first
        return self.second


class TestPattern(Pattern):
    """Returns the pattern-space point as a color, for checking transform composition."""
    __test__ = False

    def __init__(self):
        super().__init__(None, None)

    def color_at(self, local_point):
        return Color(local_point.x, local_point.y, local_point.z)


PATTERN_KINDS = {
    "stripe": StripePattern,
    "gradient": GradientPattern,
    "ring": RingPattern,
    "checker": CheckerPattern,
}
