from operator import attrgetter

from scene_settings import SHADOW_EPSILON


class Ray:
    __slots__ = ("origin", "direction")

    def __init__(self, origin, direction):
        self.origin = origin
        self.direction = direction

    def position(self, t):
        return self.origin + self.direction * t

    def transform(self, matrix):
        return Ray(matrix @ self.origin, matrix @ self.direction)

    def __repr__(self):
        return "Ray({!r}, {!r})".format(self.origin, self.direction)


class Intersection:
    """A hit record: the shape that was hit and the ray parameter t."""
    __slots__ = ("shape", "t")

    def __init__(self, shape, t):
        self.shape = shape
        self.t = float(t)

    def __repr__(self):
        return "Intersection({}#{}, t={:.5f})".format(type(self.shape).__name__, self.shape.id, self.t)


def sort_intersections(intersections):
    """Ascending by t; sorted() is stable, so ties keep their relative order."""
    return sorted(intersections, key=attrgetter("t"))


def hit(intersections):
    """Return the lowest non-negative intersection, or None."""
    for intersection in sort_intersections(intersections):
        if intersection.t >= 0:
            return intersection
    return None


class Computation:
    """Shading context derived from a chosen intersection."""

    def __init__(self, shape, t, point, over_point, under_point, eye_direction,
                 surface_normalv, is_inside, reflectv, n1, n2):
        self.shape = shape
        self.t = t
        self.point = point
        self.over_point = over_point
        self.under_point = under_point
        self.eye_direction = eye_direction
        self.surface_normalv = surface_normalv
        self.is_inside = is_inside
        self.reflectv = reflectv
        self.n1 = n1
        self.n2 = n2


def _refractive_indices(hit_intersection, intersections):
    """
    Walk the intersections in order while tracking which shapes the ray is
    currently inside. n1 is the medium being left and n2 the medium being
    entered at the hit; an empty stack means vacuum (1.0).
    """
    containers = []
    n1 = n2 = 1.0

    for intersection in intersections:
        is_hit = intersection is hit_intersection
        if is_hit:
            n1 = containers[-1].material.refractive_index if containers else 1.0

        if intersection.shape in containers:
            containers.remove(intersection.shape)
        else:
            containers.append(intersection.shape)

        if is_hit:
            n2 = containers[-1].material.refractive_index if containers else 1.0
            break

    return n1, n2


def prepare_computations(hit_intersection, ray, intersections=None, shadow_epsilon=SHADOW_EPSILON):
    """
    Build the Computation for hit_intersection.

    intersections is the full sorted list for the ray; it is needed to
    resolve n1/n2 through nested transparent shapes.
    """
    if intersections is None:
        intersections = [hit_intersection]

    shape = hit_intersection.shape
    point = ray.position(hit_intersection.t)
    eye_direction = -ray.direction
    normal = shape.normal_at(point)

    is_inside = normal.dot(eye_direction) < 0
    if is_inside:
        normal = -normal

    n1, n2 = _refractive_indices(hit_intersection, intersections)

    return Computation(
        shape=shape,
        t=hit_intersection.t,
        point=point,
        over_point=point + normal * shadow_epsilon,
        under_point=point - normal * shadow_epsilon,
        eye_direction=eye_direction,
        surface_normalv=normal,
        is_inside=is_inside,
        reflectv=ray.direction.reflect(normal),
        n1=n1,
        n2=n2,
    )
