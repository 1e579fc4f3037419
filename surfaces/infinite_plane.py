from rays import Intersection
from surfaces.shape import Shape
from tuples import vector


class InfinitePlane(Shape):
    """The object-space xz plane through the origin, normal +y."""

    def local_intersect(self, local_ray, epsilon):
        # Parallel or coplanar rays never hit
        if abs(local_ray.direction.y) < epsilon:
            return []

        t = -local_ray.origin.y / local_ray.direction.y
        return [Intersection(self, t)]

    def local_normal_at(self, local_point):
        return vector(0.0, 1.0, 0.0)
