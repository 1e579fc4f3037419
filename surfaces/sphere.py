import numpy as np
from numba import njit

from material import Material
from rays import Intersection
from surfaces.shape import Shape
from tuples import vector


@njit(cache=True)
def _sphere_roots(ox, oy, oz, dx, dy, dz):
    """
    Solve |O + tD|^2 = 1 for the unit sphere at the origin (JIT-compiled).

    Returns (hit, t1, t2) with t1 <= t2; a tangent ray gives t1 == t2.
    """
    a = dx*dx + dy*dy + dz*dz
    b = 2.0 * (ox*dx + oy*dy + oz*dz)
    c = ox*ox + oy*oy + oz*oz - 1.0

    discriminant = b*b - 4*a*c
    if discriminant < 0:
        return False, 0.0, 0.0

    sqrt_disc = np.sqrt(discriminant)
    t1 = (-b - sqrt_disc) / (2*a)
    t2 = (-b + sqrt_disc) / (2*a)
    return True, t1, t2


class Sphere(Shape):
    """Unit sphere centered at the object-space origin."""

    def local_intersect(self, local_ray, epsilon):
        o = local_ray.origin.values
        d = local_ray.direction.values
        hit, t1, t2 = _sphere_roots(o[0], o[1], o[2], d[0], d[1], d[2])
        if not hit:
            return []
        return [Intersection(self, t1), Intersection(self, t2)]

    def local_normal_at(self, local_point):
        return vector(local_point.x, local_point.y, local_point.z)


def glass_sphere():
    return Sphere(material=Material(transparency=1.0, refractive_index=1.5))
