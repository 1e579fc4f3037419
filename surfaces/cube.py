import numpy as np
from numba import njit

from rays import Intersection
from surfaces.shape import Shape
from tuples import vector


@njit(cache=True)
def _check_axis(origin, direction, epsilon):
    """
    Slab test for one axis of the [-1, 1] box (JIT-compiled).

    A near-zero direction maps the hit distances to +/- infinity instead of
    dividing by zero. An origin lying on a face plane leaves that axis
    unconstrained.
    """
    tmin_numerator = -1.0 - origin
    tmax_numerator = 1.0 - origin

    if abs(direction) >= epsilon:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        tmin = np.inf if tmin_numerator > 0 else -np.inf
        tmax = np.inf if tmax_numerator >= 0 else -np.inf

    if tmin > tmax:
        tmin, tmax = tmax, tmin

    return tmin, tmax


@njit(cache=True)
def _cube_slabs(ox, oy, oz, dx, dy, dz, epsilon):
    xtmin, xtmax = _check_axis(ox, dx, epsilon)
    ytmin, ytmax = _check_axis(oy, dy, epsilon)
    ztmin, ztmax = _check_axis(oz, dz, epsilon)

    tmin = max(xtmin, ytmin, ztmin)
    tmax = min(xtmax, ytmax, ztmax)
    return tmin, tmax


class Cube(Shape):
    """Axis-aligned box spanning [-1, 1] on every object-space axis."""

    def local_intersect(self, local_ray, epsilon):
        o = local_ray.origin.values
        d = local_ray.direction.values
        tmin, tmax = _cube_slabs(o[0], o[1], o[2], d[0], d[1], d[2], epsilon)

        if tmin > tmax:
            return []

        # Entry and exit, even when they coincide
        return [Intersection(self, tmin), Intersection(self, tmax)]

    def local_normal_at(self, local_point):
        ax, ay, az = abs(local_point.x), abs(local_point.y), abs(local_point.z)
        maxc = max(ax, ay, az)

        if maxc == ax:
            return vector(local_point.x, 0.0, 0.0)
        if maxc == ay:
            return vector(0.0, local_point.y, 0.0)
        return vector(0.0, 0.0, local_point.z)
