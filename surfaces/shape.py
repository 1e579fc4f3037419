import itertools

from material import Material
from matrix import Matrix4
from scene_settings import EPSILON
from tuples import Tuple


_shape_ids = itertools.count(1)


class Shape:
    """
    Common contract for Sphere, InfinitePlane and Cube.

    Only the inverse of the world transform is stored; it is computed when
    the transform is set so intersection and normal code never re-inverts.
    Subclasses implement local_intersect and local_normal_at in object space.
    """

    def __init__(self, material=None, shape_id=None):
        self.id = next(_shape_ids) if shape_id is None else shape_id
        self.material = material if material is not None else Material()
        self.inverse_transform = Matrix4.identity()
        self.inverse_transform_transpose = Matrix4.identity()

    def set_transform(self, transform):
        self.inverse_transform = transform.inverse()
        self.inverse_transform_transpose = self.inverse_transform.transpose()

    def get_inverse_transform(self):
        return self.inverse_transform

    def intersect(self, ray, epsilon=EPSILON):
        local_ray = ray.transform(self.inverse_transform)
        return self.local_intersect(local_ray, epsilon)

    def normal_at(self, world_point):
        local_point = self.inverse_transform @ world_point
        local_normal = self.local_normal_at(local_point)

        # Multiplying by the full 4x4 inverse transpose pollutes w with the
        # translation; zero it instead of using the 3x3 submatrix.
        world_normal = (self.inverse_transform_transpose @ local_normal).values.copy()
        world_normal[3] = 0.0
        return Tuple.from_array(world_normal).normalize()

    def local_intersect(self, local_ray, epsilon):
        raise NotImplementedError

    def local_normal_at(self, local_point):
        raise NotImplementedError

    def __repr__(self):
        return "{}(id={})".format(type(self).__name__, self.id)
