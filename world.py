import math

from color import BLACK, Color
from light import PointLight, lighting
from material import Material
from matrix import scaling
from rays import Ray, hit, prepare_computations, sort_intersections
from scene_settings import SceneSettings
from surfaces.sphere import Sphere
from tuples import point


class World:
    """
    Scene container: an ordered list of shapes and exactly one point light.

    The world and everything in it must not be mutated while a render is in
    progress; every method here is a pure function of the scene and its
    arguments.
    """

    def __init__(self, light, objects=None, settings=None):
        if not isinstance(light, PointLight):
            raise ValueError("World requires a PointLight, got {!r}".format(light))
        self.light = light
        self.objects = list(objects) if objects is not None else []
        self.settings = settings if settings is not None else SceneSettings()

    @classmethod
    def default(cls, settings=None):
        """Two concentric spheres lit from the upper left."""
        light = PointLight(point(-10, 10, -10), Color(1, 1, 1))

        outer = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
        inner = Sphere()
        inner.set_transform(scaling(0.5, 0.5, 0.5))

        return cls(light, [outer, inner], settings)

    def add(self, shape):
        self.objects.append(shape)
        return shape

    def intersect(self, ray):
        """Intersections with every shape, ascending by t."""
        epsilon = self.settings.epsilon
        intersections = []
        for shape in self.objects:
            intersections.extend(shape.intersect(ray, epsilon))
        return sort_intersections(intersections)

    def prepare(self, hit_intersection, ray, intersections=None):
        return prepare_computations(hit_intersection, ray, intersections,
                                    shadow_epsilon=self.settings.shadow_epsilon)

    def is_shadowed(self, world_point):
        """Any hit between world_point and the light. Transparent shapes block light too."""
        to_light = self.light.position - world_point
        distance = to_light.magnitude()
        if distance < self.settings.epsilon:
            return False
        ray = Ray(world_point, to_light.normalize())

        shadow_hit = hit(self.intersect(ray))
        return shadow_hit is not None and shadow_hit.t < distance

    def shade_hit(self, comps, remaining):
        material = comps.shape.material
        surface = lighting(
            material,
            comps.shape,
            self.light,
            comps.point,
            comps.eye_direction,
            comps.surface_normalv,
            self.is_shadowed(comps.over_point),
        )

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        if material.reflective > 0 and material.transparency > 0:
            reflectance = schlick(comps)
            return surface + reflected * reflectance + refracted * (1 - reflectance)

        return surface + reflected + refracted

    def color_at(self, ray, remaining=None):
        if remaining is None:
            remaining = self.settings.max_recursions

        intersections = self.intersect(ray)
        hit_intersection = hit(intersections)
        if hit_intersection is None:
            return BLACK

        comps = self.prepare(hit_intersection, ray, intersections)
        return self.shade_hit(comps, remaining)

    def reflected_color(self, comps, remaining):
        reflective = comps.shape.material.reflective
        if remaining <= 0 or reflective == 0:
            return BLACK

        reflected_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflected_ray, remaining - 1) * reflective

    def refracted_color(self, comps, remaining):
        transparency = comps.shape.material.transparency
        if remaining <= 0 or transparency == 0:
            return BLACK

        # Snell's law
        n_ratio = comps.n1 / comps.n2
        cos_i = comps.eye_direction.dot(comps.surface_normalv)
        sin2_t = n_ratio ** 2 * (1 - cos_i ** 2)
        if sin2_t > 1:
            # Total internal reflection
            return BLACK

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.surface_normalv * (n_ratio * cos_i - cos_t) - comps.eye_direction * n_ratio

        refracted_ray = Ray(comps.under_point, direction)
        return self.color_at(refracted_ray, remaining - 1) * transparency


def schlick(comps):
    """Schlick's approximation of the Fresnel reflectance."""
    cos = comps.eye_direction.dot(comps.surface_normalv)

    if comps.n1 > comps.n2:
        n = comps.n1 / comps.n2
        sin2_t = n ** 2 * (1.0 - cos ** 2)
        if sin2_t > 1.0:
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)

    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1 - r0) * (1 - cos) ** 5
