from color import Color


class Material:
    def __init__(self, color=None, ambient=0.1, diffuse=0.9, specular=0.9, shininess=200.0,
                 reflective=0.0, transparency=0.0, refractive_index=1.0, pattern=None):
        if not 0.0 <= reflective <= 1.0:
            raise ValueError("reflective must be in [0, 1], got {}".format(reflective))
        if not 0.0 <= transparency <= 1.0:
            raise ValueError("transparency must be in [0, 1], got {}".format(transparency))
        if refractive_index <= 0:
            raise ValueError("refractive_index must be positive, got {}".format(refractive_index))

        self.color = color if color is not None else Color(1.0, 1.0, 1.0)
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess
        self.reflective = reflective
        self.transparency = transparency
        self.refractive_index = refractive_index
        self.pattern = pattern

    def color_at(self, shape, world_point):
        """Pattern color at world_point if a pattern is set, else the flat color."""
        if self.pattern is not None:
            return self.pattern.color_at_object(shape, world_point)
        return self.color

    def __repr__(self):
        return ("Material(color={!r}, ambient={}, diffuse={}, specular={}, shininess={}, "
                "reflective={}, transparency={}, refractive_index={}, pattern={})").format(
            self.color, self.ambient, self.diffuse, self.specular, self.shininess,
            self.reflective, self.transparency, self.refractive_index,
            type(self.pattern).__name__ if self.pattern is not None else None)
