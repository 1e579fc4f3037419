from color import BLACK


class PointLight:
    def __init__(self, position, intensity):
        self.position = position
        self.intensity = intensity

    def __repr__(self):
        return "PointLight({!r}, {!r})".format(self.position, self.intensity)


def lighting(material, shape, light, point, eye_direction, normal, in_shadow):
    """
    Phong illumination for a single point light.

    The result is ambient + diffuse + specular and is not clamped.
    """
    color = material.color_at(shape, point)
    effective_color = color * light.intensity
    ambient = effective_color * material.ambient

    light_vector = (light.position - point).normalize()
    light_dot_normal = light_vector.dot(normal)

    if light_dot_normal < 0 or in_shadow:
        return ambient

    diffuse = effective_color * (material.diffuse * light_dot_normal)

    # Reflection of the light around the normal, compared to the eye
    reflect_v = (-light_vector).reflect(normal)
    reflect_dot_eye = reflect_v.dot(eye_direction)

    if reflect_dot_eye <= 0:
        specular = BLACK
    else:
        factor = reflect_dot_eye ** material.shininess
        specular = light.intensity * (material.specular * factor)

    return ambient + diffuse + specular
