import math

import numpy as np

from matrix import Matrix4
from rays import Ray
from tuples import point


class Camera:
    """
    Pinhole camera with the canvas one unit in front of the eye.

    half_width, half_height and pixel_size are derived from hsize, vsize and
    field_of_view and are recomputed whenever one of those changes.
    """

    def __init__(self, hsize, vsize, field_of_view):
        self._hsize = self._check_size("hsize", hsize)
        self._vsize = self._check_size("vsize", vsize)
        self._field_of_view = self._check_field_of_view(field_of_view)
        self.inverse_transform = Matrix4.identity()

        self.half_width = None
        self.half_height = None
        self.pixel_size = None
        self._update_pixel_size()

    @staticmethod
    def _check_size(name, value):
        if int(value) != value or value <= 0:
            raise ValueError("{} must be a positive integer, got {}".format(name, value))
        return int(value)

    @staticmethod
    def _check_field_of_view(value):
        if not 0 < value < math.pi:
            raise ValueError("field_of_view must be in (0, pi), got {}".format(value))
        return float(value)

    def _update_pixel_size(self):
        half_view = math.tan(self._field_of_view / 2)
        aspect = self._hsize / self._vsize

        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view

        self.pixel_size = (self.half_width * 2) / self._hsize

    @property
    def hsize(self):
        return self._hsize

    @hsize.setter
    def hsize(self, value):
        self._hsize = self._check_size("hsize", value)
        self._update_pixel_size()

    @property
    def vsize(self):
        return self._vsize

    @vsize.setter
    def vsize(self, value):
        self._vsize = self._check_size("vsize", value)
        self._update_pixel_size()

    @property
    def field_of_view(self):
        return self._field_of_view

    @field_of_view.setter
    def field_of_view(self, value):
        self._field_of_view = self._check_field_of_view(value)
        self._update_pixel_size()

    def set_transform(self, transform):
        self.inverse_transform = transform.inverse()

    def ray_for_pixel(self, px, py):
        """Ray from the eye through the center of pixel (px, py)."""
        x_offset = (px + 0.5) * self.pixel_size
        y_offset = (py + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        pixel = self.inverse_transform @ point(world_x, world_y, -1)
        origin = self.inverse_transform @ point(0, 0, 0)
        direction = (pixel - origin).normalize()

        return Ray(origin, direction)

    def render_at(self, world, x, y, depth=None):
        return world.color_at(self.ray_for_pixel(x, y), depth)

    def render_rows(self, world, y_start, y_end, depth=None):
        """Render rows [y_start, y_end) into a (rows, hsize, 3) array."""
        rows = np.zeros((y_end - y_start, self._hsize, 3), dtype=np.float64)
        for y in range(y_start, y_end):
            for x in range(self._hsize):
                rows[y - y_start, x] = self.render_at(world, x, y, depth).values
        return rows

    def render(self, world, depth=None, sink=None):
        """
        Trace one ray per pixel.

        Each color is handed to sink(x, y, color) when a sink is given;
        otherwise a (vsize, hsize, 3) image array is filled and returned.
        """
        if sink is not None:
            for y in range(self._vsize):
                for x in range(self._hsize):
                    sink(x, y, self.render_at(world, x, y, depth))
            return None

        return self.render_rows(world, 0, self._vsize, depth)
