"""Tests for the camera's pixel-to-ray projection and render loop."""

import math

import numpy as np
import pytest

from camera import Camera
from matrix import Matrix4, view_transform
from tuples import point, vector


SQRT2_2 = math.sqrt(2) / 2


class TestCameraSetup:
    def test_construction(self):
        c = Camera(160, 120, math.pi / 2)
        assert c.hsize == 160
        assert c.vsize == 120
        assert c.field_of_view == pytest.approx(math.pi / 2)
        assert c.inverse_transform == Matrix4.identity()

    def test_pixel_size_horizontal_canvas(self):
        assert Camera(200, 125, math.pi / 2).pixel_size == pytest.approx(0.01)

    def test_pixel_size_vertical_canvas(self):
        assert Camera(125, 200, math.pi / 2).pixel_size == pytest.approx(0.01)

    def test_derived_values_follow_changes(self):
        c = Camera(200, 125, math.pi / 2)
        c.field_of_view = math.pi / 3
        assert c.pixel_size == pytest.approx(2 * math.tan(math.pi / 6) / 200)
        c.hsize = 125
        c.vsize = 200
        assert c.half_height == pytest.approx(math.tan(math.pi / 6))
        assert c.half_width == pytest.approx(math.tan(math.pi / 6) * 125 / 200)

    @pytest.mark.parametrize("hsize, vsize, fov", [
        (0, 100, math.pi / 2),
        (100, -1, math.pi / 2),
        (10.5, 100, math.pi / 2),
        (100, 100, 0),
        (100, 100, math.pi),
    ])
    def test_invalid_configuration_fails_fast(self, hsize, vsize, fov):
        with pytest.raises(ValueError):
            Camera(hsize, vsize, fov)

    def test_invalid_reassignment(self):
        c = Camera(10, 10, math.pi / 2)
        with pytest.raises(ValueError):
            c.vsize = 0


class TestRayForPixel:
    def test_center_of_canvas(self):
        r = Camera(201, 101, math.pi / 2).ray_for_pixel(100, 50)
        assert r.origin == point(0, 0, 0)
        assert r.direction == vector(0, 0, -1)

    def test_corner_of_canvas(self):
        r = Camera(201, 101, math.pi / 2).ray_for_pixel(0, 0)
        assert r.origin == point(0, 0, 0)
        assert r.direction == vector(0.66519, 0.33259, -0.66851)

    def test_transformed_camera(self):
        c = Camera(201, 101, math.pi / 2)
        c.set_transform(Matrix4.identity().rotate_y(math.pi / 4).translate(0, -2, 5))
        r = c.ray_for_pixel(100, 50)
        assert r.origin == point(0, 2, -5)
        assert r.direction == vector(SQRT2_2, 0, -SQRT2_2)


class TestRender:
    @pytest.fixture
    def camera(self):
        c = Camera(11, 11, math.pi / 2)
        c.set_transform(view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0)))
        return c

    def test_render_default_world(self, camera, default_world):
        image = camera.render(default_world)
        assert image.shape == (11, 11, 3)
        assert image[5, 5] == pytest.approx([0.38066, 0.47583, 0.2855], abs=1e-4)

    def test_render_at_matches_render(self, camera, default_world):
        color = camera.render_at(default_world, 5, 5)
        assert color.values == pytest.approx([0.38066, 0.47583, 0.2855], abs=1e-4)

    def test_render_to_sink_visits_every_pixel_once(self, camera, default_world):
        seen = {}

        def sink(x, y, color):
            assert (x, y) not in seen
            seen[(x, y)] = color

        assert camera.render(default_world, sink=sink) is None
        assert len(seen) == 11 * 11
        assert seen[(5, 5)].values == pytest.approx([0.38066, 0.47583, 0.2855], abs=1e-4)

    def test_render_rows_matches_full_render(self, camera, default_world):
        image = camera.render(default_world)
        rows = camera.render_rows(default_world, 3, 7)
        np.testing.assert_allclose(rows, image[3:7])
