"""Tests for Camera geometry and sequential rendering."""

import math

import pytest

from camera.camera import Camera
from core.color import Color
from core.matrix import Matrix, NotInvertibleError
from core.point import Point3
from core.utils import float_equal
from core.vector import Vector3
from renderer.canvas import Canvas


class TestCameraSetup:
    def test_defaults(self):
        c = Camera(160, 120, math.pi / 2)
        assert c.hsize == 160
        assert c.vsize == 120
        assert c.field_of_view == math.pi / 2
        assert c.transform == Matrix.identity()

    def test_pixel_size_horizontal(self):
        assert float_equal(Camera(200, 125, math.pi / 2).pixel_size, 0.01)

    def test_pixel_size_vertical(self):
        assert float_equal(Camera(125, 200, math.pi / 2).pixel_size, 0.01)

    @pytest.mark.parametrize("hsize, vsize", [(0, 10), (10, 0), (-1, 5)])
    def test_rejects_empty_resolution(self, hsize, vsize):
        with pytest.raises(ValueError):
            Camera(hsize, vsize, math.pi / 2)

    def test_rejects_singular_transform(self):
        with pytest.raises(NotInvertibleError):
            Camera(10, 10, math.pi / 2, Matrix.scaling(1, 0, 1))

    def test_set_transform_returns_new_camera(self):
        c = Camera(10, 10, math.pi / 2)
        moved = c.set_transform(Matrix.translation(0, 0, -5))
        assert moved.transform == Matrix.translation(0, 0, -5)
        assert c.transform == Matrix.identity()


class TestRayForPixel:
    def test_through_center(self):
        r = Camera(201, 101, math.pi / 2).ray_for_pixel(100, 50)
        assert r.origin == Point3(0, 0, 0)
        assert r.direction == Vector3(0, 0, -1)

    def test_through_corner(self):
        r = Camera(201, 101, math.pi / 2).ray_for_pixel(0, 0)
        assert r.origin == Point3(0, 0, 0)
        assert r.direction == Vector3(0.66519, 0.33259, -0.66851)

    def test_transformed_camera(self):
        transform = Matrix.rotation_y(math.pi / 4) @ Matrix.translation(0, -2, 5)
        r = Camera(201, 101, math.pi / 2, transform).ray_for_pixel(100, 50)
        s = math.sqrt(2) / 2
        assert r.origin == Point3(0, 2, -5)
        assert r.direction == Vector3(s, 0, -s)


class TestRender:
    @pytest.fixture
    def camera(self):
        transform = Matrix.view_transform(Point3(0, 0, -5), Point3(0, 0, 0), Vector3(0, 1, 0))
        return Camera(11, 11, math.pi / 2, transform)

    def test_render_default_world(self, camera, default_world):
        image = camera.render(default_world)
        assert image.width == 11
        assert image.height == 11
        assert image.pixel_at(5, 5) == Color(0.38066, 0.47583, 0.2855)

    def test_render_covers_every_pixel(self, camera):
        class Flat:
            def color_at(self, ray):
                return Color(1, 0.5, 0.25)

        image = camera.render(Flat())
        for y in range(11):
            for x in range(11):
                assert image.pixel_at(x, y) == Color(1, 0.5, 0.25)

    def test_render_into_given_canvas(self, camera, default_world):
        canvas = Canvas(11, 11)
        assert camera.render(default_world, canvas) is canvas
