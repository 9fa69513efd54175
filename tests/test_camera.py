"""Tests for the thin-lens camera."""

import math

import pytest

from conftest import assert_vec_close
from camera.camera import Camera
from core.vector import Vector3

UP = Vector3(0.0, 1.0, 0.0)


class TestPinholeCamera:
    @pytest.fixture
    def camera(self):
        return Camera(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0), UP, 90.0, 2.0)

    def test_center_ray_points_at_target(self, camera):
        ray = camera.get_ray(0.5, 0.5)
        assert ray.origin == Vector3(0.0, 0.0, 0.0)
        assert_vec_close(ray.direction.normalize(), Vector3(0.0, 0.0, -1.0))

    def test_corners(self, camera):
        # vfov 90 at focus distance 1: the viewport is 2 high and 4 wide.
        assert_vec_close(camera.get_ray(0.0, 0.0).direction, Vector3(-2.0, -1.0, -1.0))
        assert_vec_close(camera.get_ray(1.0, 1.0).direction, Vector3(2.0, 1.0, -1.0))

    def test_vertical_field_of_view(self):
        camera = Camera(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0), UP, 40.0, 1.0)
        top = camera.get_ray(0.5, 1.0).direction.normalize()
        angle = math.degrees(math.acos(top.dot(Vector3(0.0, 0.0, -1.0))))
        assert angle == pytest.approx(20.0)


class TestThinLens:
    def test_rays_converge_on_focus_plane(self):
        camera = Camera(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0), UP,
                        40.0, 1.5, aperture=0.5, focus_dist=10.0)
        target = None
        origins = set()
        for _ in range(20):
            ray = camera.get_ray(0.3, 0.7)
            assert (ray.origin - Vector3(0.0, 0.0, 0.0)).length() <= 0.25
            origins.add(ray.origin)
            point = ray.at(1.0)
            if target is None:
                target = point
            assert_vec_close(point, target, tol=1e-9)
        assert len(origins) > 1
        assert target.z == pytest.approx(-10.0)
