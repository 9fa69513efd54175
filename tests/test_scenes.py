"""Tests for the built-in scene builders."""

import math

import numpy as np
import pytest
from PIL import Image

from core.ray import Ray
from core.vector import Color, Vector3
from geometry.bvh import BVHNode
from geometry.rectangle import XZRect
from geometry.world import HittableList
from materials.diffuse_light import DiffuseLight
from scenes import SCENES, Scene, View, build_scene
from scenes.builtin import cornell_box, random_scene


def assert_well_formed(scene):
    assert isinstance(scene, Scene)
    assert isinstance(scene.world, HittableList)
    assert len(scene.world) == 1
    assert isinstance(scene.world.objects[0], BVHNode)
    assert isinstance(scene.lights, HittableList)
    assert isinstance(scene.view, View)


class TestCornellBox:
    """Tests for the Cornell box layout."""

    def test_structure(self):
        scene = cornell_box()
        assert_well_formed(scene)
        assert scene.view.background == Color(0.0, 0.0, 0.0)
        assert scene.view.aspect_ratio == 1.0
        assert len(scene.lights) == 1
        lamp = scene.lights.objects[0]
        assert isinstance(lamp, XZRect)
        assert (lamp.a0, lamp.a1, lamp.b0, lamp.b1, lamp.k) == (213, 343, 227, 332, 554)
        assert isinstance(lamp.material, DiffuseLight)

    def test_box_is_closed_around_the_interior(self):
        scene = cornell_box()
        origin = Vector3(278.0, 278.0, 278.0)
        for direction in [Vector3(1.0, 0.0, 0.0), Vector3(-1.0, 0.0, 0.0),
                          Vector3(0.0, 1.0, 0.0), Vector3(0.0, -1.0, 0.0),
                          Vector3(0.0, 0.0, 1.0), Vector3(0.3, 0.7, -0.2)]:
            assert scene.world.hit(Ray(origin, direction), 0.001, math.inf) is not None

    def test_camera_looks_into_the_box(self):
        scene = cornell_box()
        ray = scene.view.camera().get_ray(0.5, 0.5)
        rec = scene.world.hit(ray, 0.001, math.inf)
        assert rec is not None
        assert rec.p.z == pytest.approx(555.0)

    def test_light_is_visible_from_the_floor(self):
        scene = cornell_box()
        origin = Vector3(278.0, 0.0, 278.0)
        rec = scene.world.hit(Ray(origin, Vector3(0.0, 1.0, 0.0)), 0.001, math.inf)
        assert isinstance(rec.material, DiffuseLight)
        assert rec.p.y == pytest.approx(554.0)


class TestOtherScenes:
    @pytest.mark.parametrize("name", ["simple_light", "two_spheres", "two_perlin_spheres"])
    def test_builders(self, name):
        assert_well_formed(build_scene(name))

    def test_simple_light_has_lamps(self):
        scene = build_scene("simple_light")
        assert len(scene.lights) == 2
        assert scene.view.background == Color(0.0, 0.0, 0.0)

    def test_outdoor_scenes_have_sky_and_no_lamps(self):
        scene = build_scene("two_spheres")
        assert len(scene.lights) == 0
        assert scene.view.background == Color(0.7, 0.8, 1.0)

    def test_random_scene(self):
        scene = random_scene(grid=2)
        assert_well_formed(scene)
        assert scene.view.aperture == 0.1
        ray = Ray(Vector3(13.0, 2.0, 3.0), Vector3(-13.0, -2.0, -3.0))
        assert scene.world.hit(ray, 0.001, math.inf) is not None

    def test_earth(self, tmp_path):
        path = tmp_path / "earth.png"
        Image.fromarray(np.full((4, 8, 3), 200, dtype=np.uint8)).save(path)
        scene = build_scene("earth", image_path=str(path))
        assert_well_formed(scene)

    def test_earth_missing_texture(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            build_scene("earth", image_path=str(tmp_path / "nowhere.jpg"))


class TestRegistry:
    def test_known_names(self):
        assert set(SCENES) == {"cornell_box", "simple_light", "two_spheres",
                               "two_perlin_spheres", "earth", "random_scene"}

    def test_unknown_scene(self):
        with pytest.raises(KeyError, match="cornell_box"):
            build_scene("teapot")
