"""
Built-in scenes.

Every builder returns a Scene: the world (a HittableList wrapping one BVH
over all objects), the light shapes to importance-sample and the view the
scene is meant to be rendered from.
"""
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, List, NamedTuple
from camera.camera import Camera
from core.vector import Color, Point3, Vector3, random_vector
from geometry.bvh import BVHNode
from geometry.hittable import Hittable
from geometry.rectangle import XYRect, XZRect, YZRect
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.texture_loader import load_texture
from materials.textures import CheckerTexture, NoiseTexture, SolidColor

SKY = Color(0.7, 0.8, 1.0)
BLACK = Color(0.0, 0.0, 0.0)


@dataclass
class View:
    look_from: Point3 = field(default_factory=lambda: Vector3(13.0, 2.0, 3.0))
    look_at: Point3 = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))
    vup: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    vfov: float = 20.0
    aperture: float = 0.0
    focus_dist: float = 10.0
    aspect_ratio: float = 16.0 / 9.0
    background: Color = SKY

    def camera(self) -> Camera:
        return Camera(self.look_from, self.look_at, self.vup, self.vfov,
                      self.aspect_ratio, self.aperture, self.focus_dist)


class Scene(NamedTuple):
    world: HittableList
    lights: HittableList
    view: View


def _scene(objects: List[Hittable], view: View, lights: List[Hittable] = ()) -> Scene:
    return Scene(HittableList([BVHNode.build(objects)]), HittableList(lights), view)


def _checker() -> CheckerTexture:
    return CheckerTexture(SolidColor(Color(0.2, 0.3, 0.1)), SolidColor(Color(0.9, 0.9, 0.9)))


def cornell_box() -> Scene:
    red = Lambertian(Color(0.65, 0.05, 0.05))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    green = Lambertian(Color(0.12, 0.45, 0.15))
    light = DiffuseLight(Color(15.0, 15.0, 15.0))

    objects = [
        YZRect(0, 555, 0, 555, 555, green),
        YZRect(0, 555, 0, 555, 0, red),
        XZRect(213, 343, 227, 332, 554, light),
        XZRect(0, 555, 0, 555, 0, white),
        XZRect(0, 555, 0, 555, 555, white),
        XYRect(0, 555, 0, 555, 555, white),
        Sphere(Vector3(190.0, 90.0, 190.0), 90.0, Dielectric(1.5)),
        Sphere(Vector3(390.0, 80.0, 350.0), 80.0, Metal(Color(0.7, 0.6, 0.5), 0.0)),
    ]
    # Same geometry as the ceiling lamp, owned by the light aggregate.
    lights = [XZRect(213, 343, 227, 332, 554, light)]
    view = View(look_from=Vector3(278.0, 278.0, -800.0),
                look_at=Vector3(278.0, 278.0, 0.0),
                vfov=40.0, aspect_ratio=1.0, background=BLACK)
    return _scene(objects, view, lights)


def simple_light() -> Scene:
    objects = [
        Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0, Lambertian(NoiseTexture(4.0))),
        Sphere(Vector3(0.0, 2.0, 0.0), 2.0, Lambertian(Color(0.12, 0.85, 0.15))),
    ]
    lights = [
        XYRect(3, 5, 1, 3, -2, DiffuseLight(Color(4.0, 4.0, 4.0))),
        XZRect(-1, 1, -1, 1, 6, DiffuseLight(Color(2.0, 2.0, 2.0))),
    ]
    objects.extend(lights)
    view = View(look_from=Vector3(26.0, 3.0, 6.0), look_at=Vector3(0.0, 2.0, 0.0),
                background=BLACK)
    # The lamps are shared with the world; both only read them.
    return _scene(objects, view, lights)


def two_spheres() -> Scene:
    objects = [
        Sphere(Vector3(0.0, -10.0, 0.0), 10.0, Lambertian(_checker())),
        Sphere(Vector3(0.0, 10.0, 0.0), 10.0, Lambertian(_checker())),
    ]
    return _scene(objects, View())


def two_perlin_spheres() -> Scene:
    objects = [
        Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0, Lambertian(NoiseTexture(4.0))),
        Sphere(Vector3(0.0, 2.0, 0.0), 2.0, Lambertian(NoiseTexture(4.0))),
    ]
    return _scene(objects, View())


def earth(image_path: str = "earthmap.jpg") -> Scene:
    """
    Raises:
        FileNotFoundError, ValueError: If the texture cannot be loaded.
    """
    texture = load_texture(image_path)
    objects = [Sphere(Vector3(0.0, 0.0, 0.0), 2.0, Lambertian(texture))]
    return _scene(objects, View())


def random_scene(grid: int = 11) -> Scene:
    objects: List[Hittable] = [
        Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0, Lambertian(_checker())),
    ]

    for a in range(-grid, grid):
        for b in range(-grid, grid):
            choose_mat = random.random()
            center = Vector3(a + 0.9 * random.random(), 0.2, b + 0.9 * random.random())
            if (center - Vector3(4.0, 0.2, 0.0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                material = Lambertian(random_vector() * random_vector())
            elif choose_mat < 0.95:
                material = Metal(random_vector(0.5, 1.0), random.uniform(0.0, 0.5))
            else:
                material = Dielectric(1.5)
            objects.append(Sphere(center, 0.2, material))

    objects.append(Sphere(Vector3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)))
    objects.append(Sphere(Vector3(-4.0, 1.0, 0.0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    objects.append(Sphere(Vector3(4.0, 1.0, 0.0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))
    return _scene(objects, View(aperture=0.1))


SCENES: Dict[str, Callable[..., Scene]] = {
    "cornell_box": cornell_box,
    "simple_light": simple_light,
    "two_spheres": two_spheres,
    "two_perlin_spheres": two_perlin_spheres,
    "earth": earth,
    "random_scene": random_scene,
}


def build_scene(name: str, **kwargs) -> Scene:
    """
    Raises:
        KeyError: If no scene is registered under `name`.
    """
    try:
        builder = SCENES[name]
    except KeyError:
        raise KeyError(f"Unknown scene {name!r}; choose from {sorted(SCENES)}") from None
    return builder(**kwargs)
