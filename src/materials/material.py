# materials/material.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.uv import UV
from core.vector import Color, Point3, Vector3
from geometry.hittable import HitRecord
from materials.textures import Texture, SolidColor

BLACK = Color(0.0, 0.0, 0.0)


def as_texture(albedo: Union[Vector3, Texture]) -> Texture:
    """Wraps a plain color in a SolidColor; textures pass through."""
    if isinstance(albedo, Vector3):
        return SolidColor(albedo)
    return albedo


class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    scatter() returns None when the ray is absorbed, otherwise a tuple
    (direction, attenuation) where the attenuation already carries the
    material's sampling weight, so the caller only multiplies it with the
    radiance arriving from `direction`.
    """
    def __init__(self):
        self.texture = None

    def scatter(self, ray_in: Ray, rec: HitRecord,
                lights=None) -> Optional[Tuple[Vector3, Color]]:
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, direction: Vector3) -> float:
        """
        Density with which the material itself scatters into `direction`.
        """
        return 0.0

    def emitted(self, uv: UV, p: Point3) -> Color:
        """
        Light emitted by the surface. Only light sources emit.
        """
        return BLACK
