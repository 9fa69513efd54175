# materials/metal.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Color, Vector3
from core.utils import reflect, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture


class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    `fuzz` (clamped to 1) perturbs the mirror direction.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        super().__init__()
        self.texture = as_texture(albedo)
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                lights=None) -> Optional[Tuple[Vector3, Color]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        direction = reflected + random_in_unit_sphere() * self.fuzz

        if direction.dot(rec.normal) <= 0:
            return None  # Absorb the ray if it does not scatter forward
        return direction, self.texture.value(rec.uv, rec.p)
