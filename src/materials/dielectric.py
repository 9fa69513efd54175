# src/materials/dielectric.py
import math
import random
from typing import Tuple
from core.ray import Ray
from core.utils import reflect, reflectance, refract
from core.vector import Color, Vector3
from geometry.hittable import HitRecord
from materials.material import Material

WHITE = Color(1.0, 1.0, 1.0)


class Dielectric(Material):
    """
    Clear refractive material (glass, water). Never absorbs.
    """
    def __init__(self, ref_idx: float):
        super().__init__()
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, lights=None) -> Tuple[Vector3, Color]:
        # Determine if we're entering or exiting the material
        ni_over_nt = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = ni_over_nt * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, ni_over_nt) > random.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ni_over_nt)
        return direction, WHITE
