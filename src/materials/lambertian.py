# materials/lambertian.py

import math
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Color, Vector3
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture
from sampling.pdf import CosinePDF, HittablePDF, MixturePDF


class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.

    Directions are drawn from a cosine-weighted lobe around the normal,
    mixed 50/50 with directions towards the light shapes when any are given.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(albedo)

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, direction: Vector3) -> float:
        cosine = rec.normal.dot(direction.normalize())
        return cosine / math.pi if cosine > 0 else 0.0

    def scatter(self, ray_in: Ray, rec: HitRecord,
                lights=None) -> Optional[Tuple[Vector3, Color]]:
        pdf = CosinePDF(rec.normal)
        if lights is not None and not lights.is_empty():
            pdf = MixturePDF(pdf, HittablePDF(lights, rec.p))

        direction = pdf.gen()
        pdf_value = pdf.eval(direction)
        scattering = self.scattering_pdf(ray_in, rec, direction)
        # A light sample below the surface carries zero weight.
        if pdf_value <= 0 or scattering <= 0:
            return None

        albedo = self.texture.value(rec.uv, rec.p)
        return direction, albedo * (scattering / pdf_value)
