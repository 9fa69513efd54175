# materials/diffuse_light.py
from typing import Union
from core.ray import Ray
from core.uv import UV
from core.vector import Color, Point3, Vector3
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture


class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    The texture can be used to create patterns in the emitted light.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec: HitRecord, lights=None) -> None:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, uv: UV, p: Point3) -> Color:
        """
        Return the emitted radiance from the texture, on both faces.

        Args:
            uv (UV): Surface coordinates of the hit.
            p (Point3): The hit point.

        Returns:
            Color: The emission color from the texture.
        """
        return self.texture.value(uv, p)
