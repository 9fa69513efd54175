import math
from typing import Optional
from core.vector import Point3, Vector3
from core.ray import Ray
from core.uv import UV
from geometry.hittable import Hittable, HitRecord
from core.aabb import AABB


def sphere_uv(p: Point3) -> UV:
    """
    Maps a point on the unit sphere to (u, v) in [0, 1]^2.
    u follows the angle around the y axis starting at -x,
    v the angle from y = -1 up to y = +1.
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return UV(phi / (2 * math.pi), theta / math.pi)


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Point3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0 or a == 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if root < t_min or root > t_max:
            root = (-half_b + sqrt_disc) / a
            if root < t_min or root > t_max:
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.uv = sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        # The bounding box of a sphere is center ± radius
        offset = Vector3(self.radius, self.radius, self.radius)
        return AABB(self.center - offset, self.center + offset)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
