# geometry/hittable.py
from typing import Optional
from core.aabb import AABB
from core.ray import Ray
from core.uv import ORIGIN_UV, UV
from core.vector import Point3, Vector3


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("p", "normal", "t", "front_face", "material", "uv")

    def __init__(self, p: Point3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, material=None,
                 uv: UV = ORIGIN_UV):
        self.p = p              # Intersection point
        self.normal = normal    # Surface normal, facing the incoming ray
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face  # Whether the hit was on the front side
        self.material = material  # Borrowed from the hit object
        self.uv = uv            # Surface coordinates for texturing

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.

    Shapes that can act as importance-sampled lights override
    gen_random_point() and pdf_eval(); the defaults describe a shape
    that cannot be sampled.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> Optional[AABB]:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")

    def gen_random_point(self, origin: Point3) -> Point3:
        return origin

    def pdf_eval(self, origin: Point3, direction: Vector3) -> float:
        return 0.0

    def is_empty(self) -> bool:
        """True for aggregates holding no shapes; a single shape never is."""
        return False
