# src/geometry/world.py
import random
from typing import Iterable, List, Optional
from core.aabb import AABB
from core.ray import Ray
from core.vector import Point3, Vector3
from geometry.bvh import BVHNode
from geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    An unordered collection of Hittable objects, intersected by brute force.

    Used both as the top-level scene handle (usually wrapping a single
    BVHNode) and as the aggregate of light shapes for importance sampling:
    sampling picks one member uniformly and the density is the average of
    the members' densities.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def is_empty(self) -> bool:
        return not self.objects

    def build_bvh(self) -> BVHNode:
        """
        Returns a BVH over the current objects. The list itself is unchanged.
        """
        return BVHNode.build(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> Optional[AABB]:
        if not self.objects:
            return None
        box = None
        for obj in self.objects:
            obj_box = obj.bounding_box()
            if obj_box is None:
                return None
            box = obj_box if box is None else AABB.surrounding_box(box, obj_box)
        return box

    def gen_random_point(self, origin: Point3) -> Point3:
        if not self.objects:
            return origin
        return random.choice(self.objects).gen_random_point(origin)

    def pdf_eval(self, origin: Point3, direction: Vector3) -> float:
        if not self.objects:
            return 0.0
        weight = 1.0 / len(self.objects)
        return sum(weight * obj.pdf_eval(origin, direction) for obj in self.objects)
