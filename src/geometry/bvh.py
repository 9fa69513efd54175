# src/geometry/bvh.py
import functools
import logging
import random
from typing import List, Optional
from core.aabb import AABB
from core.ray import Ray
from core.vector import Point3, Vector3
from geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)


def _box_comparator(axis: int):
    def compare(h1: Hittable, h2: Hittable) -> int:
        b1 = h1.bounding_box()
        b2 = h2.bounding_box()
        if b1 is None or b2 is None:
            return 1
        return AABB.compare_axis(b1, b2, axis)
    return compare


class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy node.

    The node takes ownership of the given objects: they are partitioned
    along a randomly chosen axis (re-drawn at every level), split at the
    median and handed to two child nodes. A single remaining object becomes
    the only child and `right` is None.
    """
    def __init__(self, objects: List[Hittable]):
        if not objects:
            raise ValueError("BVHNode requires at least one object")

        objects = list(objects)
        axis = random.randrange(3)
        compare = _box_comparator(axis)
        object_span = len(objects)

        if object_span == 1:
            self.left = objects[0]
            self.right = None
        elif object_span == 2:
            first, second = objects
            if compare(first, second) < 0:
                self.left, self.right = first, second
            else:
                self.left, self.right = second, first
        else:
            objects.sort(key=functools.cmp_to_key(compare))
            mid = object_span // 2
            self.left = BVHNode(objects[:mid])
            self.right = BVHNode(objects[mid:])

        box_left = self.left.bounding_box()
        box_right = box_left if self.right is None else self.right.bounding_box()
        if box_left is None or box_right is None:
            zero = Vector3(0.0, 0.0, 0.0)
            self.box = AABB(zero, zero)
        else:
            self.box = AABB.surrounding_box(box_left, box_right)

    @classmethod
    def build(cls, objects: List[Hittable]) -> "BVHNode":
        """Builds a tree over objects and logs its shape."""
        root = cls(objects)
        logger.debug("Built BVH over %d objects (depth %d)", len(objects), root.depth())
        return root

    def depth(self) -> int:
        def child_depth(child: Optional[Hittable]) -> int:
            return child.depth() if isinstance(child, BVHNode) else 0
        return 1 + max(child_depth(self.left), child_depth(self.right))

    def bounding_box(self) -> AABB:
        return self.box

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)
        if self.right is None:
            return hit_left

        # Shrink the range so the right child can only report a closer hit.
        if hit_left is not None:
            t_max = hit_left.t
        hit_right = self.right.hit(ray, t_min, t_max)
        return hit_right if hit_right is not None else hit_left

    def gen_random_point(self, origin: Point3) -> Point3:
        # Either child with equal odds; pdf_eval below weights them the same way.
        if self.right is None or random.random() < 0.5:
            return self.left.gen_random_point(origin)
        return self.right.gen_random_point(origin)

    def pdf_eval(self, origin: Point3, direction: Vector3) -> float:
        if self.right is None:
            return self.left.pdf_eval(origin, direction)
        return 0.5 * (self.left.pdf_eval(origin, direction)
                      + self.right.pdf_eval(origin, direction))
