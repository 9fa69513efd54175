from geometry.hittable import Hittable, HitRecord
from geometry.sphere import Sphere
from geometry.rectangle import AxisAlignedRect, XYRect, XZRect, YZRect
from geometry.bvh import BVHNode
from geometry.world import HittableList

__all__ = [
    "Hittable",
    "HitRecord",
    "Sphere",
    "AxisAlignedRect",
    "XYRect",
    "XZRect",
    "YZRect",
    "BVHNode",
    "HittableList",
]
