"""
Axis-aligned rectangles.

A rectangle lies in the plane where one coordinate (the "k" axis) is fixed,
and spans [a0, a1] x [b0, b1] on the two remaining axes. Rectangles are the
shapes that can be importance-sampled as area lights: they provide uniform
surface points and the solid-angle density of a direction that reaches them.
"""
import math
import random
from typing import Optional
import numpy as np
from core.aabb import AABB
from core.ray import Ray
from core.uv import UV
from core.vector import Point3, Vector3
from geometry.hittable import Hittable, HitRecord

# Half thickness of a rectangle's bounding box along its fixed axis.
EPS = 1e-4
# Self-intersection offset used when re-tracing light-sampling rays.
PDF_T_MIN = 0.001


class AxisAlignedRect(Hittable):
    """
    Base class for the three rectangle orientations. Subclasses fix the
    axis indices (a_axis, b_axis, k_axis).
    """
    a_axis = 0
    b_axis = 1
    k_axis = 2

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material
        self.area = (a1 - a0) * (b1 - b0)
        normal = [0.0, 0.0, 0.0]
        normal[self.k_axis] = 1.0
        self.normal = Vector3(*normal)

    def _point(self, a: float, b: float, k: float) -> Point3:
        coords = [0.0, 0.0, 0.0]
        coords[self.a_axis] = a
        coords[self.b_axis] = b
        coords[self.k_axis] = k
        return Vector3(*coords)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # A ray parallel to the plane gives t = +-inf or nan, which the
        # range and bounds checks reject.
        with np.errstate(divide="ignore", invalid="ignore"):
            t = float(np.float64(self.k - ray.origin[self.k_axis]) / ray.direction[self.k_axis])
        if not (t_min <= t <= t_max):
            return None
        a = ray.origin[self.a_axis] + t * ray.direction[self.a_axis]
        b = ray.origin[self.b_axis] + t * ray.direction[self.b_axis]
        if not (self.a0 <= a <= self.a1 and self.b0 <= b <= self.b1):
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = ray.at(t)
        rec.uv = UV((a - self.a0) / (self.a1 - self.a0),
                    (b - self.b0) / (self.b1 - self.b0))
        rec.set_face_normal(ray, self.normal)
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        # Padded along the fixed axis so the box has non-zero volume.
        return AABB(self._point(self.a0, self.b0, self.k - EPS),
                    self._point(self.a1, self.b1, self.k + EPS))

    def gen_random_point(self, origin: Point3) -> Point3:
        return self._point(random.uniform(self.a0, self.a1),
                           random.uniform(self.b0, self.b1),
                           self.k)

    def pdf_eval(self, origin: Point3, direction: Vector3) -> float:
        """
        Solid-angle density, seen from origin, of sampling `direction` by
        picking a uniform point on this rectangle.
        """
        rec = self.hit(Ray(origin, direction), PDF_T_MIN, math.inf)
        if rec is None:
            return 0.0
        length_squared = direction.length_squared()
        distance_squared = rec.t * rec.t * length_squared
        cosine = abs(direction.dot(self.normal)) / math.sqrt(length_squared)
        return distance_squared / (cosine * self.area)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self.a0}, {self.a1}, "
                f"{self.b0}, {self.b1}, k={self.k})")


class XYRect(AxisAlignedRect):
    """Rectangle in the plane z = k."""
    a_axis, b_axis, k_axis = 0, 1, 2


class XZRect(AxisAlignedRect):
    """Rectangle in the plane y = k."""
    a_axis, b_axis, k_axis = 0, 2, 1


class YZRect(AxisAlignedRect):
    """Rectangle in the plane x = k."""
    a_axis, b_axis, k_axis = 1, 2, 0
