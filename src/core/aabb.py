# src/core/aabb.py
from typing import Tuple
from core.vector import Vector3


def overlap(i1: Tuple[float, float], i2: Tuple[float, float]) -> bool:
    """
    True when the closed intervals i1 and i2 share at least one point.
    """
    return not (i1[1] < i2[0] or i2[1] < i1[0])


class AABB:
    """
    Axis-aligned bounding box spanning minimum..maximum (componentwise).
    """
    __slots__ = ("minimum", "maximum")

    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method over closed slabs. A ray parallel to a slab is
        # unconstrained by it when the origin lies inside, on the planes
        # included, and misses otherwise.
        lo, hi = self.minimum, self.maximum
        o, d = ray.origin, ray.direction
        for o_a, d_a, lo_a, hi_a in ((o.x, d.x, lo.x, hi.x),
                                     (o.y, d.y, lo.y, hi.y),
                                     (o.z, d.z, lo.z, hi.z)):
            if d_a == 0.0:
                if o_a < lo_a or o_a > hi_a:
                    return False
                continue
            inv_d = 1.0 / d_a
            t0 = (lo_a - o_a) * inv_d
            t1 = (hi_a - o_a) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max < t_min:
                return False
        return t_min <= t_max

    def surrounding_box(self, other: "AABB") -> "AABB":
        """
        Smallest box enclosing both boxes. Also usable as
        AABB.surrounding_box(box0, box1).
        """
        small = Vector3(
            min(self.minimum.x, other.minimum.x),
            min(self.minimum.y, other.minimum.y),
            min(self.minimum.z, other.minimum.z)
        )
        big = Vector3(
            max(self.maximum.x, other.maximum.x),
            max(self.maximum.y, other.maximum.y),
            max(self.maximum.z, other.maximum.z)
        )
        return AABB(small, big)

    @staticmethod
    def compare_axis(b1: "AABB", b2: "AABB", axis: int) -> int:
        """
        Orders two boxes by their minimum corner on the given axis.
        Used as a sort key only; ties compare equal.
        """
        a = b1.minimum[axis]
        b = b2.minimum[axis]
        if a < b:
            return -1
        if a > b:
            return 1
        return 0

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    def __hash__(self) -> int:
        return hash((self.minimum, self.maximum))

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
