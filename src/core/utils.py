# core/utils.py
import math
import random
from core.vector import Vector3


def random_in_unit_sphere() -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(random.uniform(-1, 1),
                    random.uniform(-1, 1),
                    random.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p


def random_unit_vector() -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere().normalize()


def random_in_unit_disk(rng=None) -> Vector3:
    """
    Returns a random point (x, y, 0) inside the unit disk.
    """
    rng = rng or random
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.dot(p) < 1.0:
            return p


def random_cosine_direction() -> Vector3:
    """
    Returns a cosine-weighted direction in the local frame whose +z axis is
    the surface normal. The density of the result is z / pi.
    """
    r1 = random.random()
    r2 = random.random()
    phi = 2.0 * math.pi * r1
    sqrt_r2 = math.sqrt(r2)
    return Vector3(math.cos(phi) * sqrt_r2,
                   math.sin(phi) * sqrt_r2,
                   math.sqrt(1.0 - r2))


class OrthonormalBasis:
    """
    Right-handed frame (u, v, w) whose w axis follows the given normal.
    """
    __slots__ = ("u", "v", "w")

    def __init__(self, normal: Vector3):
        self.w = normal.normalize()
        a = Vector3(0, 1, 0) if abs(self.w.x) > 0.9 else Vector3(1, 0, 0)
        self.v = self.w.cross(a).normalize()
        self.u = self.w.cross(self.v)

    def local(self, a: Vector3) -> Vector3:
        """Maps local coordinates onto the frame."""
        return self.u * a.x + self.v * a.y + self.w * a.z


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n.
    Callers check for total internal reflection first.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel


def reflectance(cosine: float, ref_idx: float) -> float:
    # Schlick's approximation
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)
