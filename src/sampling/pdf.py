"""
Direction sampling strategies used for importance sampling.

Each PDF can draw a random direction (gen) and report the solid-angle
density of any direction (eval). A MixturePDF draws from one of its two
strategies at random but always evaluates the weighted sum of both
densities, which keeps the estimator unbiased when the strategies disagree.
"""
import math
import random
from core.utils import OrthonormalBasis, random_cosine_direction
from core.vector import Point3, Vector3


class PDF:
    """Abstract direction distribution."""
    def eval(self, direction: Vector3) -> float:
        raise NotImplementedError("eval() must be implemented by subclasses.")

    def gen(self) -> Vector3:
        raise NotImplementedError("gen() must be implemented by subclasses.")


class CosinePDF(PDF):
    """Cosine-weighted hemisphere around a surface normal."""
    def __init__(self, normal: Vector3):
        self.uvw = OrthonormalBasis(normal)

    def eval(self, direction: Vector3) -> float:
        cosine = direction.normalize().dot(self.uvw.w)
        return cosine / math.pi if cosine > 0 else 0.0

    def gen(self) -> Vector3:
        return self.uvw.local(random_cosine_direction())


class HittablePDF(PDF):
    """
    Directions from `origin` towards uniformly chosen points of a shape
    (or an aggregate of shapes).
    """
    def __init__(self, hittable, origin: Point3):
        self.hittable = hittable
        self.origin = origin

    def eval(self, direction: Vector3) -> float:
        return self.hittable.pdf_eval(self.origin, direction)

    def gen(self) -> Vector3:
        return (self.hittable.gen_random_point(self.origin) - self.origin).normalize()


class MixturePDF(PDF):
    """
    Picks pdf1 with probability `weight` and pdf2 otherwise.
    """
    def __init__(self, pdf1: PDF, pdf2: PDF, weight: float = 0.5):
        self.pdf1 = pdf1
        self.pdf2 = pdf2
        self.weight = weight

    def eval(self, direction: Vector3) -> float:
        return (self.weight * self.pdf1.eval(direction)
                + (1.0 - self.weight) * self.pdf2.eval(direction))

    def gen(self) -> Vector3:
        if random.random() < self.weight:
            return self.pdf1.gen()
        return self.pdf2.gen()
