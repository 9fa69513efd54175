"""Tests for the direction sampling strategies."""

import math

import pytest

from core.ray import Ray
from core.vector import Vector3
from geometry.rectangle import XZRect
from sampling.pdf import CosinePDF, HittablePDF, MixturePDF

UP = Vector3(0.0, 1.0, 0.0)
ORIGIN = Vector3(0.0, 0.0, 0.0)


@pytest.fixture
def light():
    return XZRect(-1.0, 1.0, -1.0, 1.0, 3.0, None)


class TestCosinePDF:
    def test_eval(self):
        pdf = CosinePDF(UP)
        assert pdf.eval(UP) == pytest.approx(1.0 / math.pi)
        assert pdf.eval(UP * 10.0) == pytest.approx(1.0 / math.pi)
        assert pdf.eval(-UP) == 0.0
        assert pdf.eval(Vector3(1.0, 0.0, 0.0)) == 0.0

    def test_samples_lie_in_hemisphere(self):
        normal = Vector3(1.0, 1.0, 0.0).normalize()
        pdf = CosinePDF(normal)
        for _ in range(200):
            d = pdf.gen()
            assert d.length() == pytest.approx(1.0)
            assert d.dot(normal) >= 0.0
            assert pdf.eval(d) > 0.0


class TestHittablePDF:
    def test_gen_points_at_light(self, light):
        pdf = HittablePDF(light, ORIGIN)
        for _ in range(100):
            d = pdf.gen()
            assert d.length() == pytest.approx(1.0)
            assert light.hit(Ray(ORIGIN, d), 0.001, math.inf) is not None
            assert pdf.eval(d) > 0.0

    def test_eval_delegates_to_shape(self, light):
        pdf = HittablePDF(light, ORIGIN)
        assert pdf.eval(UP) == pytest.approx(light.pdf_eval(ORIGIN, UP))
        assert pdf.eval(-UP) == 0.0


class TestMixturePDF:
    """The mixture density is the weighted sum of both densities."""

    def test_eval_is_exact_weighted_sum(self, light):
        cosine = CosinePDF(UP)
        towards_light = HittablePDF(light, ORIGIN)
        mixture = MixturePDF(cosine, towards_light)
        for _ in range(200):
            d = mixture.gen()
            expected = 0.5 * cosine.eval(d) + 0.5 * towards_light.eval(d)
            assert mixture.eval(d) == expected

    def test_eval_for_directions_from_either_strategy(self, light):
        cosine = CosinePDF(UP)
        towards_light = HittablePDF(light, ORIGIN)
        mixture = MixturePDF(cosine, towards_light, weight=0.25)
        for d in [cosine.gen() for _ in range(50)] + [towards_light.gen() for _ in range(50)]:
            expected = 0.25 * cosine.eval(d) + 0.75 * towards_light.eval(d)
            assert mixture.eval(d) == pytest.approx(expected)

    def test_gen_picks_each_strategy(self, light):
        cosine = CosinePDF(UP)
        towards_light = HittablePDF(light, ORIGIN)
        mixture = MixturePDF(cosine, towards_light)
        hits = 0
        n = 1000
        for _ in range(n):
            if light.hit(Ray(ORIGIN, mixture.gen()), 0.001, math.inf) is not None:
                hits += 1
        # Half the samples come from the light strategy; a few cosine ones hit too.
        assert 0.45 < hits / n < 0.7
