"""Unit tests for Vector3, Ray and the sampling helpers in core.utils."""

import math

import pytest

from conftest import assert_vec_close
from core.ray import Ray
from core.utils import (
    OrthonormalBasis,
    random_cosine_direction,
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
    reflect,
    reflectance,
    refract,
)
from core.uv import UV
from core.vector import Vector3, random_vector, unit_vector


class TestVectorArithmetic:
    """Tests for operators and products."""

    def test_add_sub_neg(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(4.0, 5.0, 6.0)
        assert a + b == Vector3(5.0, 7.0, 9.0)
        assert b - a == Vector3(3.0, 3.0, 3.0)
        assert -a == Vector3(-1.0, -2.0, -3.0)

    def test_scalar_and_componentwise_multiply(self):
        a = Vector3(1.0, 2.0, 3.0)
        assert a * 2 == Vector3(2.0, 4.0, 6.0)
        assert 2.0 * a == Vector3(2.0, 4.0, 6.0)
        assert a * Vector3(2.0, 0.5, -1.0) == Vector3(2.0, 1.0, -3.0)
        assert a / 2 == Vector3(0.5, 1.0, 1.5)

    def test_dot_and_cross(self):
        x = Vector3(1.0, 0.0, 0.0)
        y = Vector3(0.0, 1.0, 0.0)
        assert x.dot(y) == 0.0
        assert x.cross(y) == Vector3(0.0, 0.0, 1.0)
        assert y.cross(x) == Vector3(0.0, 0.0, -1.0)

    def test_indexing(self):
        v = Vector3(7.0, 8.0, 9.0)
        assert [v[0], v[1], v[2]] == [7.0, 8.0, 9.0]
        assert list(v) == [7.0, 8.0, 9.0]
        with pytest.raises(IndexError):
            v[3]


class TestVectorNormalization:
    """Tests for lengths and unit vectors."""

    def test_length(self):
        v = Vector3(3.0, 4.0, 0.0)
        assert v.length_squared() == 25.0
        assert v.length() == 5.0

    def test_unit_vector(self):
        assert_vec_close(unit_vector(Vector3(0.0, 0.0, 5.0)), Vector3(0.0, 0.0, 1.0))

    def test_zero_vector_normalizes_to_zero(self):
        """Normalizing a zero-length vector yields the zero vector, not an error."""
        assert Vector3(0.0, 0.0, 0.0).normalize() == Vector3(0.0, 0.0, 0.0)

    def test_near_zero(self):
        assert Vector3(1e-9, -1e-9, 0.0).near_zero()
        assert not Vector3(1e-7, 0.0, 0.0).near_zero()


class TestRay:
    def test_at(self):
        ray = Ray(Vector3(1.0, 1.0, 1.0), Vector3(0.0, 2.0, 0.0))
        assert ray.at(0.0) == Vector3(1.0, 1.0, 1.0)
        assert ray.at(1.5) == Vector3(1.0, 4.0, 1.0)


class TestUV:
    def test_clamped(self):
        assert UV(-0.5, 1.5).clamped() == UV(0.0, 1.0)
        assert UV(0.25, 0.75).clamped() == UV(0.25, 0.75)


class TestRandomHelpers:
    """Tests for the random direction generators."""

    def test_random_vector_range(self):
        for _ in range(100):
            v = random_vector(0.5, 1.0)
            assert all(0.5 <= c <= 1.0 for c in v)

    def test_unit_sphere_and_disk(self):
        for _ in range(200):
            assert random_in_unit_sphere().length_squared() < 1.0
            d = random_in_unit_disk()
            assert d.z == 0
            assert d.length_squared() < 1.0

    def test_random_unit_vector_is_unit(self):
        for _ in range(100):
            assert random_unit_vector().length() == pytest.approx(1.0)

    def test_cosine_direction_is_upper_hemisphere_unit(self):
        for _ in range(200):
            d = random_cosine_direction()
            assert d.z >= 0.0
            assert d.length() == pytest.approx(1.0)

    def test_cosine_direction_mean_z(self):
        """E[cos theta] under a cos/pi density is 2/3."""
        n = 20000
        mean_z = sum(random_cosine_direction().z for _ in range(n)) / n
        assert mean_z == pytest.approx(2.0 / 3.0, abs=0.01)


class TestOrthonormalBasis:
    @pytest.mark.parametrize("normal", [
        Vector3(0.0, 0.0, 1.0),
        Vector3(1.0, 0.0, 0.0),
        Vector3(1.0, 2.0, -3.0),
    ])
    def test_frame_is_orthonormal(self, normal):
        uvw = OrthonormalBasis(normal)
        for axis in (uvw.u, uvw.v, uvw.w):
            assert axis.length() == pytest.approx(1.0)
        assert uvw.u.dot(uvw.v) == pytest.approx(0.0, abs=1e-12)
        assert uvw.u.dot(uvw.w) == pytest.approx(0.0, abs=1e-12)
        assert uvw.v.dot(uvw.w) == pytest.approx(0.0, abs=1e-12)
        assert_vec_close(uvw.local(Vector3(0.0, 0.0, 1.0)), normal.normalize())


class TestReflection:
    """Tests for reflect, refract and Schlick's approximation."""

    def test_reflect(self):
        v = Vector3(1.0, -1.0, 0.0)
        n = Vector3(0.0, 1.0, 0.0)
        assert reflect(v, n) == Vector3(1.0, 1.0, 0.0)

    def test_refract_straight_through(self):
        d = Vector3(0.0, -1.0, 0.0)
        n = Vector3(0.0, 1.0, 0.0)
        assert_vec_close(refract(d, n, 1.0 / 1.5), d)

    def test_refract_obeys_snell(self):
        s = math.sin(math.radians(30))
        d = Vector3(s, -math.cos(math.radians(30)), 0.0)
        out = refract(d, Vector3(0.0, 1.0, 0.0), 1.0 / 1.5)
        assert out.x == pytest.approx(s / 1.5)
        assert out.length() == pytest.approx(1.0)

    def test_reflectance(self):
        assert reflectance(1.0, 1.5) == pytest.approx(0.04)
        assert reflectance(0.0, 1.5) == pytest.approx(1.0)
