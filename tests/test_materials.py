"""Unit tests for the Lambertian, Metal and Dielectric materials.

Tests cover:
- Diffuse scatter direction and the degenerate direction fallback
- Perfect and fuzzy metal reflection, absorption below the surface
- Dielectric pass-through, total internal reflection and Schlick reflectance
- Construction time validation
"""

import math

import pytest

from conftest import FixedRandom
from core.color import WHITE
from core.errors import ConfigurationError
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.dielectric import Dielectric, reflectance
from materials.lambertian import Lambertian
from materials.metal import Metal

UP = Vector3(0, 1, 0)


def hit_plane(direction, material, outward_normal=UP):
    """A hit at the origin on a surface with the given outward normal."""
    ray = Ray(Vector3(0, 0, 0) - direction, direction)
    return HitRecord(ray, 1.0, Vector3(0, 0, 0), outward_normal, material)


class TestLambertian:
    """Tests for diffuse scattering."""

    def test_always_scatters_with_albedo(self, rng):
        albedo = Vector3(0.2, 0.4, 0.6)
        material = Lambertian(albedo)
        rec = hit_plane(Vector3(0, -1, 0), material)
        for _ in range(500):
            scattered = material.scatter(rec, rng)
            assert scattered is not None
            ray, attenuation = scattered
            assert attenuation is albedo
            assert ray.origin == rec.p
            assert not ray.direction.near_zero()
            # normal + unit vector stays in the upper hemisphere
            assert ray.direction.dot(rec.normal) >= 0

    def test_degenerate_direction_falls_back_to_normal(self, monkeypatch, fixed_rng):
        monkeypatch.setattr(
            "materials.lambertian.random_unit_vector", lambda rng: Vector3(0, -1, 0)
        )
        material = Lambertian(Vector3(0.5, 0.5, 0.5))
        rec = hit_plane(Vector3(0, -1, 0), material)
        ray, _ = material.scatter(rec, fixed_rng)
        assert ray.direction == rec.normal


class TestMetal:
    """Tests for reflective scattering."""

    def test_perfect_reflection(self, fixed_rng):
        albedo = Vector3(0.9, 0.8, 0.7)
        material = Metal(albedo, fuzz=0.0)
        incoming = Vector3(1, -1, 0)
        rec = hit_plane(incoming, material)

        ray, attenuation = material.scatter(rec, fixed_rng)
        assert attenuation is albedo
        d = ray.direction
        assert abs(d.x - 1 / math.sqrt(2)) < 1e-12
        assert abs(d.y - 1 / math.sqrt(2)) < 1e-12
        assert d.z == 0
        # Angle of incidence equals angle of reflection
        unit_in = incoming.normalize()
        assert abs(-unit_in.dot(rec.normal) - d.normalize().dot(rec.normal)) < 1e-12

    def test_normal_incidence_reflects_straight_back(self, fixed_rng):
        material = Metal(Vector3(1, 1, 1), fuzz=0.0)
        rec = hit_plane(Vector3(0, -3, 0), material)
        ray, _ = material.scatter(rec, fixed_rng)
        assert ray.direction == Vector3(0, 1, 0)

    def test_fuzz_below_surface_is_absorbed(self, monkeypatch, fixed_rng):
        monkeypatch.setattr(
            "materials.metal.random_unit_vector", lambda rng: Vector3(0, -1, 0)
        )
        material = Metal(Vector3(1, 1, 1), fuzz=1.0)
        # Grazing ray; reflection barely leaves the surface
        rec = hit_plane(Vector3(1, -0.1, 0), material)
        assert material.scatter(rec, fixed_rng) is None

    def test_fuzzy_reflections_stay_above_surface(self, rng):
        material = Metal(Vector3(1, 1, 1), fuzz=0.5)
        rec = hit_plane(Vector3(1, -1, 0), material)
        for _ in range(200):
            scattered = material.scatter(rec, rng)
            if scattered is not None:
                assert scattered[0].direction.dot(rec.normal) > 0

    @pytest.mark.parametrize("fuzz", [-0.1, 1.5])
    def test_fuzz_out_of_range_raises(self, fuzz):
        with pytest.raises(ConfigurationError):
            Metal(Vector3(1, 1, 1), fuzz=fuzz)

    @pytest.mark.parametrize("fuzz", [0.0, 0.3, 1.0])
    def test_fuzz_in_range(self, fuzz):
        assert Metal(Vector3(1, 1, 1), fuzz=fuzz).fuzz == fuzz


class TestDielectric:
    """Tests for refractive scattering."""

    def test_index_of_one_passes_straight_through(self):
        material = Dielectric(1.0)
        incoming = Vector3(0.3, -1, 0.2)
        rec = hit_plane(incoming, material)

        ray, attenuation = material.scatter(rec, FixedRandom(0.99))
        assert attenuation == WHITE
        assert (ray.direction - incoming.normalize()).length() < 1e-12

    def test_total_internal_reflection(self, rng):
        material = Dielectric(1.5)
        # Leaving glass at a grazing angle: sin(theta) * 1.5 > 1
        rec = hit_plane(Vector3(1, -0.2, 0), material, outward_normal=Vector3(0, -1, 0))
        assert not rec.front_face
        for _ in range(50):
            ray, _ = material.scatter(rec, rng)
            assert ray.direction.y > 0
            assert abs(ray.direction.x - Vector3(1, -0.2, 0).normalize().x) < 1e-12

    def test_high_draw_refracts_low_draw_reflects(self):
        material = Dielectric(1.5)
        incoming = Vector3(1, -1, 0)
        rec = hit_plane(incoming, material)

        refracted, _ = material.scatter(rec, FixedRandom(0.99))
        assert refracted.direction.y < 0
        # Entering glass bends towards the normal
        assert refracted.direction.x < incoming.normalize().x

        reflected, _ = material.scatter(rec, FixedRandom(0.0))
        assert reflected.direction.y > 0

    def test_always_scatters_white(self, rng):
        material = Dielectric(1.5)
        rec = hit_plane(Vector3(0.4, -1, 0.1), material)
        for _ in range(100):
            scattered = material.scatter(rec, rng)
            assert scattered is not None
            assert scattered[1] == WHITE

    def test_reflectance(self):
        # Head-on reflectance is r0
        assert reflectance(1.0, 1.5) == pytest.approx(0.04)
        # Grazing incidence reflects everything
        assert reflectance(0.0, 1.5) == pytest.approx(1.0)
        assert reflectance(1.0, 1.0) == 0.0

    @pytest.mark.parametrize("index", [0.0, -1.5])
    def test_non_positive_index_raises(self, index):
        with pytest.raises(ConfigurationError):
            Dielectric(index)
