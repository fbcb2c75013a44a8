"""Pytest configuration for path tracer tests.

Provides shared fixtures: seeded random generators, a deterministic
stand-in generator, and small worlds used across test modules.
"""

import random

import pytest

from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian


class FixedRandom:
    """A random.Random stand-in that always draws the same value."""

    def __init__(self, value=0.5):
        self.value = value

    def random(self):
        return self.value

    def uniform(self, a, b):
        return a + (b - a) * self.value


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    return FixedRandom(0.5)


@pytest.fixture
def gray():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def single_sphere_world(gray):
    """One sphere of radius 0.5 centered at (0, 0, -1)."""
    return HittableList([Sphere(Vector3(0, 0, -1), 0.5, gray)])
