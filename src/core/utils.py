# core/utils.py
import math
import random
from typing import Optional
from core.vector import Vector3


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def random_vector(rng: random.Random) -> Vector3:
    """
    Returns a vector with each component uniform in [0, 1).
    """
    return Vector3(rng.random(), rng.random(), rng.random())


def random_in_cube(rng: random.Random) -> Vector3:
    """
    Returns a vector with each component uniform in [-1, 1).
    """
    return Vector3(rng.uniform(-1, 1),
                   rng.uniform(-1, 1),
                   rng.uniform(-1, 1))


def random_in_unit_sphere(rng: random.Random) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    Only the squared length is compared, so no square root is taken.
    """
    while True:
        p = random_in_cube(rng)
        if p.length_squared() < 1.0:
            return p


def random_unit_vector(rng: random.Random) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere(rng)
        # Points too close to the center lose precision when normalized.
        if p.length_squared() > 1e-160:
            return p.normalize()


def random_in_unit_disk(rng: random.Random) -> Vector3:
    """
    Returns a random point inside the unit disk on the z=0 plane.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.length_squared() < 1.0:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, etai_over_etat: float,
            cos_theta: Optional[float] = None) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n using
    Snell's law. The caller must have checked that refraction is possible.
    """
    if cos_theta is None:
        cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel
