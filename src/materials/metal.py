# materials/metal.py
import random
from typing import Optional, Tuple
from core.errors import ConfigurationError
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material

class Metal(Material):
    """
    Metal material with reflective properties.

    fuzz is the proportion in [0, 1] by which reflected rays may stray from
    a perfect mirror reflection.
    """
    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        if not 0.0 <= fuzz <= 1.0:
            raise ConfigurationError(f"fuzz must be in the range [0, 1], got {fuzz}")
        self.albedo = albedo
        self.fuzz = fuzz

    def scatter(self, rec: HitRecord, rng: random.Random) -> Optional[Tuple[Ray, Vector3]]:
        reflected = reflect(rec.ray.direction.normalize(), rec.normal)
        if self.fuzz > 0:
            reflected = reflected + random_unit_vector(rng) * self.fuzz

        if reflected.dot(rec.normal) > 0:
            return Ray(rec.p, reflected), self.albedo

        return None  # Fuzz pushed the ray below the surface

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
