# src/materials/dielectric.py
import math
import random
from typing import Tuple
from core.color import WHITE
from core.errors import ConfigurationError
from core.ray import Ray
from core.utils import reflect, refract
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.material import Material

class Dielectric(Material):
    """
    Clear refractive material such as glass or water.

    refraction_index is relative to the surrounding medium. To model one
    material inside another, use the ratio of their indices.
    """
    def __init__(self, refraction_index: float):
        if refraction_index <= 0:
            raise ConfigurationError(
                f"refraction_index must be positive, got {refraction_index}"
            )
        self.refraction_index = refraction_index

    def scatter(self, rec: HitRecord, rng: random.Random) -> Tuple[Ray, Vector3]:
        # Entering from outside uses 1/n, leaving the medium uses n.
        ratio = 1.0 / self.refraction_index if rec.front_face else self.refraction_index

        unit_direction = rec.ray.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        can_refract = ratio * sin_theta <= 1.0
        if can_refract and rng.random() > reflectance(cos_theta, ratio):
            direction = refract(unit_direction, rec.normal, ratio, cos_theta)
        else:
            direction = reflect(unit_direction, rec.normal)

        # Glass doesn't absorb light
        return Ray(rec.p, direction), WHITE

    def __repr__(self) -> str:
        return f"Dielectric({self.refraction_index})"


def reflectance(cosine: float, ratio: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - ratio) / (1.0 + ratio)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)
