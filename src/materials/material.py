# materials/material.py
import random
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are immutable once built and are shared between objects.
    """
    def scatter(self, rec: HitRecord, rng: random.Random) -> Optional[Tuple[Ray, Vector3]]:
        """
        Computes the scattered ray and attenuation for the hit in rec.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
