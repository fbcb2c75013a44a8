# geometry/sphere.py
import math
from typing import Optional
from core.errors import ConfigurationError
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    The material is shared by reference; many spheres may point at one.
    """
    def __init__(self, center: Vector3, radius: float, material):
        if radius <= 0:
            raise ConfigurationError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # Solve a*t^2 + b*t + c = 0, from |C - (Q + t*d)|^2 = r^2 where
        # Z = C - Q is the vector from the ray origin to the center.
        d = ray.direction
        z = self.center - ray.origin
        a = d.dot(d)
        b = -2.0 * d.dot(z)
        c = z.dot(z) - self.radius * self.radius
        discriminant = b * b - 4 * a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Nearest root first; the far root only counts when the near one is
        # out of range (e.g. the ray starts inside the sphere).
        root = (-b - sqrt_disc) / (2.0 * a)
        if root <= t_min or t_max <= root:
            root = (-b + sqrt_disc) / (2.0 * a)
            if root <= t_min or t_max <= root:
                return None

        p = ray.at(root)
        outward_normal = (p - self.center) / self.radius
        return HitRecord(ray, root, p, outward_normal, self.material)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
