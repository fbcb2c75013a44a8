# geometry/hittable.py
from typing import Optional
from core.errors import InvariantError
from core.vector import Vector3
from core.ray import Ray

# Normals may drift from unit length by this much before we call it a bug.
NORMAL_TOLERANCE = 0.02


class HitRecord:
    """
    Records details of a ray-object intersection.

    The stored normal always points against the incoming ray; front_face
    records whether that matched the geometry's outward normal, i.e.
    whether the ray hit the object from the outside.
    """
    def __init__(self, ray: Ray, t: float, p: Vector3,
                 outward_normal: Vector3, material=None):
        self.ray = ray          # Incoming ray
        self.t = t              # Ray parameter at intersection
        self.p = p              # Intersection point
        self.material = material
        self.set_face_normal(ray, outward_normal)

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        outward_normal is expected to be a unit vector.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        normal = outward_normal if self.front_face else -outward_normal

        length = normal.length()
        if abs(length - 1) > NORMAL_TOLERANCE:
            raise InvariantError(
                f"Normal {normal!r} must be a unit vector, but has length {length} "
                f"(acceptable delta is +-{NORMAL_TOLERANCE})"
            )
        self.normal = normal


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """
        Returns the nearest hit strictly inside (t_min, t_max), or None.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")
