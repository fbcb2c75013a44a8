# renderer/integrator.py
import math
import random
from core.color import BLACK, LIGHT_BLUE, WHITE
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable

# Scattered rays start slightly off the surface to avoid shadow acne.
T_MIN = 0.001
T_MAX = math.inf


def background(ray: Ray) -> Vector3:
    """
    Sky gradient from white at the bottom to light blue at the top.
    """
    unit_direction = ray.direction.normalize()
    # y is in [-1, 1]; remap to [0, 1] for the blend
    a = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - a) + LIGHT_BLUE * a


def ray_color(ray: Ray, world: Hittable, t_min: float, t_max: float,
              depth: int, rng: random.Random) -> Vector3:
    """
    Follows ray through world for at most depth bounces and returns the
    light it gathers. depth is a hard cutoff.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, t_min, t_max)
    if rec is None:
        return background(ray)

    scattered = rec.material.scatter(rec, rng)
    if scattered is None:
        return BLACK

    new_ray, attenuation = scattered
    return ray_color(new_ray, world, t_min, t_max, depth - 1, rng) * attenuation
