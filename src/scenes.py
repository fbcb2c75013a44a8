# scenes.py
import random
from typing import Any, Dict, Tuple
from core.utils import random_vector
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.lambertian import Lambertian
from materials.metal import Metal


def simple_scene() -> Tuple[HittableList, Dict[str, Any]]:
    """
    Three spheres on a large ground sphere: hollow glass on the left,
    diffuse blue in the middle and fuzzy gold metal on the right.
    """
    world = HittableList()
    world.add(Sphere(Vector3(0, -100.5, -1), 100, Lambertian(Vector3(0.8, 0.8, 0.0))))
    world.add(Sphere(Vector3(0, 0, -1.2), 0.5, Lambertian(Vector3(0.1, 0.2, 0.5))))
    # An air bubble inside glass makes a hollow sphere
    world.add(Sphere(Vector3(-1, 0, -1), 0.5, Dielectric(1.5)))
    world.add(Sphere(Vector3(-1, 0, -1), 0.4, Dielectric(1.0 / 1.5)))
    world.add(Sphere(Vector3(1, 0, -1), 0.5, Metal(Vector3(0.8, 0.6, 0.2), fuzz=1.0)))

    camera = dict(
        position=Vector3(-2, 2, 1),
        look_at=Vector3(0, 0, -1),
        vertical_fov=20,
        defocus_angle=10,
        focus_dist=3.4,
    )
    return world, camera


def random_spheres(rng: random.Random) -> Tuple[HittableList, Dict[str, Any]]:
    """
    A grid of small random spheres around three large ones.
    """
    world = HittableList()
    glass = Dielectric(1.5)
    clearing = Vector3(4, 0.2, 0)

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            # Keep the big metal sphere unobstructed
            if (center - clearing).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = random_vector(rng) * random_vector(rng)
                world.add(Sphere(center, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = Vector3(rng.uniform(0.5, 1), rng.uniform(0.5, 1), rng.uniform(0.5, 1))
                fuzz = (rng.random() + 1) / 4
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                world.add(Sphere(center, 0.2, glass))

    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(Vector3(0.5, 0.5, 0.5))))
    world.add(Sphere(Vector3(0, 1, 0), 1, glass))
    world.add(Sphere(Vector3(-4, 1, 0), 1, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))

    camera = dict(
        aspect_ratio=16.0 / 9.0,
        width=300,
        vertical_fov=20,
        position=Vector3(13, 2, 3),
        look_at=Vector3(0, 0, 0),
        up=Vector3(0, 1, 0),
        defocus_angle=0.6,
        focus_dist=10,
    )
    return world, camera


SCENES = {
    "simple": lambda rng: simple_scene(),
    "random": random_spheres,
}
