# src/geometry/world.py
from typing import Iterable, Iterator, List, Optional
from core.errors import ConfigurationError
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    An ordered list of Hittable objects that is itself Hittable.
    Intersection is a linear scan returning the nearest surface.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = []
        for obj in objects or ():
            self.add(obj)

    def add(self, obj: Hittable):
        if obj is None:
            raise ConfigurationError("Cannot add None to a HittableList")
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            # Later objects only need to beat the best hit so far.
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
