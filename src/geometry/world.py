# src/geometry/world.py
import math
from geometry.hittable import Hittable, HitRecord
from typing import Optional, List
from core.ray import Ray

class HittableList(Hittable):
    """
    An ordered list of Hittable objects queried by brute-force linear scan.

    Every query returns the nearest hit across all objects, not the first
    object in list order that reports one. Primary, reflection and shadow
    rays all go through this same rule.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float = 0.0, t_max: float = math.inf) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.distance
                hit_record = rec
        return hit_record

    def occluded(self, ray: Ray, max_distance: float = math.inf) -> bool:
        """
        True if any object lies along the ray closer than max_distance.
        Stops at the first blocker.
        """
        for obj in self.objects:
            if obj.hit(ray, 0.0, max_distance) is not None:
                return True
        return False
