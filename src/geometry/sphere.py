# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from materials.material import Material

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material: Material = None):
        if not radius > 0:
            raise ValueError("sphere radius must be positive, got {}".format(radius))
        object.__setattr__(self, "center", center)
        object.__setattr__(self, "radius", float(radius))
        object.__setattr__(self, "material", material if material is not None else Material())

    def __setattr__(self, name, value):
        raise AttributeError("Sphere is immutable")

    def __reduce__(self):
        return (Sphere, (self.center, self.radius, self.material))

    def hit(self, ray: Ray, t_min: float = 0.0, t_max: float = math.inf) -> Optional[HitRecord]:
        # |o + d*t - c|^2 = r^2  ->  a*t^2 + b*t + c = 0
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        if a == 0:
            return None
        b = 2 * oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4 * a * c

        # A tangent ray (discriminant == 0) counts as a miss.
        if discriminant <= 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        t1 = (-b + sqrt_disc) / (2 * a)
        t2 = (-b - sqrt_disc) / (2 * a)

        # t2 <= t1, so t2 is the near surface whenever it is in front of the ray.
        if t_min < t2 < t_max:
            root = t2
        elif t_min < t1 < t_max:
            root = t1
        else:
            return None

        rec = HitRecord()
        rec.distance = root
        rec.point = ray.point_at(root)
        outward_normal = (rec.point - self.center).normalize()
        rec.set_face_normal(ray, outward_normal)
        rec.material = self.material
        return rec

    def __repr__(self) -> str:
        return f"Sphere({self.center}, {self.radius})"
