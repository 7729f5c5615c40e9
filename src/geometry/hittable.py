from typing import Optional
from core.vector import Vector3
from core.ray import Ray

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    def __init__(self, point: Vector3 = None, normal: Vector3 = None,
                 distance: float = 0, front_face: bool = True, material = None):
        self.point = point            # Intersection point
        self.normal = normal          # Outward unit normal (away from the center)
        self.distance = distance      # Ray parameter at intersection
        self.front_face = front_face  # Whether the ray arrived from outside
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Stores the outward normal and whether the ray hit the outside of the surface.
        """
        self.normal = outward_normal
        self.front_face = ray.direction.dot(outward_normal) < 0

    def shading_normal(self) -> Vector3:
        """
        The normal oriented against the incoming ray, used for lighting and biasing.
        """
        return self.normal if self.front_face else -self.normal

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")
