# geometry/hittable.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    def __init__(self, t: float, point: Vector3, normal: Vector3, material=None):
        self.t = t              # Ray parameter at intersection
        self.point = point      # Intersection point
        self.normal = normal    # Outward unit normal at intersection
        self.material = material

    def __eq__(self, other) -> bool:
        if not isinstance(other, HitRecord):
            return NotImplemented
        return (self.t == other.t and self.point == other.point
                and self.normal == other.normal and self.material is other.material)

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """
        Returns the hit record of the nearest intersection with
        t_min < t < t_max, or None if the ray misses in that interval.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")
