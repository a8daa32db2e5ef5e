# geometry/sphere.py
from typing import Optional
import numpy as np
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material=None):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = np.sqrt(discriminant)
        # A zero direction gives a == 0; let the roots degrade to NaN/Inf quietly
        with np.errstate(divide="ignore", invalid="ignore"):
            roots = ((-half_b - sqrt_disc) / a, (-half_b + sqrt_disc) / a)
        # Nearest root first; the far root covers rays starting inside the sphere
        for root in roots:
            if t_min < root < t_max:
                point = ray.point_at_parameter(root)
                normal = (point - self.center) / self.radius
                return HitRecord(root, point, normal, self.material)
        return None
