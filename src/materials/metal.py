# materials/metal.py
from typing import Optional
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult

class Metal(Material):
    """
    Metal material with mirror reflection roughened by fuzz.
    """
    def __init__(self, albedo: Vector3, fuzz: float):
        self.albedo = albedo
        # Only the lower bound is clamped
        self.fuzz = max(fuzz, 0.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterResult]:
        reflected = reflect(ray_in.direction.unit_vector(), rec.normal)
        scattered = Ray(rec.point, reflected + random_in_unit_sphere(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) > 0:
            return ScatterResult(self.albedo, scattered)

        return None  # Absorb the ray if it does not scatter away from the surface
