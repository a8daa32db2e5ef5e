# materials/lambertian.py
from core.ray import Ray
from core.vector import Vector3
from core.utils import random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult

class Lambertian(Material):
    """
    Lambertian diffuse material.
    """

    def __init__(self, albedo: Vector3):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterResult:
        """
        Scatter toward a random point in the unit sphere tangent to the hit point.
        Never absorbs.
        """
        target = rec.point + rec.normal + random_in_unit_sphere(rng)
        scattered = Ray(rec.point, target - rec.point)
        return ScatterResult(self.albedo, scattered)
