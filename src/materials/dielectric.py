# materials/dielectric.py
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, refract, schlick
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult

class Dielectric(Material):
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterResult:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light
        direction = ray_in.direction
        reflected = reflect(direction, rec.normal)

        # Determine if we're entering or exiting the material
        d_dot_n = direction.dot(rec.normal)
        if d_dot_n > 0:
            outward_normal = -rec.normal
            ni_over_nt = self.ref_idx
            cosine = self.ref_idx * d_dot_n / direction.length()
        else:
            outward_normal = rec.normal
            ni_over_nt = 1.0 / self.ref_idx
            cosine = -d_dot_n / direction.length()

        refracted = refract(direction, outward_normal, ni_over_nt)

        # One draw per scatter event; total internal reflection always reflects,
        # so refraction is only chosen when a refracted ray exists.
        u = rng.random()
        if refracted is None or u < schlick(cosine, self.ref_idx):
            return ScatterResult(attenuation, Ray(rec.point, reflected))
        return ScatterResult(attenuation, Ray(rec.point, refracted))
