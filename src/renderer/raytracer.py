# renderer/raytracer.py
import numpy as np
from core.ray import Ray
from core.utils import make_rng
from core.vector import Vector3
from geometry.hittable import Hittable
from renderer.config import INFINITY, RenderSettings
from renderer.sky import sky_color
from renderer.tone_mapping import gamma_correct, reinhard_tone_mapping, to_rgb8

BLACK = Vector3(0.0, 0.0, 0.0)

class Renderer:
    """
    CPU path tracer driving the scene and material queries once per sample
    per bounce.

    Each renderer owns its own random stream, seeded from the settings, so
    renders are reproducible and independent renderers never share state.
    """
    def __init__(self, settings: RenderSettings = None, rng=None):
        self.settings = settings if settings is not None else RenderSettings()
        self.rng = make_rng(rng if rng is not None else self.settings.seed)
        self.width = self.settings.width
        self.height = self.settings.height

    def ray_color(self, ray: Ray, world: Hittable, depth: int) -> Vector3:
        """
        Radiance along a ray: the sky on a miss, black once the bounce budget
        is spent or the ray is absorbed, otherwise the attenuated color of
        the scattered ray.
        """
        attenuation = Vector3(1.0, 1.0, 1.0)
        for bounce in range(depth):
            rec = world.hit(ray, self.settings.t_min, INFINITY)
            if rec is None:
                return attenuation * sky_color(ray)
            if rec.material is None:
                return BLACK
            result = rec.material.scatter(ray, rec, self.rng)
            if result is None:
                return BLACK
            attenuation = attenuation * result.attenuation
            ray = result.scattered
        # Bounce budget spent
        return BLACK

    def normal_color(self, ray: Ray, world: Hittable) -> Vector3:
        """
        Colors a hit by its surface normal mapped into [0, 1]; misses show the sky.
        """
        rec = world.hit(ray, 0.0, INFINITY)
        if rec is None:
            return sky_color(ray)
        return (rec.normal + Vector3(1.0, 1.0, 1.0)) * 0.5

    def sample_color(self, ray: Ray, world: Hittable) -> Vector3:
        if self.settings.shading == "normal":
            return self.normal_color(ray, world)
        return self.ray_color(ray, world, self.settings.max_depth)

    def render(self, camera, world: Hittable) -> np.ndarray:
        """
        Renders the world into a linear float32 image of shape
        (height, width, 3) whose first row is the top of the picture.
        """
        width, height, samples = self.width, self.height, self.settings.samples
        image = np.zeros((height, width, 3), dtype=np.float32)
        for row, j in enumerate(range(height - 1, -1, -1)):
            for i in range(width):
                pixel = BLACK
                for _ in range(samples):
                    # A single sample goes through the pixel corner, unjittered
                    du = self.rng.random() if samples > 1 else 0.0
                    dv = self.rng.random() if samples > 1 else 0.0
                    ray = camera.get_ray((i + du) / width, (j + dv) / height, self.rng)
                    pixel = pixel + self.sample_color(ray, world)
                image[row, i] = (pixel / samples).to_array()
        return image

    def to_rgb8(self, image: np.ndarray) -> np.ndarray:
        """
        Maps a linear image to 8-bit colors with the configured tone mapping.
        """
        if self.settings.tone_mapping == "reinhard":
            mapped = reinhard_tone_mapping(image, gamma=self.settings.gamma)
        else:
            mapped = gamma_correct(image, self.settings.gamma)
        return to_rgb8(mapped)
