# materials/material.py
from typing import NamedTuple, Optional
import numpy as np
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord

class ScatterResult(NamedTuple):
    """Color attenuation and outgoing ray of a scatter event."""
    attenuation: Vector3
    scattered: Ray

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng: np.random.Generator) -> Optional[ScatterResult]:
        """
        Computes the scattered ray and attenuation, drawing any randomness from rng.
        Returns None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
