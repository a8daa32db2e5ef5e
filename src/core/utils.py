# core/utils.py
from typing import Optional, Union
import numpy as np
from core.vector import Vector3

def make_rng(seed: Union[int, np.random.Generator, None] = None) -> np.random.Generator:
    """
    Returns a random generator for scattering. Passing an existing generator
    returns it unchanged so callers can share one stream on purpose.
    """
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)

def random_in_unit_sphere(rng: np.random.Generator) -> Vector3:
    """
    Returns a random point inside a unit sphere, by rejection sampling
    the enclosing cube.
    """
    while True:
        p = 2.0 * Vector3(rng.random(), rng.random(), rng.random()) - Vector3(1.0, 1.0, 1.0)
        if p.squared_length() < 1.0:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(v: Vector3, n: Vector3, ni_over_nt: float) -> Optional[Vector3]:
    """
    Refracts v through a surface with normal n using Snell's law.
    Returns None on total internal reflection.
    """
    unit_v = v.unit_vector()
    dt = unit_v.dot(n)
    discriminant = 1.0 - ni_over_nt * ni_over_nt * (1.0 - dt * dt)
    if discriminant > 0:
        return (unit_v - n * dt) * ni_over_nt - n * np.sqrt(discriminant)
    return None

def schlick(cosine: float, ref_idx: float) -> float:
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * (1.0 - cosine) ** 5
