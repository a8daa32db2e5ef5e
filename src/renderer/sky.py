# renderer/sky.py
from core.ray import Ray
from core.vector import Vector3

HORIZON_COLOR = Vector3(1.0, 1.0, 1.0)
ZENITH_COLOR = Vector3(0.5, 0.7, 1.0)

def sky_color(ray: Ray) -> Vector3:
    """
    Background gradient, interpolating vertically from white at the horizon
    to light blue overhead.
    """
    unit_direction = ray.direction.unit_vector()
    t = 0.5 * (unit_direction.y + 1.0)
    return HORIZON_COLOR * (1.0 - t) + ZENITH_COLOR * t
