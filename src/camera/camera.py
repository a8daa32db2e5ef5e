# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray

WORLD_UP = Vector3(0, 1, 0)

class Camera:
    """
    Maps viewport coordinates (u, v) in [0, 1] to rays.

    The view direction comes from yaw (turning right from -z) and pitch
    (tilting up), both in radians. The viewport sits focus_dist in front of
    the camera; a non-zero aperture jitters ray origins across a thin lens so
    only the focus plane stays sharp.

    Defaults give the fixed viewport used by the sphere scenes: lower-left
    corner (-2, -1, -1), horizontal (4, 0, 0) and vertical (0, 2, 0) seen
    from the origin.
    """
    def __init__(self, position: Vector3 = None, yaw: float = 0.0, pitch: float = 0.0,
                 fov: float = math.radians(90), aspect_ratio: float = 2.0,
                 aperture: float = 0.0, focus_dist: float = 1.0):
        self.position = position if position is not None else Vector3(0, 0, 0)
        self.yaw = yaw
        self.pitch = pitch
        self.fov = fov  # Vertical field of view
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.update_camera()

    def update_camera(self):
        """Recomputes the basis and viewport after a parameter change."""
        self.forward = Vector3(
            math.sin(self.yaw) * math.cos(self.pitch),
            math.sin(self.pitch),
            -math.cos(self.yaw) * math.cos(self.pitch)
        ).unit_vector()
        # Looking straight up or down leaves right undefined (NaN); not guarded
        self.right = self.forward.cross(WORLD_UP).unit_vector()
        self.up = self.right.cross(self.forward)

        half_height = math.tan(self.fov / 2) * self.focus_dist
        half_width = self.aspect_ratio * half_height
        self.horizontal = self.right * (2 * half_width)
        self.vertical = self.up * (2 * half_height)
        self.lower_left_corner = (self.position + self.forward * self.focus_dist
                                  - self.right * half_width - self.up * half_height)
        self.lens_radius = self.aperture / 2.0

    def lens_offset(self, rng) -> Vector3:
        if self.lens_radius <= 0:
            return Vector3(0, 0, 0)
        p = random_in_unit_disk(rng) * self.lens_radius
        return self.right * p.x + self.up * p.y

    def get_ray(self, u: float, v: float, rng) -> Ray:
        origin = self.position + self.lens_offset(rng)
        target = self.lower_left_corner + self.horizontal * u + self.vertical * v
        return Ray(origin, target - origin)

def random_in_unit_disk(rng) -> Vector3:
    """Rejection-samples a point in the unit disk on the z = 0 plane."""
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.dot(p) < 1:
            return p
