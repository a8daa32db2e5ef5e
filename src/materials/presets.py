# materials/presets.py
from core.vector import Vector3
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Vector3(0.8, 0.6, 0.2), fuzz=1.0)

    @staticmethod
    def silver() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.8), fuzz=0.3)

    @staticmethod
    def mirror() -> Metal:
        return Metal(Vector3(0.95, 0.95, 0.95), fuzz=0.0)

    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.8), fuzz=0.6)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)

class ColorPresets:
    """Common albedo colors."""

    RED = Vector3(0.8, 0.3, 0.3)
    GREEN = Vector3(0.8, 0.8, 0.0)
    BLUE = Vector3(0.1, 0.2, 0.5)
    WHITE = Vector3(0.9, 0.9, 0.9)
    GRAY = Vector3(0.5, 0.5, 0.5)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)
