"""Tests for Ray."""

from core.ray import Ray
from core.vector import Vector3


class TestRay:

    def test_stores_origin_and_direction(self):
        ray = Ray(Vector3(1, 2, 3), Vector3(0, 0, -1))
        assert ray.origin == Vector3(1, 2, 3)
        assert ray.direction == Vector3(0, 0, -1)

    def test_point_at_zero_is_origin(self):
        ray = Ray(Vector3(1, 2, 3), Vector3(1, 0, 0))
        assert ray.point_at_parameter(0) == Vector3(1, 2, 3)

    def test_point_at_parameter(self):
        ray = Ray(Vector3(0, 0, 0), Vector3(1, 2, 0))
        assert ray.point_at_parameter(2.5) == Vector3(2.5, 5, 0)

    def test_direction_not_normalized(self):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -2))
        assert ray.point_at_parameter(1) == Vector3(0, 0, -2)

    def test_negative_parameter_goes_backwards(self):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert ray.point_at_parameter(-1) == Vector3(0, 0, 1)
