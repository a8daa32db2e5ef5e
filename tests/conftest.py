import numpy as np
import pytest

from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList


class SequenceRng:
    """Stand-in for numpy's Generator that replays fixed random() draws."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def two_sphere_world():
    world = HittableList()
    world.add(Sphere(Vector3(0, 0, -1), 0.5))
    world.add(Sphere(Vector3(0, -100.5, -1), 100))
    return world


def assert_vec_close(actual, expected, abs=1e-6):
    assert actual.x == pytest.approx(expected.x, abs=abs)
    assert actual.y == pytest.approx(expected.y, abs=abs)
    assert actual.z == pytest.approx(expected.z, abs=abs)
