# core/vector.py
import numpy as np

class Vector3:
    """
    An immutable 3D vector of single-precision floats supporting arithmetic,
    dot and cross products, and normalization.

    The same type is used for positions, directions and colors (r=x, g=y, b=z).
    Degenerate values (NaN/Inf) are propagated, never rejected.
    """
    # Makes numpy scalars defer to our reflected operators (2 * v, np.float32(2) * v).
    __array_ufunc__ = None

    def __init__(self, x: float, y: float, z: float):
        self.x = np.float32(x)
        self.y = np.float32(y)
        self.z = np.float32(z)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        t = np.float32(t)
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vector3(self.x / t, self.y / t, self.z / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((float(self.x), float(self.y), float(self.z)))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def squared_length(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return np.sqrt(self.squared_length())

    def unit_vector(self) -> "Vector3":
        """
        Returns this vector scaled to unit length. A zero vector yields NaN
        components rather than raising.
        """
        return self / self.length()

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float32)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
