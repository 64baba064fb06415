# core/vector.py
import math
import numbers

from core.utils import float_equal, reflect


class Vector3:
    """
    A free 3D direction (homogeneous w = 0) supporting arithmetic, dot and
    cross products, normalization and reflection. Vectors carry no position;
    see core.point.Point3 for locations.
    """
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __add__(self, other):
        if isinstance(other, Vector3):
            return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector3):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, t):
        if isinstance(t, numbers.Real):
            return Vector3(self.x * t, self.y * t, self.z * t)
        return NotImplemented

    def __rmul__(self, t):
        return self.__mul__(t)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return (float_equal(self.x, other.x)
                and float_equal(self.y, other.y)
                and float_equal(self.z, other.z))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        m = self.magnitude()
        if m == 0:
            raise ZeroDivisionError("cannot normalize a zero-length vector")
        return self / m

    def reflect(self, normal: "Vector3") -> "Vector3":
        """
        Mirrors this vector about the given normal.
        """
        return reflect(self, normal)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
