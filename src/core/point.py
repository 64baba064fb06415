# core/point.py
from core.utils import float_equal
from core.vector import Vector3


class Point3:
    """
    A position in 3D space (homogeneous w = 1).

    Points and vectors are deliberately separate types: point - point gives a
    Vector3, point +/- vector gives a Point3, and adding two points is a
    TypeError.
    """
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def origin(cls) -> "Point3":
        return cls(0.0, 0.0, 0.0)

    def __add__(self, other):
        if isinstance(other, Vector3):
            return Point3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, Point3):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector3):
            return Point3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point3):
            return NotImplemented
        return (float_equal(self.x, other.x)
                and float_equal(self.y, other.y)
                and float_equal(self.z, other.z))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"Point3({self.x}, {self.y}, {self.z})"
