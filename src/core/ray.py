# core/ray.py
from core.point import Point3
from core.vector import Vector3


class Ray:
    """
    Represents a ray in 3D space with an origin and direction.
    """
    __slots__ = ('origin', 'direction')

    def __init__(self, origin: Point3, direction: Vector3):
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Point3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def transform(self, matrix) -> "Ray":
        """
        Returns a new ray with origin and direction mapped through matrix.
        The direction is not renormalized, so t values stay comparable
        between spaces.
        """
        return Ray(matrix @ self.origin, matrix @ self.direction)

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
