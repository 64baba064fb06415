# geometry/intersection.py
from typing import Iterable, List, Optional

import config
from core.point import Point3
from core.ray import Ray
from core.utils import float_equal
from core.vector import Vector3


class Intersection:
    """
    A ray parameter `t` together with the shape the ray hit there.

    The shape is held by reference, never copied. Two intersections compare
    equal when their t values agree within EPSILON.
    """
    __slots__ = ('t', 'shape')

    def __init__(self, t: float, shape):
        self.t = float(t)
        self.shape = shape

    def __eq__(self, other) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return float_equal(self.t, other.t)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Intersection(t={self.t}, shape={type(self.shape).__name__})"


def intersections(*xs: Intersection) -> List[Intersection]:
    """
    Aggregates intersections into a list sorted by ascending t.
    """
    return sorted(xs, key=lambda i: i.t)


def hit(xs: Iterable[Intersection]) -> Optional[Intersection]:
    """
    Returns the visible intersection: the one with the smallest positive t.
    Intersections at or behind the ray origin are ignored. Returns None when
    nothing qualifies.
    """
    best = None
    for i in xs:
        if i.t > 0 and (best is None or i.t < best.t):
            best = i
    return best


class PrecomputedIntersection:
    """
    Shading state derived from an intersection and the ray that produced it.

    Attributes:
        intersection: The intersection being shaded
        point: World-space hit point
        eye: Unit vector pointing back along the ray
        normal: Surface normal, flipped to face the eye when the hit is inside
        inside: True when the ray hit the surface from inside the shape
        over_point: point nudged along the normal by SHADOW_BIAS; used as the
            shadow ray origin so the surface does not shadow itself
    """
    __slots__ = ('intersection', 'point', 'eye', 'normal', 'inside', 'over_point')

    def __init__(self, intersection: Intersection, point: Point3, eye: Vector3,
                 normal: Vector3, inside: bool, over_point: Point3):
        self.intersection = intersection
        self.point = point
        self.eye = eye
        self.normal = normal
        self.inside = inside
        self.over_point = over_point

    @property
    def t(self) -> float:
        return self.intersection.t

    @property
    def shape(self):
        return self.intersection.shape

    @classmethod
    def prepare(cls, intersection: Intersection, ray: Ray, bias: float = None) -> "PrecomputedIntersection":
        if bias is None:
            bias = config.SHADOW_BIAS
        point = ray.position(intersection.t)
        eye = -ray.direction
        normal = intersection.shape.normal_at(point)
        inside = normal.dot(eye) < 0
        if inside:
            normal = -normal
        over_point = point + normal * bias
        return cls(intersection, point, eye, normal, inside, over_point)
