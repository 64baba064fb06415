# materials/light.py
from dataclasses import dataclass

from core.color import Color
from core.point import Point3


@dataclass(frozen=True)
class PointLight:
    """
    A light source with no size, emitting `intensity` from `position`.
    Equality is approximate like its fields, so lights are not hashable.
    """
    position: Point3
    intensity: Color

    __hash__ = None
