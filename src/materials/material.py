# materials/material.py
from dataclasses import dataclass, field, replace

from core.color import Color


@dataclass(frozen=True)
class Material:
    """
    Phong surface description: base color plus ambient, diffuse and specular
    coefficients and a shininess exponent.

    Materials are frozen values. The set_* methods return an updated copy,
    so a material shared by several shapes is never changed under them.
    Like Color, materials compare approximately and are not hashable.
    """
    color: Color = field(default_factory=Color.white)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0

    __hash__ = None

    def set_color(self, color: Color) -> "Material":
        return replace(self, color=color)

    def set_ambient(self, ambient: float) -> "Material":
        return replace(self, ambient=ambient)

    def set_diffuse(self, diffuse: float) -> "Material":
        return replace(self, diffuse=diffuse)

    def set_specular(self, specular: float) -> "Material":
        return replace(self, specular=specular)

    def set_shininess(self, shininess: float) -> "Material":
        return replace(self, shininess=shininess)
