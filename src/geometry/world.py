# geometry/world.py
from typing import Iterable, List, Optional, Tuple

from core.color import Color
from core.matrix import Matrix
from core.point import Point3
from core.ray import Ray
from geometry.intersection import Intersection, PrecomputedIntersection, hit
from geometry.shape import Shape
from geometry.sphere import Sphere
from materials.light import PointLight
from materials.lighting import lighting
from materials.material import Material


class World:
    """
    An ordered collection of shapes lit by point lights.

    The world is read-only once built: rendering never mutates it, so the
    same instance can be shared by every pixel (and pickled to worker
    processes). Rays that hit nothing get `background`.
    """

    def __init__(self, objects: Iterable[Shape] = (), lights: Iterable[PointLight] = (),
                 background: Optional[Color] = None):
        self._objects: Tuple[Shape, ...] = tuple(objects)
        self._lights: Tuple[PointLight, ...] = tuple(lights)
        self.background = background if background is not None else Color.black()

    @classmethod
    def default(cls) -> "World":
        """
        The two-sphere reference scene: a tinted unit sphere wrapped around a
        half-size default sphere, lit by a white light at (-10, 10, -10).
        """
        light = PointLight(Point3(-10, 10, -10), Color(1, 1, 1))
        outer = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
        inner = Sphere(transform=Matrix.scaling(0.5, 0.5, 0.5))
        return cls([outer, inner], [light])

    @property
    def objects(self) -> Tuple[Shape, ...]:
        return self._objects

    @property
    def lights(self) -> Tuple[PointLight, ...]:
        return self._lights

    @property
    def light(self) -> Optional[PointLight]:
        """The primary light, or None for an unlit world."""
        return self._lights[0] if self._lights else None

    def with_objects(self, objects: Iterable[Shape]) -> "World":
        return World(objects, self._lights, self.background)

    def with_lights(self, lights: Iterable[PointLight]) -> "World":
        return World(self._objects, lights, self.background)

    def intersect_world(self, ray: Ray) -> List[Intersection]:
        xs = [i for obj in self._objects for i in obj.intersect(ray)]
        xs.sort(key=lambda i: i.t)
        return xs

    def is_shadowed(self, point: Point3, light: Optional[PointLight] = None) -> bool:
        """
        True when something sits between point and the light. Callers pass
        the bias-shifted over_point, never the raw hit point.
        """
        if light is None:
            light = self.light
        if light is None:
            return False
        v = light.position - point
        distance = v.magnitude()
        if distance == 0:
            return False
        h = hit(self.intersect_world(Ray(point, v / distance)))
        return h is not None and h.t < distance

    def precompute(self, intersection: Intersection, ray: Ray) -> PrecomputedIntersection:
        return PrecomputedIntersection.prepare(intersection, ray)

    def shade_hit(self, comps: PrecomputedIntersection) -> Color:
        color = Color.black()
        material = comps.shape.material
        for light in self._lights:
            shadowed = self.is_shadowed(comps.over_point, light)
            color = color + lighting(material, light, comps.point, comps.eye, comps.normal, shadowed)
        return color

    def color_at(self, ray: Ray) -> Color:
        h = hit(self.intersect_world(ray))
        if h is None:
            return self.background
        return self.shade_hit(self.precompute(h, ray))

    def __repr__(self) -> str:
        return f"World({len(self._objects)} objects, {len(self._lights)} lights)"
