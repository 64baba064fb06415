# geometry/sphere.py
import math
from typing import List

from core.point import Point3
from core.ray import Ray
from core.vector import Vector3
from geometry.intersection import Intersection
from geometry.shape import Shape


class Sphere(Shape):
    """
    Unit sphere centred on the object-space origin. Size and placement come
    from the transform.
    """
    def local_intersect(self, ray: Ray) -> List[Intersection]:
        sphere_to_ray = ray.origin - Point3.origin()
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0
        discriminant = b * b - 4.0 * a * c

        if discriminant < 0:
            return []

        sqrt_disc = math.sqrt(discriminant)
        t1 = (-b - sqrt_disc) / (2.0 * a)
        t2 = (-b + sqrt_disc) / (2.0 * a)
        return [Intersection(t1, self), Intersection(t2, self)]

    def local_normal_at(self, point: Point3) -> Vector3:
        return point - Point3.origin()
