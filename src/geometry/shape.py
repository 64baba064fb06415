# geometry/shape.py
from typing import List, Optional

from core.matrix import Matrix
from core.point import Point3
from core.ray import Ray
from core.vector import Vector3
from materials.material import Material


class Shape:
    """
    Abstract base for objects that can be hit by a ray.

    A shape lives in its own object space; `transform` maps object space to
    world space. Incoming rays are moved into object space with the inverse
    transform, and object-space normals are brought back with the transpose
    of that inverse. A plain forward transform would skew normals under
    non-uniform scaling.

    The inverse is computed once here, so a singular transform fails when
    the shape is built (NotInvertibleError) rather than mid-render.
    Subclasses implement local_intersect() and local_normal_at().
    """

    def __init__(self, transform: Optional[Matrix] = None, material: Optional[Material] = None):
        self._transform = transform if transform is not None else Matrix.identity()
        self._material = material if material is not None else Material()
        self._inverse = self._transform.inverse()
        self._inverse_transpose = self._inverse.transpose()

    @property
    def transform(self) -> Matrix:
        return self._transform

    @property
    def inverse_transform(self) -> Matrix:
        return self._inverse

    @property
    def material(self) -> Material:
        return self._material

    def set_transform(self, transform: Matrix) -> "Shape":
        return type(self)(transform=transform, material=self._material)

    def set_material(self, material: Material) -> "Shape":
        return type(self)(transform=self._transform, material=material)

    def intersect(self, ray: Ray) -> List["Intersection"]:
        return self.local_intersect(ray.transform(self._inverse))

    def normal_at(self, world_point: Point3) -> Vector3:
        object_point = self._inverse @ world_point
        object_normal = self.local_normal_at(object_point)
        world_normal = self._inverse_transpose @ object_normal
        return world_normal.normalize()

    def local_intersect(self, ray: Ray) -> List["Intersection"]:
        raise NotImplementedError("local_intersect() must be implemented by subclasses.")

    def local_normal_at(self, point: Point3) -> Vector3:
        raise NotImplementedError("local_normal_at() must be implemented by subclasses.")

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._transform == other._transform and self._material == other._material

    def __repr__(self) -> str:
        return f"{type(self).__name__}(transform={self._transform!r}, material={self._material!r})"
