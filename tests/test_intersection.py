"""Tests for Intersection, hit selection and precomputed shading state."""

import config
from core.matrix import Matrix
from core.point import Point3
from core.ray import Ray
from core.vector import Vector3
from geometry.intersection import Intersection, PrecomputedIntersection, hit, intersections
from geometry.sphere import Sphere


class TestIntersection:
    def test_holds_t_and_shape(self):
        s = Sphere()
        i = Intersection(3.5, s)
        assert i.t == 3.5
        assert i.shape is s

    def test_equality_compares_t(self):
        s = Sphere()
        assert Intersection(1.0, s) == Intersection(1.000001, s)
        assert Intersection(1.0, s) != Intersection(2.0, s)

    def test_aggregate_sorts_by_t(self):
        s = Sphere()
        xs = intersections(Intersection(2, s), Intersection(-1, s), Intersection(1, s))
        assert [i.t for i in xs] == [-1.0, 1.0, 2.0]


class TestHit:
    def test_all_positive(self):
        s = Sphere()
        i1 = Intersection(1, s)
        i2 = Intersection(2, s)
        assert hit(intersections(i2, i1)) is i1

    def test_some_negative(self):
        s = Sphere()
        i1 = Intersection(-1, s)
        i2 = Intersection(1, s)
        assert hit(intersections(i2, i1)) is i2

    def test_all_negative(self):
        s = Sphere()
        assert hit(intersections(Intersection(-2, s), Intersection(-1, s))) is None

    def test_lowest_nonnegative_regardless_of_order(self):
        s = Sphere()
        i4 = Intersection(2, s)
        xs = [Intersection(5, s), Intersection(7, s), Intersection(-3, s), i4]
        assert hit(xs) is i4

    def test_zero_is_not_a_hit(self):
        s = Sphere()
        assert hit([Intersection(0, s)]) is None

    def test_empty(self):
        assert hit([]) is None


class TestPrecompute:
    def test_outside_hit(self, axis_ray):
        shape = Sphere()
        i = Intersection(4, shape)
        comps = PrecomputedIntersection.prepare(i, axis_ray)
        assert comps.t == i.t
        assert comps.shape is shape
        assert comps.point == Point3(0, 0, -1)
        assert comps.eye == Vector3(0, 0, -1)
        assert comps.normal == Vector3(0, 0, -1)
        assert comps.inside is False

    def test_inside_hit_flips_normal(self):
        r = Ray(Point3(0, 0, 0), Vector3(0, 0, 1))
        comps = PrecomputedIntersection.prepare(Intersection(1, Sphere()), r)
        assert comps.point == Point3(0, 0, 1)
        assert comps.eye == Vector3(0, 0, -1)
        assert comps.inside is True
        assert comps.normal == Vector3(0, 0, -1)

    def test_over_point_is_offset_along_normal(self, axis_ray):
        shape = Sphere(Matrix.translation(0, 0, 1))
        comps = PrecomputedIntersection.prepare(Intersection(5, shape), axis_ray)
        assert comps.over_point.z < -config.EPSILON / 2
        assert comps.point.z > comps.over_point.z
        assert comps.over_point == comps.point + comps.normal * config.SHADOW_BIAS

    def test_custom_bias(self, axis_ray):
        comps = PrecomputedIntersection.prepare(Intersection(4, Sphere()), axis_ray, bias=0.5)
        assert comps.over_point == Point3(0, 0, -1.5)
