"""Tests for plangeo/core/line.py: implicit lines and line/circle intersection."""
import math

import numpy as np
import pytest

from plangeo.core.line import CircleIntersection, Line
from plangeo.core.vec2 import Vec2


class TestConstruction:

    def test_from_points_general(self):
        l = Line.from_points(Vec2(0, 1), Vec2(2, 5))  # y = 2x + 1
        assert l.b == 1.0
        assert abs(l.a - (-2.0)) < 1e-12
        assert abs(l.c - (-1.0)) < 1e-12

    def test_from_points_vertical(self):
        l = Line.from_points(Vec2(3, 0), Vec2(3, 7))
        assert (l.a, l.b, l.c) == (1.0, 0.0, -3.0)

    def test_from_points_round_trip(self):
        rng = np.random.default_rng(42)
        for _ in range(50):
            p1 = Vec2(*rng.uniform(-10, 10, 2)); p2 = Vec2(*rng.uniform(-10, 10, 2))
            l = Line.from_points(p1, p2)
            assert l.contains(p1)
            assert l.contains(p2)

    def test_from_point_slope(self):
        l = Line.from_point_slope(Vec2(1, 2), 3.0)  # y = 3x - 1
        assert (l.a, l.b) == (-3.0, 1.0)
        assert l.contains(Vec2(1, 2))
        assert l.contains(Vec2(0, -1))

    def test_from_point_slope_matches_from_points(self):
        p1, p2 = Vec2(-1, 4), Vec2(3, -4)
        slope = (p2.y - p1.y) / (p2.x - p1.x)
        assert Line.are_equal(Line.from_points(p1, p2), Line.from_point_slope(p1, slope))

    def test_normal(self):
        assert Line(2, -3, 1).normal() == Vec2(2, -3)


class TestRelations:

    def test_parallel_and_equal(self):
        l1 = Line.from_points(Vec2(0, 0), Vec2(1, 1))
        l2 = Line.from_points(Vec2(0, 1), Vec2(1, 2))
        l3 = Line.from_points(Vec2(2, 2), Vec2(5, 5))
        assert Line.are_parallel(l1, l2)
        assert not Line.are_equal(l1, l2)
        assert Line.are_equal(l1, l3)
        assert l1 == l3

    def test_parallel_is_scale_sensitive(self):
        l1 = Line(1, 1, 0)
        l2 = Line(2, 2, 0)
        assert not Line.are_parallel(l1, l2)
        assert Line.are_equal(l1.normalized(), l2.normalized())

    def test_do_intersect(self):
        l1 = Line.from_points(Vec2(0, 0), Vec2(2, 2))
        l2 = Line.from_points(Vec2(0, 2), Vec2(2, 0))
        p = Line.do_intersect(l1, l2)
        assert p == Vec2(1, 1)

    def test_do_intersect_with_vertical(self):
        vertical = Line.from_points(Vec2(3, -1), Vec2(3, 1))
        slanted = Line.from_point_slope(Vec2(0, 1), 2.0)
        assert Line.do_intersect(vertical, slanted) == Vec2(3, 7)
        assert Line.do_intersect(slanted, vertical) == Vec2(3, 7)

    def test_do_intersect_parallel_returns_none(self):
        l1 = Line.from_points(Vec2(0, 0), Vec2(1, 0))
        l2 = Line.from_points(Vec2(0, 1), Vec2(1, 1))
        assert Line.do_intersect(l1, l2) is None
        # identical lines are not distinguished from disjoint parallels
        assert Line.do_intersect(l1, l1.copy()) is None

    def test_do_intersect_general_coefficients(self):
        # 2x + 4y - 8 = 0 and x - y = 0 meet at (4/3, 4/3)
        p = Line.do_intersect(Line(2, 4, -8), Line(1, -1, 0))
        assert p == Vec2(4 / 3, 4 / 3)

    def test_side(self):
        l = Line.from_points(Vec2(0, 0), Vec2(1, 0))
        assert l.side(Vec2(0, 1)) == 1
        assert l.side(Vec2(0, -1)) == -1
        assert l.side(Vec2(5, 0)) == 0


class TestTransforms:

    def test_translate_in_place(self):
        l = Line.from_points(Vec2(0, 0), Vec2(1, 1))
        assert l.translate(Vec2(0, 1)) is l
        assert l.contains(Vec2(0, 1))
        assert l.contains(Vec2(1, 2))

    def test_translated_leaves_original(self):
        l = Line.from_points(Vec2(0, 0), Vec2(1, 0))
        moved = l.translated(Vec2(3, -2))
        assert moved.contains(Vec2(0, -2))
        assert l.contains(Vec2(0, 0))
        assert (moved.a, moved.b) == (l.a, l.b)

    def test_normalize(self):
        l = Line(3, 4, 10)
        assert l.normalize() is l
        assert abs(l.normal().norm() - 1.0) < 1e-12
        assert l.contains(Vec2(-2, -1))

    def test_normalize_degenerate_is_noop(self):
        l = Line(0, 0, 5)
        assert (l.normalize().a, l.b, l.c) == (0.0, 0.0, 5.0)


class TestCircleIntersect:

    def test_two_points_origin(self):
        l = Line.from_points(Vec2(-5, 0), Vec2(5, 0))  # y = 0
        res = l.circle_intersect(2.0)
        assert isinstance(res, CircleIntersection)
        assert res.count == 2
        xs = sorted(p.x for p in res.points)
        assert abs(xs[0] + 2) < 1e-12 and abs(xs[1] - 2) < 1e-12
        assert all(abs(p.y) < 1e-12 for p in res.points)

    def test_tangent(self):
        l = Line.from_points(Vec2(-5, 1), Vec2(5, 1))  # y = 1
        res = l.circle_intersect(1.0)
        assert res.count == 1
        assert res.points == (Vec2(0, 1),)

    def test_miss(self):
        l = Line.from_points(Vec2(-5, 3), Vec2(5, 3))
        res = l.circle_intersect(1.0)
        assert res.count == 0
        assert res.points == ()

    def test_points_lie_on_both(self):
        l = Line.from_points(Vec2(-1, -3), Vec2(2, 4))
        r = 3.0
        res = l.circle_intersect(r)
        assert res.count == 2
        for p in res.points:
            assert l.contains(p)
            assert abs(p.norm() - r) < 1e-9
        # symmetric about the foot of the perpendicular from the origin
        mid = (res.points[0] + res.points[1]) * 0.5
        assert abs(Vec2.dot(mid, Vec2.from_points(*res.points))) < 1e-9

    def test_with_center(self):
        center = Vec2(10, -4)
        l = Line.from_points(Vec2(0, -4), Vec2(1, -4))  # y = -4 through the center
        res = l.circle_intersect(5.0, center)
        assert res.count == 2
        got = sorted((p.x, p.y) for p in res.points)
        assert got[0] == pytest.approx((5.0, -4.0))
        assert got[1] == pytest.approx((15.0, -4.0))

    def test_with_center_tangent_vertical(self):
        l = Line.from_points(Vec2(2, 0), Vec2(2, 1))  # x = 2
        res = l.circle_intersect(1.0, Vec2(1, 1))
        assert res.count == 1
        assert res.points[0] == Vec2(2, 1)

    def test_with_center_does_not_mutate(self):
        l = Line.from_points(Vec2(0, 0), Vec2(1, 1))
        before = (l.a, l.b, l.c)
        l.circle_intersect(1.0, Vec2(3, 3))
        assert (l.a, l.b, l.c) == before

    def test_diagonal_chord_length(self):
        l = Line.from_point_slope(Vec2(0, 1), 1.0)  # y = x + 1, distance 1/sqrt(2)
        res = l.circle_intersect(1.0)
        assert res.count == 2
        chord = Vec2.dist(*res.points)
        assert abs(chord - 2 * math.sqrt(1 - 0.5)) < 1e-12
