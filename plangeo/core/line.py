"""Implicit line ``a*x + b*y + c = 0`` and line/circle intersection.

The constructors do not normalize ``(a, b)``: ``from_points`` yields
``(1, 0, -x)`` for vertical lines and ``b == 1`` otherwise, and
``from_point_slope`` always has ``b == 1``. ``are_parallel`` and
``are_equal`` compare raw coefficients, so only lines built along the same
path compare meaningfully; call :meth:`Line.normalized` on both sides to
compare lines of arbitrary scale.
"""
from __future__ import annotations

import math
from typing import NamedTuple, Optional, Tuple

from .logging_utils import get_logger
from .scalar import eq, fdiv, is_zero, sign
from .vec2 import Vec2

logger = get_logger('plangeo.line')


class CircleIntersection(NamedTuple):
    """Outcome of a line/circle or circle/circle intersection.

    ``count`` is the number of intersection points (``-1`` for infinitely
    many, i.e. coincident circles); ``points`` holds exactly
    ``max(count, 0)`` points.
    """
    count: int
    points: Tuple[Vec2, ...] = ()

    def shifted(self, d: Vec2) -> 'CircleIntersection':
        return CircleIntersection(self.count, tuple(p + d for p in self.points))


class Line:
    __slots__ = ('a', 'b', 'c')

    def __init__(self, a: float = 0.0, b: float = 0.0, c: float = 0.0) -> None:
        self.a = float(a)
        self.b = float(b)
        self.c = float(c)

    @staticmethod
    def from_points(p1: Vec2, p2: Vec2) -> 'Line':
        if is_zero(p1.x - p2.x):
            return Line(1.0, 0.0, -p1.x)
        a = -fdiv(p1.y - p2.y, p1.x - p2.x)
        return Line(a, 1.0, -(a * p1.x) - p1.y)

    @staticmethod
    def from_point_slope(p: Vec2, m: float) -> 'Line':
        a = -m
        b = 1.0
        return Line(a, b, -((a * p.x) + (b * p.y)))

    @staticmethod
    def are_parallel(l1: 'Line', l2: 'Line') -> bool:
        return eq(l1.a, l2.a) and eq(l1.b, l2.b)

    @staticmethod
    def are_equal(l1: 'Line', l2: 'Line') -> bool:
        return Line.are_parallel(l1, l2) and eq(l1.c, l2.c)

    @staticmethod
    def do_intersect(l1: 'Line', l2: 'Line') -> Optional[Vec2]:
        """Intersection point of two lines, or None when they are parallel.

        Identical lines also give None; use :meth:`are_equal` to tell the
        two cases apart.
        """
        if Line.are_parallel(l1, l2):
            logger.debug("do_intersect: parallel lines %r %r", l1, l2)
            return None
        x = fdiv(l2.b * l1.c - l1.b * l2.c, l2.a * l1.b - l1.a * l2.b)
        # recover y from a line that is not vertical
        ref = l1 if not is_zero(l1.b) else l2
        y = -fdiv(ref.a * x + ref.c, ref.b)
        return Vec2(x, y)

    def copy(self) -> 'Line':
        return Line(self.a, self.b, self.c)

    def __repr__(self) -> str:
        return f"Line({self.a!r}, {self.b!r}, {self.c!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return Line.are_equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    def normal(self) -> Vec2:
        """(a, b) as a vector; not necessarily unit length."""
        return Vec2(self.a, self.b)

    def value_at(self, p: Vec2) -> float:
        return self.a * p.x + self.b * p.y + self.c

    def contains(self, p: Vec2) -> bool:
        return is_zero(self.value_at(p))

    def side(self, p: Vec2) -> int:
        """Sign of the line equation at p: which half-plane p lies in."""
        return sign(self.value_at(p))

    def normalize(self) -> 'Line':
        """Rescale in place so that (a, b) has unit length; a degenerate line is left as is."""
        n = math.hypot(self.a, self.b)
        if n == 0:
            return self
        self.a /= n
        self.b /= n
        self.c /= n
        return self

    def normalized(self) -> 'Line':
        return self.copy().normalize()

    def translate(self, d: Vec2) -> 'Line':
        """Move the line by displacement d (in place)."""
        self.c -= self.a * d.x + self.b * d.y
        return self

    def translated(self, d: Vec2) -> 'Line':
        return self.copy().translate(d)

    def circle_intersect(self, r: float, center: Optional[Vec2] = None) -> CircleIntersection:
        """Intersections with the circle of radius r around center (default: origin).

        Returns a :class:`CircleIntersection` with 0, 1 (tangent) or 2 points.
        """
        if center is not None:
            return self.translated(-center).circle_intersect(r).shifted(center)
        a, b, c = self.a, self.b, self.c
        n2 = a * a + b * b
        # closest point of the line to the origin
        x0 = -fdiv(a * c, n2)
        y0 = -fdiv(b * c, n2)
        gap = sign(c * c - r * r * n2)
        if gap > 0:
            return CircleIntersection(0)
        if gap == 0:
            return CircleIntersection(1, (Vec2(x0, y0),))
        d = r * r - fdiv(c * c, n2)
        mult = math.sqrt(fdiv(d, n2))
        return CircleIntersection(2, (
            Vec2(x0 + b * mult, y0 - a * mult),
            Vec2(x0 - b * mult, y0 + a * mult),
        ))


__all__ = ['Line', 'CircleIntersection']
