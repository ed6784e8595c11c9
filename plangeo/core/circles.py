"""Circle/circle intersection reduced to a line/circle intersection."""
from __future__ import annotations

from typing import Optional

from .line import CircleIntersection, Line
from .logging_utils import get_logger
from .scalar import eq, is_zero
from .vec2 import Vec2

logger = get_logger('plangeo.circles')


def two_circle_intersect(r1: float, r2: float, c2: Vec2, c1: Optional[Vec2] = None) -> CircleIntersection:
    """Intersect circle (c1, r1) with circle (c2, r2).

    ``c1`` defaults to the origin. Returns a :class:`CircleIntersection` whose
    count is 0, 1 or 2, or -1 for two coincident circles (infinitely many
    points). Concentric circles with different radii give 0 whether or not
    one contains the other.

    The radical line of the two circles,
    ``-2*cx*x - 2*cy*y + (|c|^2 + r1^2 - r2^2) = 0`` with ``c = c2 - c1``,
    holds every common point, so the answer is its intersection with the
    first circle.
    """
    if c1 is not None:
        return two_circle_intersect(r1, r2, c2 - c1).shifted(c1)
    if is_zero(c2.x) and is_zero(c2.y):
        if eq(r1, r2):
            logger.debug("two_circle_intersect: coincident circles r=%g", r1)
            return CircleIntersection(-1)
        logger.debug("two_circle_intersect: concentric circles r1=%g r2=%g", r1, r2)
        return CircleIntersection(0)
    radical = Line(-2.0 * c2.x, -2.0 * c2.y, c2.squared_norm() + r1 * r1 - r2 * r2)
    return radical.circle_intersect(r1)


__all__ = ['two_circle_intersect']
