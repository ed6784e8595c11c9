"""Polygon algorithms: shoelace area, point-in-polygon, convex hull.

A polygon is an ordered sequence of vertices (Vec2 objects, (x, y) pairs or
an (N, 2) array) closed implicitly from the last vertex back to the first.
The algorithms assume a simple polygon and do not validate it.

The ``*_vectorized`` / batch helpers at the bottom take numpy arrays and
mirror the scalar predicates for many points at once.
"""
from __future__ import annotations

from typing import Iterable, List

import numpy as np

from .config import current_tolerance
from .errors import GeometryError
from .logging_utils import get_logger
from .scalar import compare, eq, sign
from .vec2 import Vec2

logger = get_logger('plangeo.polygon')

__all__ = [
	'as_points','points_to_array','simple_poly_area','point_in_simple_poly','convex_hull',
	'ccw_vectorized','poly_signed_area','poly_orientation','points_in_simple_poly',
]


def as_points(data) -> List[Vec2]:
	"""Copy a point sequence (Vec2s, pairs, or an (N,2) array) into a list of Vec2."""
	if isinstance(data, np.ndarray):
		arr = data if data.size else data.reshape(0, 2)
		if arr.ndim != 2 or arr.shape[1] != 2:
			raise GeometryError(f"expected an (N,2) array of points, got shape {data.shape}")
		return [Vec2(x, y) for x, y in arr]
	return [Vec2.of(p) for p in data]


def points_to_array(points: Iterable) -> np.ndarray:
	"""(N,2) float64 array from Vec2s or pairs."""
	try:
		arr = np.asarray([tuple(p) for p in points], dtype=np.float64)
	except (TypeError, ValueError) as e:
		raise GeometryError(f"expected a sequence of 2D points: {e}") from e
	if arr.size == 0:
		return arr.reshape(0, 2)
	if arr.ndim != 2 or arr.shape[1] != 2:
		raise GeometryError(f"expected 2D points, got array of shape {arr.shape}")
	return arr


def _array2(data) -> np.ndarray:
	if isinstance(data, np.ndarray):
		return np.asarray(data, dtype=np.float64)
	return points_to_array(data)


def simple_poly_area(poly) -> float:
	"""Area of a simple polygon via the shoelace formula. Works for either winding order."""
	pts = as_points(poly)
	area = 0.0
	for i, q in enumerate(pts):
		p = pts[i-1]  # wraps to the last vertex for i == 0
		area += (p.x - q.x) * (p.y + q.y)
	return abs(area) / 2.0


def point_in_simple_poly(poly, p) -> int:
	"""Classify p against a simple polygon: -1 inside, 0 on the boundary, 1 outside.

	Winding-number test along a horizontal ray from p. Edges lying on the
	ray's y-level are only checked for containment, so a vertex shared by two
	crossing edges is never counted twice.
	"""
	pts = as_points(poly)
	p = Vec2.of(p)
	n = len(pts)
	w = 0
	for i in range(n):
		a = pts[i]
		if Vec2.equal(p, a):
			return 0
		b = pts[(i+1) % n]
		if eq(p.y, a.y) and eq(p.y, b.y):
			# horizontal edge on the ray
			if compare(min(a.x, b.x), p.x) == -1 and compare(p.x, max(a.x, b.x)) == -1:
				return 0
			continue
		a_below = compare(a.y, p.y) < 0
		b_below = compare(b.y, p.y) < 0
		if a_below == b_below:
			continue
		orientation = Vec2.ccw(a, b, p)
		if orientation == 0:
			return 0
		# upward edge with p on its left, or downward edge with p on its right
		if a_below == (orientation == 1):
			w += 1 if a_below else -1
	return 1 if w == 0 else -1


def convex_hull(points, keep_collinear: bool = False) -> List[Vec2]:
	"""Convex hull by Andrew's monotone chain.

	Returns the hull vertices counterclockwise, starting from the
	lexicographically smallest point. Points lying on a hull edge are dropped
	unless ``keep_collinear`` is set. Inputs of three points or fewer are
	returned as given (no dedup, no reordering).
	"""
	pts = as_points(points)
	n = len(pts)
	if n <= 3:
		logger.debug("convex_hull: %d point(s), returned unchanged", n)
		return pts
	pts.sort(key=lambda v: (v.x, v.y))
	# pop while the last two hull points and the candidate fail to turn left
	def bad_turn(o, a, b):
		t = Vec2.ccw(o, a, b)
		return t == -1 if keep_collinear else t <= 0
	hull: List[Vec2] = []
	for p in pts:
		while len(hull) >= 2 and bad_turn(hull[-2], hull[-1], p):
			hull.pop()
		hull.append(p)
	# pts[-1] already closes the lower chain
	lower_len = len(hull) + 1
	for p in reversed(pts[:-1]):
		while len(hull) >= lower_len and bad_turn(hull[-2], hull[-1], p):
			hull.pop()
		hull.append(p)
	hull.pop()
	return hull


# ---------------------------------------------------------------------------
# numpy batch helpers
# ---------------------------------------------------------------------------

def ccw_vectorized(a_pts, b_pts, c_pt) -> np.ndarray:
	"""Orientation of each turn a_pts[i] -> b_pts[i] -> c_pt as -1/0/1.

	a_pts, b_pts : arrays of shape (M,2)
	c_pt : single point-like (2,)
	Returns an int array of shape (M,), thresholded with the active tolerance.
	"""
	a = _array2(a_pts); b = _array2(b_pts)
	c = np.asarray(tuple(c_pt), dtype=np.float64)
	if a.size == 0:
		return np.zeros((0,), dtype=int)
	raw = (b[:,0]-a[:,0])*(c[1]-a[:,1]) - (b[:,1]-a[:,1])*(c[0]-a[:,0])
	eps = current_tolerance().eps
	return np.where(np.abs(raw) < eps, 0, np.sign(raw)).astype(int)


def poly_signed_area(poly) -> float:
	"""Signed shoelace area: positive for counterclockwise vertex order."""
	pts = _array2(poly)
	if pts.ndim != 2 or pts.shape[1] != 2:
		raise GeometryError(f"expected an (N,2) array of points, got shape {pts.shape}")
	if pts.shape[0] < 3:
		return 0.0
	x = pts[:, 0]; y = pts[:, 1]
	return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def poly_orientation(poly) -> int:
	"""1 for a counterclockwise polygon, -1 for clockwise, 0 when degenerate."""
	return sign(poly_signed_area(poly))


def points_in_simple_poly(poly, points) -> np.ndarray:
	"""Batch form of :func:`point_in_simple_poly`; returns an int array of -1/0/1."""
	verts = as_points(poly)
	query = as_points(points)
	return np.fromiter((point_in_simple_poly(verts, q) for q in query), dtype=int, count=len(query))
