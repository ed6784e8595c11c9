"""2D vector / point value type and point-level geometric predicates.

A :class:`Vec2` is used interchangeably as a point and as a displacement.
Equality is tolerance based, so vectors are not hashable. Operations named
as verbs (``rotate``, ``normalize``, ``set`` and the in-place operators)
mutate and return ``self`` for chaining; their participle counterparts
(``rotated``, ``normalized``) work on a copy.
"""
from __future__ import annotations

import math
from numbers import Real
from typing import Iterator, NamedTuple, Optional, Union

import numpy as np

from .errors import GeometryError
from .logging_utils import get_logger
from .scalar import eq, fdiv, sign

_Scalar = Union[int, float]

logger = get_logger('plangeo.vec2')


class Projection(NamedTuple):
	"""Distance from a point to a line or segment, and the closest point on it."""
	distance: float
	point: 'Vec2'


class Vec2:
	__slots__ = ('x', 'y')
	# numpy binary operators defer to the Vec2 methods
	__array_ufunc__ = None

	def __init__(self, x: _Scalar = 0.0, y: _Scalar = 0.0) -> None:
		self.x = float(x)
		self.y = float(y)

	@classmethod
	def of(cls, p) -> 'Vec2':
		"""Coerce a Vec2, an (x, y) pair or a length-2 array into a new Vec2."""
		if isinstance(p, Vec2):
			return p.copy()
		try:
			x, y = p
		except (TypeError, ValueError) as e:
			raise GeometryError(f"expected a 2D point, got {p!r}") from e
		return cls(x, y)

	def copy(self) -> 'Vec2':
		return Vec2(self.x, self.y)

	def set(self, x: _Scalar, y: _Scalar) -> 'Vec2':
		self.x = float(x)
		self.y = float(y)
		return self

	def to_array(self) -> np.ndarray:
		return np.array([self.x, self.y], dtype=np.float64)

	# --- sequence protocol, so a Vec2 unpacks like (x, y) and feeds numpy ---

	def __len__(self) -> int:
		return 2

	def __getitem__(self, i: int) -> float:
		return (self.x, self.y)[i]

	def __iter__(self) -> Iterator[float]:
		yield self.x
		yield self.y

	def __repr__(self) -> str:
		return f"Vec2({self.x!r}, {self.y!r})"

	# --- comparisons ---

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Vec2):
			return NotImplemented
		return Vec2.equal(self, other)

	__hash__ = None  # type: ignore[assignment]

	def __lt__(self, other: 'Vec2') -> bool:
		# raw lexicographic order, only meant for sorting
		return self.x < other.x or (self.x == other.x and self.y < other.y)

	# --- arithmetic ---

	def __neg__(self) -> 'Vec2':
		return Vec2(-self.x, -self.y)

	def __add__(self, other: Union['Vec2', _Scalar]) -> 'Vec2':
		if isinstance(other, Vec2):
			return Vec2(self.x + other.x, self.y + other.y)
		if isinstance(other, Real):
			return Vec2(self.x + other, self.y + other)
		return NotImplemented

	def __sub__(self, other: Union['Vec2', _Scalar]) -> 'Vec2':
		if isinstance(other, Vec2):
			return Vec2(self.x - other.x, self.y - other.y)
		if isinstance(other, Real):
			return Vec2(self.x - other, self.y - other)
		return NotImplemented

	def __mul__(self, s: _Scalar) -> 'Vec2':
		if not isinstance(s, Real):
			return NotImplemented
		return Vec2(self.x * s, self.y * s)

	__rmul__ = __mul__

	def __truediv__(self, s: _Scalar) -> 'Vec2':
		if not isinstance(s, Real):
			return NotImplemented
		return Vec2(fdiv(self.x, s), fdiv(self.y, s))

	def __iadd__(self, other: Union['Vec2', _Scalar]) -> 'Vec2':
		if isinstance(other, Vec2):
			self.x += other.x
			self.y += other.y
		elif isinstance(other, Real):
			self.x += float(other)
			self.y += float(other)
		else:
			return NotImplemented
		return self

	def __isub__(self, other: Union['Vec2', _Scalar]) -> 'Vec2':
		if isinstance(other, Vec2):
			self.x -= other.x
			self.y -= other.y
		elif isinstance(other, Real):
			self.x -= float(other)
			self.y -= float(other)
		else:
			return NotImplemented
		return self

	def __imul__(self, s: _Scalar) -> 'Vec2':
		if not isinstance(s, Real):
			return NotImplemented
		self.x *= float(s)
		self.y *= float(s)
		return self

	def __itruediv__(self, s: _Scalar) -> 'Vec2':
		if not isinstance(s, Real):
			return NotImplemented
		self.x = fdiv(self.x, s)
		self.y = fdiv(self.y, s)
		return self

	# --- norms and transforms ---

	def squared_norm(self) -> float:
		return Vec2.dot(self, self)

	def norm(self) -> float:
		return math.sqrt(self.squared_norm())

	def normalize(self) -> 'Vec2':
		"""Scale to unit length in place; the exact zero vector is left as is."""
		n = self.norm()
		if n == 0:
			return self
		self *= 1.0 / n
		return self

	def normalized(self) -> 'Vec2':
		return self.copy().normalize()

	def ortho(self) -> 'Vec2':
		"""Rotate by -90 degrees: (y, -x)."""
		return Vec2(self.y, -self.x)

	def rotate(self, radians: float) -> 'Vec2':
		c = math.cos(radians)
		s = math.sin(radians)
		self.x, self.y = self.x * c - self.y * s, self.x * s + self.y * c
		return self

	def rotated(self, radians: float) -> 'Vec2':
		return self.copy().rotate(radians)

	def projected_into(self, v: 'Vec2') -> 'Vec2':
		"""Vector projection of self onto v (nan components when v is zero)."""
		return v * fdiv(Vec2.dot(self, v), v.squared_norm())

	# --- static predicates ---

	@staticmethod
	def equal(u: 'Vec2', v: 'Vec2') -> bool:
		return eq(u.x, v.x) and eq(u.y, v.y)

	@staticmethod
	def from_points(p1: 'Vec2', p2: 'Vec2') -> 'Vec2':
		return p2 - p1

	@staticmethod
	def dot(u: 'Vec2', v: 'Vec2') -> float:
		return u.x * v.x + u.y * v.y

	@staticmethod
	def cross(u: 'Vec2', v: 'Vec2') -> float:
		"""Signed area of the parallelogram spanned by u and v.

		> 0 when v turns counterclockwise from u, < 0 clockwise, 0 collinear.
		"""
		return u.x * v.y - u.y * v.x

	@staticmethod
	def signed_parallelogram_area(p1: 'Vec2', p2: 'Vec2', p3: 'Vec2') -> float:
		return Vec2.cross(Vec2.from_points(p1, p2), Vec2.from_points(p2, p3))

	@staticmethod
	def signed_triangle_area(p1: 'Vec2', p2: 'Vec2', p3: 'Vec2') -> float:
		return Vec2.signed_parallelogram_area(p1, p2, p3) / 2.0

	@staticmethod
	def triangle_area(p1: 'Vec2', p2: 'Vec2', p3: 'Vec2') -> float:
		return abs(Vec2.signed_triangle_area(p1, p2, p3))

	@staticmethod
	def ccw(p1: 'Vec2', p2: 'Vec2', p3: 'Vec2') -> int:
		"""Orientation of the turn p1 -> p2 -> p3.

		Returns 1 for counterclockwise, -1 for clockwise and 0 for collinear.
		All turn decisions in the package go through this function.
		"""
		return sign(Vec2.cross(Vec2.from_points(p1, p2), Vec2.from_points(p1, p3)))

	@staticmethod
	def are_collinear(p1: 'Vec2', p2: 'Vec2', p3: 'Vec2') -> bool:
		return Vec2.ccw(p1, p2, p3) == 0

	@staticmethod
	def dist(p1: 'Vec2', p2: 'Vec2') -> float:
		return (p2 - p1).norm()

	@staticmethod
	def squared_dist(p1: 'Vec2', p2: 'Vec2') -> float:
		return Vec2.from_points(p1, p2).squared_norm()

	@staticmethod
	def dist_line(p: 'Vec2', a: 'Vec2', b: 'Vec2') -> Projection:
		"""Distance from p to the infinite line through a and b, with the foot point.

		a == b is not guarded: the foot point comes back as nan.
		"""
		ap = Vec2.from_points(a, p)
		ab = Vec2.from_points(a, b)
		u = fdiv(Vec2.dot(ap, ab), ab.squared_norm())
		c = a + ab * u
		return Projection(Vec2.dist(p, c), c)

	@staticmethod
	def dist_segment(p: 'Vec2', a: 'Vec2', b: 'Vec2') -> Projection:
		"""Distance from p to the segment [a, b], with the closest point on it."""
		ap = Vec2.from_points(a, p)
		ab = Vec2.from_points(a, b)
		u = fdiv(Vec2.dot(ap, ab), ab.squared_norm())
		if u < 0.0:
			return Projection(Vec2.dist(a, p), a.copy())
		if u > 1.0:
			return Projection(Vec2.dist(b, p), b.copy())
		c = a + ab * u
		return Projection(Vec2.dist(p, c), c)

	@staticmethod
	def angle_normalized(u: 'Vec2', v: 'Vec2') -> float:
		"""Angle between two unit vectors, in [0, pi]."""
		# rounding can push the dot product of unit vectors just past +-1
		return math.acos(float(np.clip(Vec2.dot(u, v), -1.0, 1.0)))

	@staticmethod
	def angle(u: 'Vec2', v: 'Vec2', w: Optional['Vec2'] = None) -> float:
		"""Angle between vectors u and v, or with three points the angle at v
		between the rays v->u and v->w.
		"""
		if w is not None:
			return Vec2.angle(u - v, w - v)
		return Vec2.angle_normalized(u.normalized(), v.normalized())

	@staticmethod
	def inside_circle(p: 'Vec2', c: 'Vec2', r: float) -> int:
		"""-1 inside, 0 on the boundary, 1 outside the circle (c, r)."""
		return sign(Vec2.from_points(c, p).squared_norm() - r * r)

	@staticmethod
	def circle_center(p1: 'Vec2', p2: 'Vec2', r: float) -> Optional['Vec2']:
		"""Center of a circle of radius r through p1 and p2, or None if r is too small.

		Of the two possible centers this returns the one to the left of
		p1 -> p2; swap the points to get the other.
		"""
		d2 = Vec2.squared_dist(p1, p2)
		det = fdiv(r * r, d2) - 0.25
		if sign(det) <= 0:
			logger.debug("circle_center: radius %g too small for chord length %g", r, math.sqrt(d2))
			return None
		h = math.sqrt(det)
		return Vec2((p1.x + p2.x) * 0.5 + (p1.y - p2.y) * h,
			(p1.y + p2.y) * 0.5 + (p2.x - p1.x) * h)


__all__ = ['Vec2', 'Projection']
