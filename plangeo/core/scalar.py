"""Epsilon-aware scalar predicates.

Every float comparison in plangeo routes through these helpers. The
tolerance is the context-active one (see :mod:`plangeo.core.config`)
unless an explicit ``eps`` is passed.
"""
from __future__ import annotations

from typing import Optional

import numpy as np

from .config import current_tolerance


def _eps(eps: Optional[float]) -> float:
	return current_tolerance().eps if eps is None else eps


def is_zero(x: float, eps: Optional[float] = None) -> bool:
	return abs(x) < _eps(eps)


def eq(x: float, y: float, eps: Optional[float] = None) -> bool:
	return is_zero(x - y, eps)


def compare(x: float, y: float, eps: Optional[float] = None) -> int:
	"""Three-way comparison: -1 if x < y, 0 if x == y within eps, +1 if x > y."""
	if abs(x - y) < _eps(eps):
		return 0
	return -1 if x < y else 1


def sign(x: float, eps: Optional[float] = None) -> int:
	"""-1, 0 or +1 depending on the sign of x (0 within eps)."""
	return compare(x, 0.0, eps)


def fdiv(num: float, den: float) -> float:
	"""IEEE float division: a zero denominator yields +-inf or nan instead of raising."""
	with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
		return float(np.float64(num) / np.float64(den))


__all__ = ['is_zero', 'eq', 'compare', 'sign', 'fdiv']
