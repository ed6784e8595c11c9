"""Tolerance configuration for plangeo predicates.

The default tolerance is fixed at import time from
:mod:`plangeo.core.constants`. Callers needing a different precision or
scale override it per context with :func:`tolerance` (or the lower level
:func:`set_tolerance` / :func:`reset_tolerance` pair). The active value is
held in a ``contextvars.ContextVar`` so threads and async tasks can run with
different tolerances without interfering with each other.
"""
from __future__ import annotations

import contextvars
import math
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator, Optional, Union

from .constants import EPS, INF
from .errors import GeometryError


@dataclass(frozen=True)
class ToleranceConfig:
    """Numerical tolerances shared by all predicates.

    Attributes
    ----------
    eps : float
        Absolute tolerance below which two floats are considered equal.
    inf : float
        Sentinel meaning "unbounded"; exported for callers only.
    """
    eps: float = EPS
    inf: float = INF

    def __post_init__(self) -> None:
        if not (math.isfinite(self.eps) and self.eps > 0.0):
            raise GeometryError(f"eps must be finite and positive, got {self.eps!r}")
        if math.isnan(self.inf) or self.inf <= self.eps:
            raise GeometryError(f"inf must exceed eps, got inf={self.inf!r} eps={self.eps!r}")


_DEFAULT = ToleranceConfig()
_TOL: contextvars.ContextVar[ToleranceConfig] = contextvars.ContextVar('plangeo_tolerance', default=_DEFAULT)


def current_tolerance() -> ToleranceConfig:
    return _TOL.get()


def set_tolerance(value: Union[ToleranceConfig, float]) -> contextvars.Token:
    """Make ``value`` the active tolerance in the current context.

    A bare float is taken as a new ``eps``. Returns the token to pass to
    :func:`reset_tolerance`.
    """
    if not isinstance(value, ToleranceConfig):
        value = replace(_TOL.get(), eps=float(value))
    return _TOL.set(value)


def reset_tolerance(token: contextvars.Token) -> None:
    _TOL.reset(token)


@contextmanager
def tolerance(eps: Optional[float] = None, inf: Optional[float] = None) -> Iterator[ToleranceConfig]:
    """Temporarily override the active tolerance.

    Example
    -------
        with tolerance(eps=1e-6):
            Vec2.ccw(a, b, c)
    """
    cfg = _TOL.get()
    if eps is not None:
        cfg = replace(cfg, eps=float(eps))
    if inf is not None:
        cfg = replace(cfg, inf=float(inf))
    token = _TOL.set(cfg)
    try:
        yield cfg
    finally:
        _TOL.reset(token)


__all__ = [
    'ToleranceConfig', 'current_tolerance', 'set_tolerance', 'reset_tolerance', 'tolerance',
]
