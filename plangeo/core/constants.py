"""Central numerical tolerances and sentinels.

Every epsilon comparison in the package starts from the defaults defined
here, so they can be tuned consistently and referenced without scattering
literals. Per-context overrides live in :mod:`plangeo.core.config`.
"""
from __future__ import annotations

import math

EPS: float = 1e-9      # default absolute tolerance for all float comparisons
INF: float = 1e100     # "unbounded" sentinel for callers; unused internally
PI: float = math.pi

__all__ = ['EPS', 'INF', 'PI']
