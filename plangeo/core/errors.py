"""Exception type for malformed library input."""
from __future__ import annotations


class GeometryError(ValueError):
    """Raised for malformed input to the API (bad tolerance, bad point data).

    Geometric degeneracies (parallel lines, missing intersections) are never
    reported with this; they come back as ``None`` or intersection counts.
    """


__all__ = ['GeometryError']
