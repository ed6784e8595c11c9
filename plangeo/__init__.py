"""Public package API for plangeo, planar geometry primitives.

This facade provides a flat import surface on top of the internal
implementation package ``plangeo.core``.

Example
-------
    from plangeo import Vec2, Line, convex_hull, tolerance

    hull = convex_hull([Vec2(0, 0), Vec2(2, 0), Vec2(1, 1), Vec2(2, 2), Vec2(0, 2)])
    with tolerance(eps=1e-6):
        Vec2.ccw(hull[0], hull[1], hull[2])

All comparisons use the active tolerance (``plangeo.constants.EPS`` unless
overridden with :func:`tolerance` / :func:`set_tolerance`). Geometric
degeneracies come back as return values (``None``, intersection counts),
never as exceptions.
"""
from importlib import import_module as _imp
from importlib.metadata import PackageNotFoundError as _PackageNotFoundError
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version
    __version__ = _pkg_version("plangeo")  # populated when installed
except _PackageNotFoundError:  # pragma: no cover - running from a source tree
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

_const = _imp('plangeo.core.constants')
_config = _imp('plangeo.core.config')
_errors = _imp('plangeo.core.errors')
_log = _imp('plangeo.core.logging_utils')
_scalar = _imp('plangeo.core.scalar')
_vec2 = _imp('plangeo.core.vec2')
_line = _imp('plangeo.core.line')
_circles = _imp('plangeo.core.circles')
_polygon = _imp('plangeo.core.polygon')

# Tolerances and configuration
EPS = _const.EPS
INF = _const.INF
PI = _const.PI
ToleranceConfig = _config.ToleranceConfig
current_tolerance = _config.current_tolerance
set_tolerance = _config.set_tolerance
reset_tolerance = _config.reset_tolerance
tolerance = _config.tolerance
GeometryError = _errors.GeometryError
get_logger = _log.get_logger
configure_logging = _log.configure_logging

# Scalar predicates
is_zero = _scalar.is_zero
eq = _scalar.eq
compare = _scalar.compare
sign = _scalar.sign

# Value types
Vec2 = _vec2.Vec2
Projection = _vec2.Projection
Line = _line.Line
CircleIntersection = _line.CircleIntersection

# Algorithms
two_circle_intersect = _circles.two_circle_intersect
simple_poly_area = _polygon.simple_poly_area
point_in_simple_poly = _polygon.point_in_simple_poly
convex_hull = _polygon.convex_hull
as_points = _polygon.as_points
points_to_array = _polygon.points_to_array
ccw_vectorized = _polygon.ccw_vectorized
poly_signed_area = _polygon.poly_signed_area
poly_orientation = _polygon.poly_orientation
points_in_simple_poly = _polygon.points_in_simple_poly

# Namespace submodules for exploratory users
constants = _const
config = _config
scalar = _scalar
polygon = _polygon

__all__ = [
    '__version__',
    # tolerances / config
    'EPS', 'INF', 'PI', 'ToleranceConfig', 'current_tolerance', 'set_tolerance',
    'reset_tolerance', 'tolerance', 'GeometryError', 'get_logger', 'configure_logging',
    # scalar predicates
    'is_zero', 'eq', 'compare', 'sign',
    # value types
    'Vec2', 'Projection', 'Line', 'CircleIntersection',
    # algorithms
    'two_circle_intersect', 'simple_poly_area', 'point_in_simple_poly', 'convex_hull',
    'as_points', 'points_to_array', 'ccw_vectorized', 'poly_signed_area', 'poly_orientation',
    'points_in_simple_poly',
    # submodules
    'constants', 'config', 'scalar', 'polygon',
]
