"""Polycore - geometry core for closed 2D polygons.

Polycore provides the algorithmic pieces of a 2D polygon library: convex
clipping (intersection and union), convex hull extraction, boundary
simplification, mass-property integrals (area, centroid, perimeter and
moments of inertia) and least-squares circle/ellipse fitting.

Example:
    >>> from polycore import Polygon
    >>> square = Polygon.from_points([(0, 0), (10, 0), (10, 10), (0, 10)])
    >>> square.data().area
    100.0
"""

from polycore.domain import (
    CircleFit,
    EllipseFit,
    FitKind,
    MomentResult,
    Point,
    Polygon,
)

__version__ = "0.1.0"

__all__ = [
    "CircleFit",
    "EllipseFit",
    "FitKind",
    "MomentResult",
    "Point",
    "Polygon",
    "__version__",
]
