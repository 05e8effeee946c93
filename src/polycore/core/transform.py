"""Rigid transforms and vertex slicing.

Every function rewrites the polygon it is given and returns it, so calls
chain the same way as ``simplify``. Angles are taken in degrees and
converted to radians before any trigonometry.
"""

import logging
import math

from polycore.core.geometry import approx_equal
from polycore.domain import Point, Polygon
from polycore.exceptions import InvalidParameterError

logger = logging.getLogger(__name__)


def _check_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidParameterError(name, value, "must be a finite number")


def _snap(value: float, accuracy: float) -> float:
    """Round sine/cosine values within accuracy of 0 or +-1 to the exact value."""
    for exact in (0.0, 1.0, -1.0):
        if approx_equal(value, exact, accuracy):
            return exact
    return value


def rotate(polygon: Polygon, x: float, y: float, degrees: float) -> Polygon:
    """Rotate a polygon counter-clockwise about (x, y).

    Quarter turns are exact: sine and cosine values within the polygon's
    accuracy of 0 or +-1 are snapped before use.

    Args:
        polygon: Polygon to rotate; its vertices are replaced
        x: Rotation origin X
        y: Rotation origin Y
        degrees: Rotation angle, positive counter-clockwise

    Returns:
        The same polygon instance, for chaining

    Raises:
        InvalidParameterError: If any argument is not finite
    """
    _check_finite(x=x, y=y, degrees=degrees)
    angle = math.radians(degrees)
    cos = _snap(math.cos(angle), polygon.accuracy)
    sin = _snap(math.sin(angle), polygon.accuracy)
    polygon.points = [
        Point(
            x + (p.x - x) * cos - (p.y - y) * sin,
            y + (p.x - x) * sin + (p.y - y) * cos,
        )
        for p in polygon.points
    ]
    logger.debug("Rotated polygon: origin=(%g, %g) degrees=%g", x, y, degrees)
    return polygon


def move_by(polygon: Polygon, dx: float, dy: float) -> Polygon:
    """Translate a polygon by (dx, dy).

    Raises:
        InvalidParameterError: If an offset is not finite
    """
    _check_finite(dx=dx, dy=dy)
    polygon.points = [Point(p.x + dx, p.y + dy) for p in polygon.points]
    return polygon


def move_along(polygon: Polygon, bearing: float, distance: float) -> Polygon:
    """Translate a polygon a distance along a compass bearing.

    A bearing of 0 points along +Y and 90 along +X.

    Args:
        polygon: Polygon to move
        bearing: Direction in degrees, clockwise from the Y axis
        distance: Distance to travel (negative moves backwards)

    Returns:
        The same polygon instance, for chaining

    Raises:
        InvalidParameterError: If an argument is not finite
    """
    _check_finite(bearing=bearing, distance=distance)
    angle = math.radians(bearing)
    dx = distance * _snap(math.sin(angle), polygon.accuracy)
    dy = distance * _snap(math.cos(angle), polygon.accuracy)
    return move_by(polygon, dx, dy)


def slice_box(
    polygon: Polygon, x_min: float, y_min: float, x_max: float, y_max: float
) -> Polygon:
    """Remove every vertex inside an axis-aligned box (edges included).

    The corners may be given in any order.

    Raises:
        InvalidParameterError: If a box coordinate is not finite
    """
    _check_finite(x_min=x_min, y_min=y_min, x_max=x_max, y_max=y_max)
    left, right = min(x_min, x_max), max(x_min, x_max)
    bottom, top = min(y_min, y_max), max(y_min, y_max)
    before = len(polygon)
    polygon.points = [
        p for p in polygon.points if not (left <= p.x <= right and bottom <= p.y <= top)
    ]
    logger.debug("Sliced box: vertices=%d->%d", before, len(polygon))
    return polygon


def slice_circle(polygon: Polygon, x: float, y: float, radius: float) -> Polygon:
    """Remove every vertex inside a circle (boundary included).

    Raises:
        InvalidParameterError: If an argument is not finite or radius is negative
    """
    _check_finite(x=x, y=y, radius=radius)
    if radius < 0:
        raise InvalidParameterError("radius", radius, "must be non-negative")
    radius_sq = radius * radius
    before = len(polygon)
    polygon.points = [
        p for p in polygon.points if (p.x - x) ** 2 + (p.y - y) ** 2 > radius_sq
    ]
    logger.debug("Sliced circle: vertices=%d->%d", before, len(polygon))
    return polygon
