"""Convex hull extraction by gift wrapping (Jarvis march).

Starting from the left-most (then lowest) vertex, the walk repeatedly picks
the vertex that leaves every other vertex on its left, until it returns to
the start. The hull is produced counter-clockwise in O(n * h) for h hull
vertices.
"""

import logging

from polycore.core.geometry import approx_equal, cross, safe_norm2
from polycore.domain import Point, Polygon

logger = logging.getLogger(__name__)


def _same_point(a: Point, b: Point, accuracy: float) -> bool:
    return approx_equal(a.x, b.x, accuracy) and approx_equal(a.y, b.y, accuracy)


def _left_bottom_index(points: list[Point], accuracy: float) -> int:
    """Index of the left-most vertex, lowest among ties within accuracy."""
    index = 0
    for i in range(1, len(points)):
        p, best = points[i], points[index]
        if p.x < best.x - accuracy or (approx_equal(p.x, best.x, accuracy) and p.y < best.y):
            index = i
    return index


def convex_hull_points(polygon: Polygon) -> list[Point]:
    """Compute the convex hull of the polygon's vertices.

    Collinear hull candidates resolve to the farthest one, so vertices lying
    in the middle of a hull edge are not reported. Duplicate vertices are
    reported once.

    Args:
        polygon: Polygon whose vertex set is wrapped

    Returns:
        Hull vertices in counter-clockwise traversal order. A single point for
        one distinct vertex, two points for two, empty for an empty polygon.
    """
    points = polygon.points
    n = len(points)
    if n == 0:
        return []

    accuracy = polygon.accuracy
    start_index = _left_bottom_index(points, accuracy)
    start = points[start_index]

    hull: list[Point] = []
    current = start
    # Each step adds a distinct hull vertex, so n steps always suffice
    for _ in range(n):
        hull.append(current)

        candidate: Point | None = None
        for point in points:
            if _same_point(point, current, accuracy):
                continue
            if candidate is None:
                candidate = point
                continue
            turn = cross(current, candidate, point)
            candidate_dist = safe_norm2(candidate.x - current.x, candidate.y - current.y)
            point_dist = safe_norm2(point.x - current.x, point.y - current.y)
            # Cross product scales with both edge lengths; compare the sine instead
            threshold = accuracy * candidate_dist * point_dist
            if turn < -threshold:
                # point lies clockwise of current -> candidate
                candidate = point
            elif abs(turn) <= threshold and point_dist > candidate_dist:
                candidate = point

        if candidate is None or _same_point(candidate, start, accuracy):
            break
        current = candidate

    logger.debug("Convex hull: vertices=%d hull=%d", n, len(hull))
    return hull


def convex_hull(polygon: Polygon) -> tuple[list[float], list[float]]:
    """Compute the convex hull as separate coordinate arrays.

    Args:
        polygon: Polygon whose vertex set is wrapped

    Returns:
        Tuple (xs, ys) of hull vertices, counter-clockwise
    """
    hull = convex_hull_points(polygon)
    return [p.x for p in hull], [p.y for p in hull]
