"""Boundary simplification.

Two stages, both driven by one distance tolerance t (compared as t squared):

1. Radial pre-filter: drop vertices closer than t to the previously kept one.
2. Douglas-Peucker split on the filtered vertices, treated as an open chain
   from the first to the last vertex (the closing edge is not considered).

The split stage uses an explicit stack of index ranges, so its depth does not
grow with the number of near-collinear vertices.
"""

import logging
from collections.abc import Sequence

from polycore.domain import Point, Polygon
from polycore.exceptions import InvalidParameterError

logger = logging.getLogger(__name__)


def _distance_sq(a: Point, b: Point) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def segment_distance_sq(point: Point, seg_start: Point, seg_end: Point) -> float:
    """Squared distance from a point to a segment.

    The projection onto the segment's line is clamped to the endpoints.
    """
    dir_x = seg_end.x - seg_start.x
    dir_y = seg_end.y - seg_start.y
    w_x = point.x - seg_start.x
    w_y = point.y - seg_start.y

    dot = w_x * dir_x + w_y * dir_y
    if dot <= 0:
        return _distance_sq(point, seg_start)

    length_sq = dir_x * dir_x + dir_y * dir_y
    if length_sq <= dot:
        return _distance_sq(point, seg_end)

    t = dot / length_sq
    foot = Point(seg_start.x + t * dir_x, seg_start.y + t * dir_y)
    return _distance_sq(point, foot)


def radial_filter(points: Sequence[Point], tolerance: float) -> list[Point]:
    """Drop vertices that are closer than tolerance to the last kept vertex.

    The first vertex is always kept, and so is the last: if the filter
    dropped it, it is appended back.

    Args:
        points: Vertex sequence
        tolerance: Minimum distance between consecutive kept vertices

    Returns:
        Filtered vertex list
    """
    if not points:
        return []

    tol_sq = tolerance * tolerance
    kept = [points[0]]
    last_kept = 0
    for i in range(1, len(points)):
        if _distance_sq(points[i], points[last_kept]) < tol_sq:
            continue
        kept.append(points[i])
        last_kept = i

    if last_kept < len(points) - 1:
        kept.append(points[-1])

    return kept


def douglas_peucker(points: Sequence[Point], tolerance: float) -> list[Point]:
    """Douglas-Peucker reduction of an open chain.

    For every range [start, end] the interior vertex farthest from the chord
    is found (first one wins ties); if its distance exceeds tolerance it is
    kept and both halves are processed. Endpoints are always kept.

    Args:
        points: Open vertex chain
        tolerance: Maximum allowed deviation from the simplified chain

    Returns:
        Retained vertices in original order
    """
    n = len(points)
    if n <= 2:
        return list(points)

    tol_sq = tolerance * tolerance
    keep = [False] * n
    keep[0] = keep[n - 1] = True

    stack = [(0, n - 1)]
    while stack:
        start, end = stack.pop()
        if end <= start + 1:
            continue

        max_index = start
        max_dist_sq = 0.0
        for i in range(start + 1, end):
            dist_sq = segment_distance_sq(points[i], points[start], points[end])
            if dist_sq > max_dist_sq:
                max_index = i
                max_dist_sq = dist_sq

        if max_dist_sq > tol_sq:
            keep[max_index] = True
            stack.append((max_index, end))
            stack.append((start, max_index))

    return [p for p, k in zip(points, keep, strict=True) if k]


def simplify_points(points: Sequence[Point], tolerance: float) -> list[Point]:
    """Run the radial pre-filter followed by Douglas-Peucker.

    Raises:
        InvalidParameterError: If tolerance is negative
    """
    if tolerance < 0:
        raise InvalidParameterError("tolerance", tolerance, "must be non-negative")
    return douglas_peucker(radial_filter(points, tolerance), tolerance)


def simplify(polygon: Polygon, tolerance: float) -> Polygon:
    """Simplify a polygon in place.

    Args:
        polygon: Polygon to simplify; its vertices are replaced
        tolerance: Distance tolerance

    Returns:
        The same polygon instance, for chaining

    Raises:
        InvalidParameterError: If tolerance is negative
    """
    before = len(polygon)
    polygon.points = simplify_points(polygon.points, tolerance)
    logger.debug(
        "Simplified polygon: tolerance=%g vertices=%d->%d", tolerance, before, len(polygon)
    )
    return polygon
