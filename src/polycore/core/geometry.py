"""Geometric primitives for polygon operations.

This module provides the predicates and small constructions used by the
clipping engine, the hull and the polygon query methods:
- Tolerance-based equality and overflow-safe Euclidean norm
- Orientation (2D cross product)
- Point-in-polygon testing (ray casting algorithm)
- Point-on-segment and point-on-boundary testing
- Line segment intersection

All functions are pure and stateless.
"""

import math
from collections.abc import Sequence

from polycore.domain import Point
from polycore.exceptions import InvalidPolygonError


def approx_equal(a: float, b: float, eps: float) -> bool:
    """Check whether two numbers are equal within a tolerance.

    Args:
        a: First value
        b: Second value
        eps: Tolerance (strict)

    Returns:
        True if ``|a - b| < eps``
    """
    return abs(a - b) < eps


def safe_norm2(a: float, b: float) -> float:
    """Euclidean norm of (a, b) without intermediate overflow.

    The larger magnitude is factored out before squaring the ratio, so
    coordinates near the float limit do not overflow.

    Examples:
        >>> safe_norm2(3.0, 4.0)
        5.0
        >>> safe_norm2(1e200, 1e200) > 1e200
        True
    """
    if a == 0 and b == 0:
        return 0.0
    abs_a, abs_b = abs(a), abs(b)
    if abs_a >= abs_b:
        return abs_a * math.sqrt(1.0 + (abs_b / abs_a) ** 2)
    return abs_b * math.sqrt(1.0 + (abs_a / abs_b) ** 2)


def cross(origin: Point, a: Point, b: Point) -> float:
    """Z component of (a - origin) x (b - origin).

    Positive when b lies to the left of the directed line origin -> a,
    negative when it lies to the right, zero when the three are collinear.
    """
    return (a.x - origin.x) * (b.y - origin.y) - (a.y - origin.y) * (b.x - origin.x)


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts crossings
    with polygon edges (closing edge included). Odd count = inside. Points
    exactly on the boundary may be classified either way; use
    point_on_polygon for boundary tests.

    Args:
        point: The point to test
        polygon: Vertices forming the polygon boundary

    Returns:
        True if point is inside polygon, False otherwise

    Examples:
        >>> square = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]
        >>> point_in_polygon(Point(1.0, 1.0), square)
        True
        >>> point_in_polygon(Point(3.0, 3.0), square)
        False
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def point_on_segment(
    point: Point,
    seg_start: Point,
    seg_end: Point,
    eps: float | None = None,
    accuracy: float = 1e-10,
) -> bool:
    """Check if a point lies on a line segment.

    The point must be collinear with the segment and inside the segment's
    bounding interval on both axes. With ``eps=None`` collinearity is exact;
    otherwise the cross term must be smaller than ``eps``.

    Args:
        point: The point to test
        seg_start: First endpoint of the segment
        seg_end: Second endpoint of the segment
        eps: Collinearity tolerance, None for the exact test
        accuracy: Tolerance used to widen the bounding interval

    Returns:
        True if the point is on the segment
    """
    cross_term = cross(seg_start, seg_end, point)
    if eps is None:
        collinear = cross_term == 0
    else:
        collinear = abs(cross_term) < eps
    if not collinear:
        return False

    tol = accuracy if eps is None else max(eps, accuracy)
    return (
        min(seg_start.x, seg_end.x) - tol <= point.x <= max(seg_start.x, seg_end.x) + tol
        and min(seg_start.y, seg_end.y) - tol <= point.y <= max(seg_start.y, seg_end.y) + tol
    )


def point_on_polygon(point: Point, polygon: Sequence[Point], eps: float) -> bool:
    """Check if a point lies on any polygon edge, closing edge included.

    Args:
        point: The point to test
        polygon: Vertices forming the polygon boundary
        eps: Tolerance for collinearity and interval tests

    Returns:
        True if the point is on the boundary
    """
    n = len(polygon)
    if n == 0:
        return False
    if n == 1:
        return approx_equal(point.x, polygon[0].x, eps) and approx_equal(point.y, polygon[0].y, eps)

    return any(
        point_on_segment(point, polygon[i], polygon[(i + 1) % n], eps=eps, accuracy=eps)
        for i in range(n)
    )


def segment_intersection(p1: Point, p2: Point, p3: Point, p4: Point) -> Point | None:
    """Find intersection point of segments p1-p2 and p3-p4.

    Solves both parametric line equations through the 2x2 determinant.
    Parallel or collinear segments (zero determinant) report no intersection.

    Args:
        p1: First endpoint of segment 1
        p2: Second endpoint of segment 1
        p3: First endpoint of segment 2
        p4: Second endpoint of segment 2

    Returns:
        Point at intersection if segments intersect, None otherwise

    Examples:
        >>> segment_intersection(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
        Point(x=1.0, y=1.0)
    """
    d1x, d1y = p2.x - p1.x, p2.y - p1.y
    d2x, d2y = p4.x - p3.x, p4.y - p3.y

    denom = d1x * d2y - d1y * d2x
    if denom == 0:
        return None

    ox, oy = p3.x - p1.x, p3.y - p1.y
    t = (ox * d2y - oy * d2x) / denom
    s = (ox * d1y - oy * d1x) / denom

    if 0 <= t <= 1 and 0 <= s <= 1:
        return Point(p1.x + t * d1x, p1.y + t * d1y)

    return None


def line_polygon_intersections(
    seg_start: Point, seg_end: Point, polygon: Sequence[Point]
) -> list[Point]:
    """Find every intersection of a segment with the polygon edges.

    Args:
        seg_start: First endpoint of the segment
        seg_end: Second endpoint of the segment
        polygon: Vertices forming the polygon boundary

    Returns:
        Intersection points in edge order (empty if none)
    """
    n = len(polygon)
    if n < 2:
        return []

    hits: list[Point] = []
    for i in range(n):
        hit = segment_intersection(seg_start, seg_end, polygon[i], polygon[(i + 1) % n])
        if hit is not None:
            hits.append(hit)
    return hits


def closest_vertex(point: Point, polygon: Sequence[Point]) -> int:
    """Index of the polygon vertex nearest to a point.

    Raises:
        InvalidPolygonError: If the polygon has no vertices
    """
    if not polygon:
        raise InvalidPolygonError("Cannot find the closest vertex of an empty polygon")

    best_index = 0
    best_distance = safe_norm2(polygon[0].x - point.x, polygon[0].y - point.y)
    for i in range(1, len(polygon)):
        distance = safe_norm2(polygon[i].x - point.x, polygon[i].y - point.y)
        if distance < best_distance:
            best_index = i
            best_distance = distance
    return best_index
