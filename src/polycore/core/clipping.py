"""Polygon clipping against a convex operand.

This module implements:
- clip_points: Sutherland-Hodgman clipping of a vertex list
- intersect: Intersection of a polygon with a convex clipping polygon
- union: Union of a polygon with a convex polygon

The clipping polygon must be convex. This is a caller contract and is not
checked; a concave clipper gives a meaningless (but well-formed) result.
Inputs are never modified; results are new Polygon instances.
"""

import logging
from collections.abc import Sequence

from polycore.core.geometry import cross, point_in_polygon
from polycore.domain import Point, Polygon

logger = logging.getLogger(__name__)


def _winding_sign(points: Sequence[Point]) -> float:
    """+1.0 for counter-clockwise vertex order, -1.0 for clockwise."""
    n = len(points)
    total = 0.0
    for i in range(n):
        p = points[i]
        q = points[(i + 1) % n]
        total += p.x * q.y - p.y * q.x
    return 1.0 if total >= 0 else -1.0


def _line_intersection(a1: Point, a2: Point, b1: Point, b2: Point) -> Point | None:
    """Intersection of the infinite lines a1-a2 and b1-b2 (None if parallel)."""
    da_x, da_y = a1.x - a2.x, a1.y - a2.y
    db_x, db_y = b1.x - b2.x, b1.y - b2.y
    denom = da_x * db_y - da_y * db_x
    if denom == 0:
        return None
    s = a1.x * a2.y - a1.y * a2.x
    t = b1.x * b2.y - b1.y * b2.x
    return Point((s * db_x - t * da_x) / denom, (s * db_y - t * da_y) / denom)


def clip_points(subject: Sequence[Point], clipper: Sequence[Point]) -> list[Point]:
    """Clip a vertex list against a convex clipping polygon (Sutherland-Hodgman).

    Each clipper edge, closing edge included, defines a half-plane. The
    current vertex list is filtered against each half-plane in turn, and an
    edge intersection is emitted wherever consecutive vertices switch sides.
    Vertices exactly on a clip line count as outside.

    Args:
        subject: Vertices of the polygon being clipped
        clipper: Vertices of the convex clipping polygon (either winding)

    Returns:
        Vertices of the clipped polygon (empty if there is no overlap)
    """
    if not subject or len(clipper) < 3:
        return []

    orientation = _winding_sign(clipper)
    output = list(subject)
    edge_start = clipper[-1]

    for edge_end in clipper:
        if not output:
            break

        def inside(p: Point, a: Point = edge_start, b: Point = edge_end) -> bool:
            return orientation * cross(a, b, p) > 0

        current = output
        output = []
        prev = current[-1]
        for point in current:
            if inside(point):
                if not inside(prev):
                    hit = _line_intersection(edge_start, edge_end, prev, point)
                    if hit is not None:
                        output.append(hit)
                output.append(point)
            elif inside(prev):
                hit = _line_intersection(edge_start, edge_end, prev, point)
                if hit is not None:
                    output.append(hit)
            prev = point

        edge_start = edge_end

    return output


def intersect(subject: Polygon, clipper: Polygon) -> Polygon:
    """Intersection of a polygon with a convex clipping polygon.

    Args:
        subject: Polygon to clip (may be concave)
        clipper: Convex clipping polygon

    Returns:
        New polygon holding the intersection, empty if they do not overlap.
        It inherits the subject's accuracy.
    """
    clipped = clip_points(subject.points, clipper.points)
    logger.debug(
        "Intersect: subject=%d clipper=%d result=%d",
        len(subject),
        len(clipper),
        len(clipped),
    )
    return Polygon(points=clipped, accuracy=subject.accuracy)


def union(subject: Polygon, clipper: Polygon) -> Polygon:
    """Union of a polygon with a convex polygon.

    Vertices of each polygon lying inside the other are discarded, the
    intersection of the two remainders is added, and the combined vertex set
    is sorted clockwise about its mean. The result is only reliable when the
    remainders and the intersection boundary form a simple polygon, which
    holds for a convex clipper and mildly concave subjects.

    Args:
        subject: First polygon
        clipper: Convex second polygon

    Returns:
        New polygon holding the union, clockwise
    """
    trimmed_subject = Polygon(
        points=[p for p in subject.points if not point_in_polygon(p, clipper.points)],
        accuracy=subject.accuracy,
    )
    trimmed_clipper = Polygon(
        points=[p for p in clipper.points if not point_in_polygon(p, subject.points)],
        accuracy=clipper.accuracy,
    )

    overlap = intersect(trimmed_subject, trimmed_clipper)

    combined = Polygon(
        points=overlap.points + trimmed_subject.points + trimmed_clipper.points,
        accuracy=subject.accuracy,
    )
    combined.sort_clockwise()

    logger.debug(
        "Union: subject=%d clipper=%d kept=%d+%d overlap=%d",
        len(subject),
        len(clipper),
        len(trimmed_subject),
        len(trimmed_clipper),
        len(overlap),
    )
    return combined
