"""Polygon mass properties via Green's theorem.

Computes area, centroid, perimeter and second moments of area of a closed
polygon from closed-form sums over its vertices and edge differences.

Vertices are first translated by their arithmetic mean so that the cubic and
quartic sums stay well conditioned for polygons far from the origin. Results
are moved back to global coordinates with the parallel axis theorem.

Sign convention: clockwise vertex order gives a positive raw area. Raw
integrals of counter-clockwise polygons are negated before use, so the
reported area is never negative.
"""

import logging

from polycore.core.geometry import safe_norm2
from polycore.domain import MomentResult, Polygon

logger = logging.getLogger(__name__)


def _forward_diff(values: list[float]) -> list[float]:
    """Cyclic forward difference: out[i] = values[i + 1] - values[i]."""
    n = len(values)
    return [values[(i + 1) % n] - values[i] for i in range(n)]


def polygon_moments(polygon: Polygon) -> MomentResult:
    """Compute the mass properties of a polygon.

    Args:
        polygon: Closed polygon (any winding)

    Returns:
        MomentResult with global moments about the origin and centroidal
        moments about axes through the centroid. Degenerate polygons (fewer
        than 3 vertices or zero area) report zero area and inertia, the
        vertex mean as centroid and their true perimeter.
    """
    n = len(polygon)
    if n == 0:
        return MomentResult(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    mean_x = sum(polygon.xs) / n
    mean_y = sum(polygon.ys) / n
    x = [v - mean_x for v in polygon.xs]
    y = [v - mean_y for v in polygon.ys]
    dx = _forward_diff(x)
    dy = _forward_diff(y)

    perimeter = sum(safe_norm2(a, b) for a, b in zip(dx, dy, strict=True))

    area = sum(y[i] * dx[i] - x[i] * dy[i] for i in range(n)) / 2.0

    # Area is in squared length units, so the threshold scales with perimeter^2
    if n < 3 or abs(area) <= polygon.accuracy * perimeter * perimeter:
        logger.debug("Degenerate polygon: vertices=%d area=%.3e", n, area)
        return MomentResult(
            area=0.0,
            centroid_x=mean_x,
            centroid_y=mean_y,
            perimeter=perimeter,
            ixx=0.0,
            iyy=0.0,
            ixy=0.0,
            iuu=0.0,
            ivv=0.0,
            iuv=0.0,
        )

    first_x = 0.0
    first_y = 0.0
    ixx = 0.0
    iyy = 0.0
    ixy = 0.0
    for i in range(n):
        xi, yi, dxi, dyi = x[i], y[i], dx[i], dy[i]
        first_x += 6 * xi * yi * dxi - 3 * xi * xi * dyi + 3 * yi * dxi * dxi + dxi * dxi * dyi
        first_y += (
            3 * yi * yi * dxi - 6 * xi * yi * dyi - 3 * xi * dyi * dyi - dxi * dyi * dyi
        )
        ixx += (
            2 * yi**3 * dxi
            - 6 * xi * yi * yi * dyi
            - 6 * xi * yi * dyi * dyi
            - 2 * xi * dyi**3
            - 2 * yi * dxi * dyi * dyi
            - dxi * dyi**3
        )
        iyy += (
            6 * xi * xi * yi * dxi
            - 2 * xi**3 * dyi
            + 6 * xi * yi * dxi * dxi
            + 2 * yi * dxi**3
            + 2 * xi * dxi * dxi * dyi
            + dxi**3 * dyi
        )
        ixy += (
            6 * xi * yi * yi * dxi
            - 6 * xi * xi * yi * dyi
            + 3 * yi * yi * dxi * dxi
            - 3 * xi * xi * dyi * dyi
            + 2 * yi * dxi * dxi * dyi
            - 2 * xi * dxi * dyi * dyi
        )
    first_x /= 12.0
    first_y /= 12.0
    ixx /= 12.0
    iyy /= 12.0
    ixy /= 24.0

    # Counter-clockwise input: flip every integral to the clockwise sign
    if area < 0:
        area = -area
        first_x = -first_x
        first_y = -first_y
        ixx = -ixx
        iyy = -iyy
        ixy = -ixy

    # Centroid relative to the vertex mean
    xc = first_x / area
    yc = first_y / area

    iuu = ixx - area * yc * yc
    ivv = iyy - area * xc * xc
    iuv = ixy - area * xc * yc

    centroid_x = mean_x + xc
    centroid_y = mean_y + yc

    return MomentResult(
        area=area,
        centroid_x=centroid_x,
        centroid_y=centroid_y,
        perimeter=perimeter,
        ixx=iuu + area * centroid_y * centroid_y,
        iyy=ivv + area * centroid_x * centroid_x,
        ixy=iuv + area * centroid_x * centroid_y,
        iuu=iuu,
        ivv=ivv,
        iuv=iuv,
    )
