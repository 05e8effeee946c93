"""Least-squares radial fitting (circle or ellipse) of a point set.

Both fits are algebraic: the implicit conic equation is linear in its
coefficients, so each point contributes one row to a linear system that is
solved in the least-squares sense by polycore.core.linalg.

- Circle:  x^2 + y^2 + D x + E y + F = 0
- Ellipse: x^2 + 2b xy + c y^2 + 2d x + 2f y + g = 0

Points are centred on their mean and scaled to unit extent before the solve
and the recovered parameters are mapped back, which keeps the normal
equations well conditioned for coordinates far from the origin.
"""

import logging
import math
from collections.abc import Sequence

from polycore.core.linalg import least_squares
from polycore.domain import CircleFit, EllipseFit, FitKind, FitResult, Point, Polygon
from polycore.exceptions import FitError, InvalidParameterError, SingularMatrixError

logger = logging.getLogger(__name__)

MIN_CIRCLE_POINTS = 3
MIN_ELLIPSE_POINTS = 5


def _normalize(
    points: Sequence[Point], kind: FitKind
) -> tuple[list[tuple[float, float]], float, float, float]:
    """Centre points on their mean and scale by the largest absolute offset.

    Returns:
        Tuple of (normalized (x, y) pairs, mean_x, mean_y, scale)

    Raises:
        FitError: If every point coincides
    """
    n = len(points)
    mean_x = sum(p.x for p in points) / n
    mean_y = sum(p.y for p in points) / n
    scale = max(max(abs(p.x - mean_x), abs(p.y - mean_y)) for p in points)
    if scale == 0:
        raise FitError(kind.value, "all points coincide")
    normalized = [((p.x - mean_x) / scale, (p.y - mean_y) / scale) for p in points]
    return normalized, mean_x, mean_y, scale


def fit_circle(points: Sequence[Point], tolerance: float = 1e-12) -> CircleFit:
    """Fit a circle to a point set.

    Args:
        points: At least 3 non-collinear points
        tolerance: Relative pivot threshold of the linear solver

    Returns:
        CircleFit with center and radius

    Raises:
        FitError: If there are too few points or they are collinear
    """
    if len(points) < MIN_CIRCLE_POINTS:
        raise FitError(
            FitKind.CIRCLE.value,
            f"need at least {MIN_CIRCLE_POINTS} points, got {len(points)}",
        )

    normalized, mean_x, mean_y, scale = _normalize(points, FitKind.CIRCLE)
    rows = [[x, y, 1.0] for x, y in normalized]
    rhs = [-(x * x + y * y) for x, y in normalized]

    try:
        d, e, f = least_squares(rows, rhs, tolerance)
    except SingularMatrixError as err:
        raise FitError(FitKind.CIRCLE.value, "points are collinear") from err

    radius_sq = (d * d + e * e) / 4.0 - f
    if radius_sq <= 0:
        raise FitError(FitKind.CIRCLE.value, f"no real circle (radius^2 = {radius_sq:.3e})")

    result = CircleFit(
        center_x=mean_x - d / 2.0 * scale,
        center_y=mean_y - e / 2.0 * scale,
        radius=math.sqrt(radius_sq) * scale,
    )
    logger.debug("Circle fit: points=%d result=%s", len(points), result)
    return result


def fit_ellipse(points: Sequence[Point], tolerance: float = 1e-12) -> EllipseFit:
    """Fit an ellipse to a point set.

    The center comes from the conic coefficients, the semi-axes from the
    eigenvalues of the quadratic form [[1, b], [b, c]], and the rotation is
    the angle from the X axis to the major axis.

    Args:
        points: At least 5 points in general position
        tolerance: Relative pivot threshold of the linear solver

    Returns:
        EllipseFit with center, semi-axes and rotation in degrees [0, 180)

    Raises:
        FitError: If there are too few points, the system is singular or the
            fitted conic is not a real ellipse
    """
    kind = FitKind.ELLIPSE.value
    if len(points) < MIN_ELLIPSE_POINTS:
        raise FitError(kind, f"need at least {MIN_ELLIPSE_POINTS} points, got {len(points)}")

    normalized, mean_x, mean_y, scale = _normalize(points, FitKind.ELLIPSE)
    rows = [[2.0 * x * y, y * y, 2.0 * x, 2.0 * y, 1.0] for x, y in normalized]
    rhs = [-(x * x) for x, _ in normalized]

    try:
        b, c, d, f, g = least_squares(rows, rhs, tolerance)
    except SingularMatrixError as err:
        raise FitError(kind, "points do not determine a unique conic") from err

    det = c - b * b
    if det <= 0:
        raise FitError(kind, "fitted conic is not an ellipse")

    x0 = (b * f - c * d) / det
    y0 = (b * d - f) / det
    k = -(d * x0 + f * y0 + g)
    if k <= 0:
        raise FitError(kind, "fitted conic has no real points")

    half_trace = (1.0 + c) / 2.0
    spread = math.hypot((1.0 - c) / 2.0, b)
    lambda_min = half_trace - spread
    lambda_max = half_trace + spread

    semi_major = math.sqrt(k / lambda_min)
    semi_minor = math.sqrt(k / lambda_max)

    # Eigenvector of lambda_max sits at atan2(2b, 1 - c) / 2; the major axis is orthogonal
    rotation = math.degrees(0.5 * math.atan2(2.0 * b, 1.0 - c) + math.pi / 2.0) % 180.0

    result = EllipseFit(
        center_x=mean_x + x0 * scale,
        center_y=mean_y + y0 * scale,
        semi_major=semi_major * scale,
        semi_minor=semi_minor * scale,
        rotation_degrees=rotation,
    )
    logger.debug("Ellipse fit: points=%d result=%s", len(points), result)
    return result


def radial_fit(
    polygon: Polygon,
    kind: FitKind | str = FitKind.CIRCLE,
    tolerance: float = 1e-12,
) -> FitResult:
    """Fit a circle or an ellipse to the polygon's vertices.

    Args:
        polygon: Polygon whose vertices are fitted
        kind: FitKind or its string value ("circle" / "ellipse")
        tolerance: Relative pivot threshold of the linear solver

    Returns:
        CircleFit or EllipseFit

    Raises:
        InvalidParameterError: If kind is not a known fit kind
        FitError: If the fit cannot be computed
    """
    if not isinstance(kind, FitKind):
        try:
            kind = FitKind(str(kind).lower())
        except ValueError as e:
            raise InvalidParameterError("kind", kind, "expected 'circle' or 'ellipse'") from e
    if kind is FitKind.ELLIPSE:
        return fit_ellipse(polygon.points, tolerance)
    return fit_circle(polygon.points, tolerance)
