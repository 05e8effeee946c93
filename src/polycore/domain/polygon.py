"""Core geometric types for polygon representation.

This module defines the fundamental types used throughout polycore:
- Point: An immutable 2D point
- Polygon: A closed polygon owning its vertex sequence

A Polygon is always closed: the last vertex connects back to the first and
the closing vertex is never stored twice. Geometric algorithms live in
``polycore.core``; the Polygon methods that expose them delegate there.
"""

import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from polycore.exceptions import InvalidPolygonError

if TYPE_CHECKING:
    from polycore.domain.results import FitKind, FitResult, MomentResult

DEFAULT_ACCURACY = 1e-10


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, float]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


PointLike = Point | Sequence[float]


def _to_point(value: PointLike) -> Point:
    """Convert a Point or (x, y) pair to a validated Point."""
    if isinstance(value, Point):
        x, y = value.x, value.y
    else:
        if len(value) != 2:
            raise InvalidPolygonError(f"Expected an (x, y) pair, got {value!r}")
        x, y = value
    try:
        x, y = float(x), float(y)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidPolygonError(f"Vertex coordinates must be numbers, got {value!r}") from e
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidPolygonError("Polygon input arguments must include finite numbers only")
    return Point(x, y)


@dataclass
class Polygon:
    """A closed polygon.

    The polygon owns a private copy of its vertices; no two polygons share
    vertex storage. Operations that combine polygons always build a new
    instance.

    Attributes:
        points: Vertices in order; the closing edge is implicit
        accuracy: Tolerance for floating point equality comparisons
    """

    points: list[Point] = field(default_factory=list)
    accuracy: float = DEFAULT_ACCURACY

    def __post_init__(self) -> None:
        self.points = [_to_point(p) for p in self.points]
        try:
            accuracy = float(self.accuracy)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidPolygonError(
                f"accuracy must be a positive number, got {self.accuracy!r}"
            ) from e
        if not (math.isfinite(accuracy) and accuracy > 0):
            raise InvalidPolygonError(f"accuracy must be a positive number, got {self.accuracy!r}")
        self.accuracy = accuracy

    # -- construction -----------------------------------------------------

    @classmethod
    def from_points(
        cls, points: Iterable[PointLike], accuracy: float = DEFAULT_ACCURACY
    ) -> "Polygon":
        """Create a polygon from [(x0, y0), (x1, y1), ...].

        Raises:
            InvalidPolygonError: If any coordinate is not a finite number
        """
        return cls(points=list(points), accuracy=accuracy)

    @classmethod
    def from_arrays(
        cls,
        xs: Sequence[float],
        ys: Sequence[float],
        accuracy: float = DEFAULT_ACCURACY,
    ) -> "Polygon":
        """Create a polygon from separate X and Y coordinate arrays.

        Raises:
            InvalidPolygonError: If lengths differ or a coordinate is not finite
        """
        if len(xs) != len(ys):
            raise InvalidPolygonError(
                f"X and Y arrays must have equal length ({len(xs)} != {len(ys)})"
            )
        return cls(points=list(zip(xs, ys, strict=True)), accuracy=accuracy)

    @classmethod
    def from_matrix(
        cls, matrix: Sequence[Sequence[float]], accuracy: float = DEFAULT_ACCURACY
    ) -> "Polygon":
        """Create a polygon from a 2xN matrix whose rows are X and Y.

        Raises:
            InvalidPolygonError: If the matrix is not 2xN or holds non-finite values
        """
        if len(matrix) != 2:
            raise InvalidPolygonError(f"Matrix must have exactly 2 rows, got {len(matrix)}")
        return cls.from_arrays(matrix[0], matrix[1], accuracy=accuracy)

    @classmethod
    def regular(
        cls, radius: float, points: int, accuracy: float = DEFAULT_ACCURACY
    ) -> "Polygon":
        """Create a regular polygon centered on the origin.

        The first vertex lies on the positive Y axis and vertices proceed
        clockwise.

        Args:
            radius: Distance from the origin to each vertex
            points: Number of vertices (at least 3)
            accuracy: Equality tolerance of the new polygon

        Raises:
            InvalidPolygonError: If radius is not positive or points < 3
        """
        _check_preset(radius=radius, points=points)
        step = 2.0 * math.pi / points
        vertices = [
            (radius * math.sin(i * step), radius * math.cos(i * step))
            for i in range(points)
        ]
        return cls(points=vertices, accuracy=accuracy)

    @classmethod
    def circle(
        cls, radius: float, points: int, accuracy: float = DEFAULT_ACCURACY
    ) -> "Polygon":
        """Create a polygonal approximation of a circle centered on the origin."""
        return cls.regular(radius, points, accuracy=accuracy)

    @classmethod
    def star(
        cls,
        inner: float,
        outer: float,
        points: int,
        accuracy: float = DEFAULT_ACCURACY,
    ) -> "Polygon":
        """Create a star centered on the origin.

        Vertices alternate between the outer and inner radius, starting with
        an outer tip on the positive Y axis and proceeding clockwise.

        Args:
            inner: Radius of the inner (concave) vertices
            outer: Radius of the outer tips
            points: Number of tips (at least 3); the star has 2 * points vertices
            accuracy: Equality tolerance of the new polygon

        Raises:
            InvalidPolygonError: If a radius is not positive or points < 3
        """
        _check_preset(radius=inner, points=points)
        _check_preset(radius=outer, points=points)
        half_step = math.pi / points
        vertices: list[tuple[float, float]] = []
        for i in range(points):
            angle = 2.0 * i * half_step
            vertices.append((outer * math.sin(angle), outer * math.cos(angle)))
            vertices.append(
                (inner * math.sin(angle + half_step), inner * math.cos(angle + half_step))
            )
        return cls(points=vertices, accuracy=accuracy)

    # -- vertex access ----------------------------------------------------

    @property
    def xs(self) -> list[float]:
        """X coordinates of the vertices."""
        return [p.x for p in self.points]

    @property
    def ys(self) -> list[float]:
        """Y coordinates of the vertices."""
        return [p.y for p in self.points]

    def vertices(self) -> tuple[list[float], list[float]]:
        """Return the vertices as (xs, ys) arrays."""
        return self.xs, self.ys

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def is_empty(self) -> bool:
        """Check if the polygon has no vertices."""
        return not self.points

    def copy(self) -> "Polygon":
        """Return an independent copy of this polygon."""
        return Polygon(points=list(self.points), accuracy=self.accuracy)

    # -- structural mutation ----------------------------------------------

    def push(self, x: float, y: float) -> "Polygon":
        """Append a vertex at the end of the polygon.

        Returns:
            This polygon, for chaining

        Raises:
            InvalidPolygonError: If a coordinate is not finite
        """
        self.points.append(_to_point((x, y)))
        return self

    def remove(self, *indices: int) -> "Polygon":
        """Remove the vertices at the given indices (out of range ones are ignored).

        Returns:
            This polygon, for chaining
        """
        dropped = {i for i in indices if 0 <= i < len(self.points)}
        self.points = [p for i, p in enumerate(self.points) if i not in dropped]
        return self

    def reverse(self) -> "Polygon":
        """Reverse vertex order in place.

        Returns:
            This polygon, for chaining
        """
        self.points.reverse()
        return self

    # -- transforms -------------------------------------------------------

    def rotate(self, x: float, y: float, degrees: float) -> "Polygon":
        """Rotate counter-clockwise by degrees about (x, y), in place."""
        from polycore.core.transform import rotate

        return rotate(self, x, y, degrees)

    def move_by(self, dx: float, dy: float) -> "Polygon":
        """Translate by (dx, dy), in place."""
        from polycore.core.transform import move_by

        return move_by(self, dx, dy)

    def move_along(self, bearing: float, distance: float) -> "Polygon":
        """Translate along a bearing (degrees clockwise from +Y), in place."""
        from polycore.core.transform import move_along

        return move_along(self, bearing, distance)

    def slice_box(self, x_min: float, y_min: float, x_max: float, y_max: float) -> "Polygon":
        """Remove the vertices inside a box, in place."""
        from polycore.core.transform import slice_box

        return slice_box(self, x_min, y_min, x_max, y_max)

    def slice_circle(self, x: float, y: float, radius: float) -> "Polygon":
        """Remove the vertices inside a circle, in place."""
        from polycore.core.transform import slice_circle

        return slice_circle(self, x, y, radius)

    # -- winding ----------------------------------------------------------

    def is_clockwise(self) -> bool:
        """Check if the vertices are ordered clockwise.

        Uses the shoelace sum over every edge, closing edge included.

        Returns:
            True if the shoelace sum is negative
        """
        n = len(self.points)
        total = 0.0
        for i in range(n):
            p = self.points[i]
            q = self.points[(i + 1) % n]
            total += p.x * q.y - p.y * q.x
        return total < 0

    def sort_clockwise(self) -> "Polygon":
        """Sort vertices clockwise by polar angle about their mean.

        Vertices with equal angles keep their relative order.

        Returns:
            This polygon, for chaining
        """
        if not self.points:
            return self
        n = len(self.points)
        mean_x = sum(p.x for p in self.points) / n
        mean_y = sum(p.y for p in self.points) / n
        self.points.sort(key=lambda p: -math.atan2(p.y - mean_y, p.x - mean_x))
        return self

    # -- point / line queries ---------------------------------------------

    def contains(self, x: float, y: float) -> bool:
        """Test if a point is inside the polygon (ray casting)."""
        from polycore.core.geometry import point_in_polygon

        return point_in_polygon(Point(x, y), self.points)

    def on(self, x: float, y: float) -> bool:
        """Test if a point lies on the polygon boundary within accuracy."""
        from polycore.core.geometry import point_on_polygon

        return point_on_polygon(Point(x, y), self.points, self.accuracy)

    def closest(self, x: float, y: float) -> int:
        """Return the index of the vertex closest to a point."""
        from polycore.core.geometry import closest_vertex

        return closest_vertex(Point(x, y), self.points)

    def line_intersect(self, x1: float, y1: float, x2: float, y2: float) -> list[Point]:
        """Return every intersection of segment (x1, y1)-(x2, y2) with the boundary."""
        from polycore.core.geometry import line_polygon_intersections

        return line_polygon_intersections(Point(x1, y1), Point(x2, y2), self.points)

    # -- core operations --------------------------------------------------

    def intersect(self, clipper: "Polygon") -> "Polygon":
        """Intersect this polygon with a convex clipping polygon."""
        from polycore.core.clipping import intersect

        return intersect(self, clipper)

    def union(self, clipper: "Polygon") -> "Polygon":
        """Union of this polygon with a convex polygon."""
        from polycore.core.clipping import union

        return union(self, clipper)

    def convex_hull(self) -> tuple[list[float], list[float]]:
        """Return the convex hull vertices as (xs, ys), counter-clockwise."""
        from polycore.core.hull import convex_hull

        return convex_hull(self)

    def simplify(self, tolerance: float) -> "Polygon":
        """Remove vertices closer than tolerance to the simplified boundary.

        Returns:
            This polygon, for chaining
        """
        from polycore.core.simplify import simplify

        return simplify(self, tolerance)

    def data(self) -> "MomentResult":
        """Return area, centroid, perimeter and moments of inertia."""
        from polycore.core.moments import polygon_moments

        return polygon_moments(self)

    def radial_fit(self, kind: "FitKind | str" = "circle") -> "FitResult":
        """Fit a circle or an ellipse to the polygon vertices."""
        from polycore.core.fitting import radial_fit

        return radial_fit(self, kind)

    # -- comparison / serialization ---------------------------------------

    def is_equal(self, other: "Polygon") -> bool:
        """Check vertex-wise equality within this polygon's accuracy."""
        if len(self.points) != len(other.points):
            return False
        return all(
            abs(p.x - q.x) < self.accuracy and abs(p.y - q.y) < self.accuracy
            for p, q in zip(self.points, other.points, strict=True)
        )

    def __str__(self) -> str:
        return ", ".join(f"({p.x}, {p.y})" for p in self.points)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with a point list and the accuracy
        """
        return {
            "points": [[p.x, p.y] for p in self.points],
            "accuracy": self.accuracy,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary.

        Accepts either ``{"points": [[x, y], ...]}`` or ``{"x": [...], "y": [...]}``,
        with an optional ``accuracy``.

        Raises:
            InvalidPolygonError: If neither layout is present or values are invalid
        """
        accuracy = data.get("accuracy", DEFAULT_ACCURACY)
        if "points" in data:
            return cls.from_points(data["points"], accuracy=accuracy)
        if "x" in data and "y" in data:
            return cls.from_arrays(data["x"], data["y"], accuracy=accuracy)
        raise InvalidPolygonError("Polygon data must contain 'points' or both 'x' and 'y'")


def _check_preset(radius: float, points: int) -> None:
    if not (math.isfinite(radius) and radius > 0):
        raise InvalidPolygonError(f"Radius must be a positive finite number, got {radius!r}")
    if points < 3:
        raise InvalidPolygonError(f"A closed shape needs at least 3 points, got {points}")
