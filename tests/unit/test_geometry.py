"""Unit tests for geometry primitives."""

import math

import pytest

from polycore.core.geometry import (
    approx_equal,
    closest_vertex,
    cross,
    line_polygon_intersections,
    point_in_polygon,
    point_on_polygon,
    point_on_segment,
    safe_norm2,
    segment_intersection,
)
from polycore.domain import Point
from polycore.exceptions import InvalidPolygonError


@pytest.fixture
def square() -> list[Point]:
    """Counter-clockwise 10x10 square at the origin."""
    return [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]


@pytest.fixture
def l_shape() -> list[Point]:
    """Concave L-shaped polygon."""
    return [
        Point(0, 0),
        Point(10, 0),
        Point(10, 4),
        Point(4, 4),
        Point(4, 10),
        Point(0, 10),
    ]


class TestApproxEqual:
    """Tests for approx_equal."""

    def test_within_tolerance(self) -> None:
        """Test values closer than eps."""
        assert approx_equal(1.0, 1.0 + 1e-12, 1e-10)

    def test_tolerance_is_strict(self) -> None:
        """Test that a difference equal to eps is not equal."""
        assert not approx_equal(0.0, 0.5, 0.5)


class TestSafeNorm2:
    """Tests for safe_norm2."""

    def test_zero(self) -> None:
        """Test that (0, 0) has norm 0."""
        assert safe_norm2(0.0, 0.0) == 0.0

    def test_pythagorean(self) -> None:
        """Test a 3-4-5 triangle in both argument orders."""
        assert safe_norm2(3.0, 4.0) == pytest.approx(5.0)
        assert safe_norm2(-4.0, 3.0) == pytest.approx(5.0)

    def test_no_overflow(self) -> None:
        """Test values whose squares overflow a float."""
        result = safe_norm2(1e200, 1e200)
        assert math.isfinite(result)
        assert result == pytest.approx(math.sqrt(2.0) * 1e200)


class TestCross:
    """Tests for the orientation predicate."""

    def test_left_turn_positive(self) -> None:
        """Test a counter-clockwise turn."""
        assert cross(Point(0, 0), Point(1, 0), Point(1, 1)) > 0

    def test_right_turn_negative(self) -> None:
        """Test a clockwise turn."""
        assert cross(Point(0, 0), Point(1, 0), Point(1, -1)) < 0

    def test_collinear_zero(self) -> None:
        """Test collinear points."""
        assert cross(Point(0, 0), Point(1, 1), Point(3, 3)) == 0


class TestPointInPolygon:
    """Tests for ray-casting point-in-polygon."""

    def test_inside(self, square: list[Point]) -> None:
        """Test a point in the interior."""
        assert point_in_polygon(Point(5, 5), square)

    def test_outside(self, square: list[Point]) -> None:
        """Test points outside on every side."""
        for p in (Point(-1, 5), Point(11, 5), Point(5, -1), Point(5, 11)):
            assert not point_in_polygon(p, square)

    def test_concave_notch(self, l_shape: list[Point]) -> None:
        """Test the notch of a concave polygon."""
        assert point_in_polygon(Point(2, 8), l_shape)
        assert point_in_polygon(Point(8, 2), l_shape)
        assert not point_in_polygon(Point(8, 8), l_shape)

    def test_winding_independent(self, square: list[Point]) -> None:
        """Test that vertex order does not matter."""
        assert point_in_polygon(Point(5, 5), list(reversed(square)))

    def test_degenerate_polygon(self) -> None:
        """Test that fewer than three vertices contain nothing."""
        assert not point_in_polygon(Point(0, 0), [Point(0, 0), Point(1, 1)])


class TestPointOnSegment:
    """Tests for point_on_segment."""

    def test_midpoint(self) -> None:
        """Test the midpoint of a segment."""
        assert point_on_segment(Point(5, 5), Point(0, 0), Point(10, 10))

    def test_endpoint(self) -> None:
        """Test a segment endpoint."""
        assert point_on_segment(Point(10, 10), Point(0, 0), Point(10, 10))

    def test_collinear_beyond_end(self) -> None:
        """Test a collinear point outside the segment."""
        assert not point_on_segment(Point(11, 11), Point(0, 0), Point(10, 10))

    def test_off_line(self) -> None:
        """Test a point beside the segment."""
        assert not point_on_segment(Point(5, 6), Point(0, 0), Point(10, 10))

    def test_tolerance(self) -> None:
        """Test that eps relaxes the collinearity test."""
        near = Point(5, 1e-9)
        assert not point_on_segment(near, Point(0, 0), Point(10, 0))
        assert point_on_segment(near, Point(0, 0), Point(10, 0), eps=1e-6)


class TestPointOnPolygon:
    """Tests for boundary detection."""

    def test_edges_and_closing_edge(self, square: list[Point]) -> None:
        """Test a point on each edge, closing edge included."""
        for p in (Point(5, 0), Point(10, 5), Point(5, 10), Point(0, 5)):
            assert point_on_polygon(p, square, 1e-10)

    def test_vertices(self, square: list[Point]) -> None:
        """Test that vertices are on the boundary."""
        for p in square:
            assert point_on_polygon(p, square, 1e-10)

    def test_interior_is_not_boundary(self, square: list[Point]) -> None:
        """Test an interior point."""
        assert not point_on_polygon(Point(5, 5), square, 1e-10)

    def test_empty_and_single(self) -> None:
        """Test the degenerate cases."""
        assert not point_on_polygon(Point(0, 0), [], 1e-10)
        assert point_on_polygon(Point(1, 1), [Point(1, 1)], 1e-10)


class TestSegmentIntersection:
    """Tests for segment_intersection."""

    def test_crossing(self) -> None:
        """Test two diagonals of a square."""
        hit = segment_intersection(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
        assert hit == Point(1.0, 1.0)

    def test_touching_endpoint(self) -> None:
        """Test segments meeting at an endpoint."""
        hit = segment_intersection(Point(0, 0), Point(1, 0), Point(1, 0), Point(1, 1))
        assert hit is not None
        assert hit.to_tuple() == pytest.approx((1.0, 0.0))

    def test_lines_cross_outside_segments(self) -> None:
        """Test segments whose lines cross beyond their ends."""
        assert segment_intersection(Point(0, 0), Point(1, 1), Point(3, 0), Point(2, 1)) is None

    def test_parallel(self) -> None:
        """Test parallel segments."""
        assert segment_intersection(Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1)) is None

    def test_collinear_overlap_reports_none(self) -> None:
        """Test that collinear overlapping segments report no single point."""
        assert segment_intersection(Point(0, 0), Point(2, 0), Point(1, 0), Point(3, 0)) is None


class TestLinePolygonIntersections:
    """Tests for line_polygon_intersections."""

    def test_crossing_two_edges(self, square: list[Point]) -> None:
        """Test a segment crossing the square."""
        hits = line_polygon_intersections(Point(-5, 5), Point(15, 5), square)
        assert sorted(p.to_tuple() for p in hits) == [(0.0, 5.0), (10.0, 5.0)]

    def test_no_crossing(self, square: list[Point]) -> None:
        """Test a segment entirely outside."""
        assert line_polygon_intersections(Point(20, 0), Point(20, 10), square) == []

    def test_degenerate_polygon(self) -> None:
        """Test a polygon with fewer than two vertices."""
        assert line_polygon_intersections(Point(0, 0), Point(1, 1), [Point(0, 0)]) == []


class TestClosestVertex:
    """Tests for closest_vertex."""

    def test_nearest(self, square: list[Point]) -> None:
        """Test nearest-vertex lookup."""
        assert closest_vertex(Point(9, 1), square) == 1
        assert closest_vertex(Point(-3, 12), square) == 3

    def test_first_wins_ties(self, square: list[Point]) -> None:
        """Test that the first vertex wins equal distances."""
        assert closest_vertex(Point(5, 5), square) == 0

    def test_empty(self) -> None:
        """Test that an empty polygon is rejected."""
        with pytest.raises(InvalidPolygonError):
            closest_vertex(Point(0, 0), [])
