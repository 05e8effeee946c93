"""Tests for domain models to verify they work correctly."""

import math

import pytest

from polycore.domain import (
    DEFAULT_ACCURACY,
    CircleFit,
    EllipseFit,
    FitKind,
    MomentResult,
    Point,
    Polygon,
)
from polycore.exceptions import InvalidPolygonError

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(100.0, 200.0).to_tuple() == (100.0, 200.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.0, 200.0)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Test that equal points collapse in a set."""
        assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2


class TestPolygonConstruction:
    """Tests for the Polygon constructors."""

    def test_from_points(self) -> None:
        """Test construction from (x, y) pairs."""
        polygon = Polygon.from_points(SQUARE)
        assert len(polygon) == 4
        assert polygon.points[1] == Point(10.0, 0.0)
        assert polygon.accuracy == DEFAULT_ACCURACY

    def test_from_arrays(self) -> None:
        """Test construction from separate coordinate arrays."""
        polygon = Polygon.from_arrays([0, 10, 10, 0], [0, 0, 10, 10])
        assert polygon.is_equal(Polygon.from_points(SQUARE))

    def test_from_arrays_length_mismatch(self) -> None:
        """Test that mismatched arrays are rejected."""
        with pytest.raises(InvalidPolygonError, match="equal length"):
            Polygon.from_arrays([0, 1, 2], [0, 1])

    def test_from_matrix(self) -> None:
        """Test construction from a 2xN matrix."""
        polygon = Polygon.from_matrix([[0, 10, 10, 0], [0, 0, 10, 10]])
        assert polygon.xs == [0.0, 10.0, 10.0, 0.0]
        assert polygon.ys == [0.0, 0.0, 10.0, 10.0]

    def test_from_matrix_wrong_rows(self) -> None:
        """Test that a matrix without exactly two rows is rejected."""
        with pytest.raises(InvalidPolygonError):
            Polygon.from_matrix([[0, 1, 2]])

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, bad: float) -> None:
        """Test that non-finite coordinates are rejected."""
        with pytest.raises(InvalidPolygonError, match="finite"):
            Polygon.from_points([(0, 0), (bad, 1), (1, 1)])

    def test_non_numeric_rejected(self) -> None:
        """Test that non-numeric coordinates are rejected."""
        with pytest.raises(InvalidPolygonError):
            Polygon.from_points([(0, 0), ("a", 1), (1, 1)])

    def test_empty_polygon_is_legal(self) -> None:
        """Test that an empty polygon can be built."""
        polygon = Polygon()
        assert polygon.is_empty()
        assert len(polygon) == 0

    def test_invalid_accuracy(self) -> None:
        """Test that accuracy must be positive."""
        with pytest.raises(InvalidPolygonError):
            Polygon.from_points(SQUARE, accuracy=0.0)

    def test_owns_vertex_storage(self) -> None:
        """Test that the input list is copied."""
        points = [Point(0, 0), Point(1, 0), Point(0, 1)]
        polygon = Polygon(points=points)
        points.append(Point(5, 5))
        assert len(polygon) == 3


class TestPolygonPresets:
    """Tests for regular polygon, circle and star presets."""

    def test_regular_vertex_count(self) -> None:
        """Test that the closing vertex is not duplicated."""
        assert len(Polygon.regular(100, 6)) == 6

    def test_regular_starts_on_positive_y(self) -> None:
        """Test that the first vertex is at (0, r)."""
        first = Polygon.regular(100, 6).points[0]
        assert first.x == pytest.approx(0.0, abs=1e-12)
        assert first.y == pytest.approx(100.0)

    def test_regular_is_clockwise(self) -> None:
        """Test that presets proceed clockwise."""
        assert Polygon.regular(100, 6).is_clockwise()

    def test_regular_vertices_on_radius(self) -> None:
        """Test that every vertex lies on the circumscribed circle."""
        for p in Polygon.circle(50, 32):
            assert math.hypot(p.x, p.y) == pytest.approx(50.0)

    def test_star_alternates_radii(self) -> None:
        """Test that a star alternates outer and inner vertices."""
        star = Polygon.star(inner=40, outer=100, points=5)
        assert len(star) == 10
        radii = [math.hypot(p.x, p.y) for p in star]
        assert radii[0::2] == pytest.approx([100.0] * 5)
        assert radii[1::2] == pytest.approx([40.0] * 5)

    @pytest.mark.parametrize(
        ("radius", "points"),
        [(0, 6), (-1, 6), (10, 2), (math.inf, 6)],
    )
    def test_invalid_preset_arguments(self, radius: float, points: int) -> None:
        """Test that preset arguments are validated."""
        with pytest.raises(InvalidPolygonError):
            Polygon.regular(radius, points)


class TestPolygonMutation:
    """Tests for in-place vertex edits."""

    def test_push(self) -> None:
        """Test appending vertices."""
        polygon = Polygon().push(0, 0).push(1, 0).push(0, 1)
        assert polygon.points == [Point(0, 0), Point(1, 0), Point(0, 1)]

    def test_push_rejects_non_finite(self) -> None:
        """Test that push validates coordinates."""
        with pytest.raises(InvalidPolygonError):
            Polygon().push(math.nan, 0)

    def test_remove(self) -> None:
        """Test removing several vertices at once."""
        polygon = Polygon.from_points(SQUARE).remove(1, 3, 99)
        assert polygon.points == [Point(0, 0), Point(10, 10)]

    def test_reverse_flips_winding(self) -> None:
        """Test that reversing changes the orientation."""
        polygon = Polygon.from_points(SQUARE)
        assert not polygon.is_clockwise()
        assert polygon.reverse().is_clockwise()

    def test_copy_is_independent(self) -> None:
        """Test that copies do not share storage."""
        original = Polygon.from_points(SQUARE)
        duplicate = original.copy()
        duplicate.push(5, 5)
        assert len(original) == 4
        assert len(duplicate) == 5


class TestPolygonWinding:
    """Tests for winding detection and clockwise sorting."""

    def test_is_clockwise_includes_closing_edge(self) -> None:
        """Test a triangle whose orientation depends on the closing edge."""
        # Only the closing edge contributes to the shoelace sum here
        polygon = Polygon.from_points([(10, 0), (0, 0), (0, 10)])
        assert polygon.is_clockwise()

    def test_sort_clockwise(self) -> None:
        """Test that a shuffled square is ordered clockwise."""
        polygon = Polygon.from_points([(0, 0), (10, 10), (10, 0), (0, 10)])
        polygon.sort_clockwise()
        assert polygon.is_clockwise()
        assert polygon.data().area == pytest.approx(100.0)

    def test_sort_clockwise_empty(self) -> None:
        """Test sorting an empty polygon."""
        assert Polygon().sort_clockwise().is_empty()


class TestPolygonQueries:
    """Tests for point and segment queries on a polygon."""

    def test_contains(self) -> None:
        """Test interior and exterior points."""
        polygon = Polygon.from_points(SQUARE)
        assert polygon.contains(5, 5)
        assert not polygon.contains(15, 5)

    def test_on(self) -> None:
        """Test boundary detection including the closing edge."""
        polygon = Polygon.from_points(SQUARE)
        assert polygon.on(5, 0)
        assert polygon.on(0, 5)
        assert not polygon.on(5, 5)

    def test_closest(self) -> None:
        """Test nearest vertex lookup."""
        assert Polygon.from_points(SQUARE).closest(9, 8) == 2

    def test_line_intersect(self) -> None:
        """Test that a horizontal segment crosses two edges."""
        hits = Polygon.from_points(SQUARE).line_intersect(-5, 5, 15, 5)
        assert sorted(p.x for p in hits) == pytest.approx([0.0, 10.0])


class TestPolygonSerialization:
    """Tests for Polygon dictionary round trips."""

    def test_to_dict(self) -> None:
        """Test the dictionary layout."""
        data = Polygon.from_points(SQUARE, accuracy=1e-6).to_dict()
        assert data == {
            "points": [[0.0, 0.0], [10.0, 0.0], [10.0, 10.0], [0.0, 10.0]],
            "accuracy": 1e-6,
        }

    def test_from_dict_points_layout(self) -> None:
        """Test loading the point-list layout."""
        polygon = Polygon.from_dict({"points": SQUARE, "accuracy": 1e-6})
        assert len(polygon) == 4
        assert polygon.accuracy == 1e-6

    def test_from_dict_array_layout(self) -> None:
        """Test loading the x/y array layout."""
        polygon = Polygon.from_dict({"x": [0, 1, 0], "y": [0, 0, 1]})
        assert polygon.points == [Point(0, 0), Point(1, 0), Point(0, 1)]

    def test_from_dict_missing_layout(self) -> None:
        """Test that unknown layouts are rejected."""
        with pytest.raises(InvalidPolygonError):
            Polygon.from_dict({"vertices": []})

    def test_str(self) -> None:
        """Test the human-readable form."""
        assert str(Polygon.from_points([(0, 0), (1, 2)])) == "(0.0, 0.0), (1.0, 2.0)"


class TestResults:
    """Tests for result value objects."""

    def test_moment_result_accessors(self) -> None:
        """Test centroid property and tuple form."""
        result = MomentResult(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0)
        assert result.centroid == (2.0, 3.0)
        assert result.as_tuple() == tuple(float(i) for i in range(1, 11))
        assert result.to_dict()["iuv"] == 10.0

    def test_fit_results_carry_kind(self) -> None:
        """Test that each fit result reports its kind."""
        circle = CircleFit(center_x=1.0, center_y=2.0, radius=3.0)
        ellipse = EllipseFit(1.0, 2.0, 5.0, 3.0, 45.0)
        assert circle.kind is FitKind.CIRCLE
        assert ellipse.kind is FitKind.ELLIPSE
        assert circle.to_dict() == {
            "kind": "circle",
            "center_x": 1.0,
            "center_y": 2.0,
            "radius": 3.0,
        }
        assert ellipse.to_dict()["kind"] == "ellipse"
