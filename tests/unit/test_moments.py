"""Unit tests for polygon mass properties."""

import math

import pytest

from polycore.core.moments import polygon_moments
from polycore.domain import Polygon

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]
TRIANGLE = [(0, 0), (6, 0), (0, 3)]


class TestSquare:
    """Tests on the 10x10 square at the origin."""

    @pytest.fixture
    def result(self):
        return polygon_moments(Polygon.from_points(SQUARE))

    def test_area_and_perimeter(self, result) -> None:
        """Test area, perimeter and centroid."""
        assert result.area == pytest.approx(100.0)
        assert result.perimeter == pytest.approx(40.0)
        assert result.centroid == pytest.approx((5.0, 5.0))

    def test_global_moments(self, result) -> None:
        """Test moments about the origin."""
        expected = 100.0 * 10.0**2 / 12.0 + 100.0 * 5.0**2
        assert result.ixx == pytest.approx(expected)
        assert result.iyy == pytest.approx(expected)
        assert result.ixy == pytest.approx(2500.0)

    def test_centroidal_moments(self, result) -> None:
        """Test moments about the centroid."""
        assert result.iuu == pytest.approx(833.333333)
        assert result.ivv == pytest.approx(833.333333)
        assert result.iuv == pytest.approx(0.0, abs=1e-9)


class TestTriangle:
    """Tests on a right triangle with legs 6 (x) and 3 (y)."""

    @pytest.fixture
    def result(self):
        return polygon_moments(Polygon.from_points(TRIANGLE))

    def test_area_and_centroid(self, result) -> None:
        """Test area and centroid at one third of each leg."""
        assert result.area == pytest.approx(9.0)
        assert result.centroid == pytest.approx((2.0, 1.0))
        assert result.perimeter == pytest.approx(9.0 + math.sqrt(45.0))

    def test_centroidal_moments(self, result) -> None:
        """Test b*h^3/36, h*b^3/36 and -b^2*h^2/72."""
        assert result.iuu == pytest.approx(4.5)
        assert result.ivv == pytest.approx(18.0)
        assert result.iuv == pytest.approx(-4.5)

    def test_global_moments(self, result) -> None:
        """Test b*h^3/12, h*b^3/12 and b^2*h^2/24."""
        assert result.ixx == pytest.approx(13.5)
        assert result.iyy == pytest.approx(54.0)
        assert result.ixy == pytest.approx(13.5)


class TestInvariance:
    """Tests for winding and translation behaviour."""

    def test_winding_independent(self) -> None:
        """Test that clockwise and counter-clockwise input agree."""
        ccw = polygon_moments(Polygon.from_points(TRIANGLE))
        cw = polygon_moments(Polygon.from_points(list(reversed(TRIANGLE))))
        assert cw.as_tuple() == pytest.approx(ccw.as_tuple())

    def test_area_never_negative(self) -> None:
        """Test both orientations of a hexagon."""
        hexagon = Polygon.regular(100, 6)
        assert hexagon.data().area > 0
        assert hexagon.reverse().data().area > 0

    def test_far_from_origin(self) -> None:
        """Test that centroidal moments survive a large translation."""
        offset = 1e6
        shifted = Polygon.from_points([(x + offset, y + offset) for x, y in SQUARE])
        result = polygon_moments(shifted)
        assert result.area == pytest.approx(100.0)
        assert result.centroid == pytest.approx((offset + 5.0, offset + 5.0))
        assert result.iuu == pytest.approx(833.333333, rel=1e-6)
        assert result.iuv == pytest.approx(0.0, abs=1e-3)

    def test_micro_scale_square(self) -> None:
        """Test that a 1e-6 square is not mistaken for a degenerate polygon."""
        side = 1e-6
        tiny = Polygon.from_points([(0, 0), (side, 0), (side, side), (0, side)])
        result = polygon_moments(tiny)
        assert result.area == pytest.approx(side**2, rel=1e-9)
        assert result.centroid_x == pytest.approx(side / 2, rel=1e-9)
        assert result.centroid_y == pytest.approx(side / 2, rel=1e-9)
        assert result.perimeter == pytest.approx(4 * side, rel=1e-9)
        assert result.iuu == pytest.approx(side**4 / 12, rel=1e-6)
        assert result.ivv == pytest.approx(side**4 / 12, rel=1e-6)

    def test_concave_polygon(self) -> None:
        """Test an L shape built from a 10x4 and a 4x6 rectangle."""
        l_shape = Polygon.from_points([(0, 0), (10, 0), (10, 4), (4, 4), (4, 10), (0, 10)])
        result = polygon_moments(l_shape)
        assert result.area == pytest.approx(64.0)
        # Weighted centroid of the two rectangles
        assert result.centroid_x == pytest.approx((40.0 * 5.0 + 24.0 * 2.0) / 64.0)
        assert result.centroid_y == pytest.approx((40.0 * 2.0 + 24.0 * 7.0) / 64.0)
        assert result.perimeter == pytest.approx(40.0)


class TestDegenerate:
    """Tests for polygons without area."""

    def test_empty(self) -> None:
        """Test that an empty polygon is all zeros."""
        assert polygon_moments(Polygon()).as_tuple() == (0.0,) * 10

    def test_single_point(self) -> None:
        """Test a single vertex."""
        result = polygon_moments(Polygon.from_points([(3, 4)]))
        assert result.area == 0.0
        assert result.centroid == (3.0, 4.0)
        assert result.perimeter == 0.0

    def test_two_points(self) -> None:
        """Test a segment, traversed there and back."""
        result = polygon_moments(Polygon.from_points([(0, 0), (3, 4)]))
        assert result.area == 0.0
        assert result.perimeter == pytest.approx(10.0)
        assert result.centroid == pytest.approx((1.5, 2.0))

    def test_collinear(self) -> None:
        """Test collinear vertices: zero area and inertia, no NaN."""
        result = polygon_moments(Polygon.from_points([(0, 0), (1, 1), (2, 2)]))
        assert result.area == 0.0
        assert result.ixx == result.iyy == result.ixy == 0.0
        assert all(math.isfinite(v) for v in result.as_tuple())
