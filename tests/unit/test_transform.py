"""Unit tests for coordinate transforms, bounds and centroids."""

import math

import pytest

from iconpath.core.bounds import centroid, command_coordinates, compute_bounds
from iconpath.core.transform import (
    centering_offset,
    font_y_to_design,
    map_command,
    map_commands,
    mirror_x,
    mirror_y,
    rotation,
    scaling,
    translation,
)
from iconpath.domain import (
    Bounds,
    Close,
    CubicCurve,
    HorizontalLine,
    Line,
    Move,
    QuadraticCurve,
    SmoothCubicCurve,
    VerticalLine,
)


class TestPointMappers:
    """Tests for the point mapping factories."""

    def test_scaling_about_pivot(self):
        """The pivot is a fixed point of the scaling."""
        fn = scaling(2, 3, (10, 10))
        assert fn(10, 10) == (10, 10)
        assert fn(12, 11) == (14, 13)

    def test_translation(self):
        assert translation(1, -2)(3, 4) == (4, 2)

    def test_rotation_quarter_turn(self):
        """Rotating (1, 0) by 90 degrees about the origin gives (0, 1)."""
        x, y = rotation(math.pi / 2)(1, 0)
        assert x == pytest.approx(0, abs=1e-12)
        assert y == pytest.approx(1)

    def test_rotation_about_pivot(self):
        x, y = rotation(math.pi, (5, 5))(6, 5)
        assert (x, y) == pytest.approx((4, 5))

    def test_mirrors(self):
        assert mirror_x(24)(4, 7) == (20, 7)
        assert mirror_y(24)(4, 7) == (4, 17)


class TestMapCommand:
    """Tests for applying mappings to commands."""

    def test_all_fields_are_mapped(self):
        """Control points are mapped along with endpoints."""
        fn = translation(1, 1)
        assert map_command(CubicCurve(0, 0, 1, 1, 2, 2), fn) == CubicCurve(1, 1, 2, 2, 3, 3)
        assert map_command(SmoothCubicCurve(1, 1, 2, 2), fn) == SmoothCubicCurve(2, 2, 3, 3)
        assert map_command(QuadraticCurve(0, 0, 1, 1), fn) == QuadraticCurve(1, 1, 2, 2)

    def test_single_axis_commands(self):
        """H and V only take their own axis from the mapping."""
        fn = translation(3, 5)
        assert map_command(HorizontalLine(1), fn) == HorizontalLine(4)
        assert map_command(VerticalLine(1), fn) == VerticalLine(6)

    def test_close_is_unchanged(self):
        assert map_command(Close(), translation(1, 1)) == Close()

    def test_input_is_not_mutated(self):
        """map_commands returns a new list."""
        commands = [Move(0, 0), Line(1, 1)]
        result = map_commands(commands, translation(1, 1))
        assert commands == [Move(0, 0), Line(1, 1)]
        assert result == [Move(1, 1), Line(2, 2)]

    def test_unknown_command(self):
        with pytest.raises(TypeError):
            map_command(object(), translation(0, 0))  # type: ignore[arg-type]


class TestBounds:
    """Tests for bounds over commands."""

    def test_control_points_included(self):
        """Control points that protrude widen the box."""
        bounds = compute_bounds([Move(0, 0), QuadraticCurve(5, -10, 10, 0)])
        assert bounds == Bounds(0, -10, 10, 0)

    def test_single_axis_commands(self):
        """H contributes only an X value and V only a Y value."""
        bounds = compute_bounds([Move(2, 2), HorizontalLine(8), VerticalLine(-4)])
        assert bounds == Bounds(2, -4, 8, 2)

    def test_empty(self):
        """No coordinates yields the empty sentinel."""
        assert compute_bounds([]).is_empty
        assert compute_bounds([Close()]).is_empty

    def test_command_coordinates(self):
        assert command_coordinates(SmoothCubicCurve(1, 2, 3, 4)) == ((1, 3), (2, 4))
        assert command_coordinates(Close()) == ((), ())

    def test_nan_propagates(self):
        """A NaN coordinate is not skipped; its axis reports NaN."""
        bounds = compute_bounds([Move(math.nan, 0), Line(5, 5)])
        assert math.isnan(bounds.min_x)
        assert math.isnan(bounds.max_x)
        assert (bounds.min_y, bounds.max_y) == (0, 5)

        later = compute_bounds([Move(5, 5), Line(math.nan, 0)])
        assert math.isnan(later.min_x)
        assert math.isnan(later.max_x)

    def test_infinity_kept(self):
        bounds = compute_bounds([Move(0, 0), Line(math.inf, -math.inf)])
        assert bounds == Bounds(0, -math.inf, math.inf, 0)


class TestCentroid:
    """Tests for the coordinate mean."""

    def test_mean_of_coordinates(self):
        result = centroid([Move(0, 0), Line(10, 0), Line(10, 10), Line(0, 10), Close()])
        assert result == (5, 5)

    def test_axes_averaged_independently(self):
        """H and V only contribute to their own axis."""
        assert centroid([Move(0, 0), HorizontalLine(6)]) == (3, 0)

    def test_empty(self):
        assert centroid([]) is None


class TestLayoutHelpers:
    """Tests for centering and font-space mapping helpers."""

    def test_centering_offset(self):
        """Offset moves the shape's box into the middle of the target."""
        assert centering_offset(Bounds(0, 0, 10, 4), 0, 0, 24, 24) == (7, 10)

    def test_font_y_to_design(self):
        """Ascender maps to 0, descender to height, baseline in between."""
        assert font_y_to_design(800, 800, -200, 24) == 0
        assert font_y_to_design(-200, 800, -200, 24) == 24
        assert font_y_to_design(0, 800, -200, 24) == pytest.approx(19.2)
