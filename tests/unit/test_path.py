"""Unit tests for the IconPath builder.

Tests cover:
- Fluent command building and SVG letter aliases
- Rectangles with sharp, rounded and chamfered corners
- Transforms (scale, translate, rotate, flip, center, fit, align)
- Export to canonical commands, font outlines and path data
"""

import math

import pytest
from fontTools.pens.recordingPen import RecordingPen

from iconpath import IconPath
from iconpath.domain import (
    AlignMode,
    ChamferCorner,
    Close,
    CubicCurve,
    HorizontalLine,
    Line,
    Move,
    RoundedCorner,
    SharpCorner,
    VerticalLine,
    WindingDirection,
)
from iconpath.exceptions import PathDataError


def _bounds(path: IconPath) -> tuple[float, float, float, float]:
    return path.bounds().to_tuple()


class TestBuilder:
    """Tests for appending commands."""

    def test_defaults(self):
        """A new path uses a 24 x 24 grid and has no commands."""
        path = IconPath()
        assert (path.width, path.height) == (24, 24)
        assert len(path) == 0
        assert path.commands == ()

    def test_height_defaults_to_width(self):
        assert IconPath(32).height == 32
        assert IconPath(32, 16).height == 16

    def test_chaining(self):
        """Builder methods return the path itself."""
        path = IconPath()
        assert path.move_to(0, 0).line_to(1, 1).close() is path
        assert path.commands == (Move(0, 0), Line(1, 1), Close())

    def test_letter_aliases(self):
        """Single-letter aliases append the same commands."""
        path = IconPath().M(0, 0).H(5).V(5).L(0, 5).Z()
        assert path.commands == (
            Move(0, 0),
            HorizontalLine(5),
            VerticalLine(5),
            Line(0, 5),
            Close(),
        )

    def test_arc_is_stored_as_cubics(self):
        """arc_to appends cubic segments starting from the current point."""
        path = IconPath().move_to(0, 0).arc_to(5, 5, 0, False, True, 10, 0)
        assert len(path) == 3
        assert all(isinstance(c, CubicCurve) for c in path.commands[1:])
        assert path.current_point() == (10, 0)

    def test_current_point(self):
        """The pen follows H/V and returns to the start on close."""
        path = IconPath().move_to(2, 3).horizontal_to(8)
        assert path.current_point() == (8, 3)
        path.vertical_to(9)
        assert path.current_point() == (8, 9)
        path.close()
        assert path.current_point() == (2, 3)

    def test_current_point_of_empty_path(self):
        assert IconPath().current_point() == (0, 0)

    def test_commands_is_a_snapshot(self):
        """The exposed tuple does not change when the path grows."""
        path = IconPath().move_to(0, 0)
        snapshot = path.commands
        path.line_to(1, 1)
        assert snapshot == (Move(0, 0),)


class TestRect:
    """Tests for rectangle and corner helpers."""

    def test_sharp_rect(self):
        """A plain rectangle starts at the top-left vertex and runs clockwise."""
        path = IconPath().rect(2, 3, 10, 5)
        assert path.commands == (
            Move(2, 3),
            Line(12, 3),
            Line(12, 8),
            Line(2, 8),
            Close(),
        )

    def test_rounded_rect(self):
        """Rounded corners add a line and a quarter arc per corner."""
        path = IconPath().rect(0, 0, 24, 24, rx=4)
        commands = path.commands

        assert commands[0] == Move(4, 0)
        assert commands[1] == Line(20, 0)
        assert isinstance(commands[2], CubicCurve)
        assert (commands[2].x, commands[2].y) == (24, 4)
        assert isinstance(commands[-1], Close)
        assert len(commands) == 10
        assert _bounds(path) == pytest.approx((0, 0, 24, 24))

    def test_per_corner_overrides(self):
        """Corner overrides replace the default style for that corner only."""
        path = IconPath().rect(0, 0, 24, 24, corners={"tr": ChamferCorner(6, 6)})
        assert path.commands == (
            Move(0, 0),
            Line(18, 0),
            Line(24, 6),
            Line(24, 24),
            Line(0, 24),
            Close(),
        )

    def test_sharp_override_on_rounded_rect(self):
        """A sharp top-left corner is the start point and is not drawn again."""
        path = IconPath().rect(0, 0, 24, 24, rx=4, corners={"tl": SharpCorner()})
        commands = path.commands
        assert commands[0] == Move(0, 0)
        assert len(commands) == 8
        assert (commands[-2].x, commands[-2].y) == (0, 20)
        assert commands[-1] == Close()

    def test_rounded_corner_helper(self):
        """rounded_corner draws to the entry point then arcs to the exit point."""
        path = IconPath().move_to(0, 0).rounded_corner("tr", 24, 0, 3, 3)
        assert path.commands[1] == Line(21, 0)
        assert path.current_point() == (24, 3)

    def test_corner_dispatch(self):
        path = IconPath().move_to(0, 0).corner("tr", 24, 0, RoundedCorner(2, 2))
        assert path.current_point() == (24, 2)
        path = IconPath().move_to(0, 0).corner("tr", 24, 0, SharpCorner())
        assert path.commands[-1] == Line(24, 0)


class TestTransforms:
    """Tests for geometric transforms."""

    def test_scale_about_design_center(self):
        path = IconPath().rect(0, 0, 24, 24).scale(0.5)
        assert _bounds(path) == (6, 6, 18, 18)

    def test_scale_about_pivot(self):
        path = IconPath().rect(0, 0, 10, 10).scale(2, 3, pivot=(0, 0))
        assert _bounds(path) == (0, 0, 20, 30)

    def test_translate(self):
        path = IconPath().rect(0, 0, 10, 10).translate(1, 2)
        assert _bounds(path) == (1, 2, 11, 12)

    def test_rotate(self):
        path = IconPath().move_to(1, 0).rotate(math.pi / 2)
        (move,) = path.commands
        assert move.x == pytest.approx(0, abs=1e-12)
        assert move.y == pytest.approx(1)

    def test_rotate_keeps_single_axis_commands(self):
        """H stays an H after rotation, taking only the mapped X."""
        path = IconPath().move_to(0, 0).horizontal_to(10).rotate(math.pi / 2)
        assert isinstance(path.commands[1], HorizontalLine)
        assert path.commands[1].x == pytest.approx(0, abs=1e-12)

    def test_flips(self):
        assert _bounds(IconPath().rect(0, 0, 10, 5).flip_x()) == (14, 0, 24, 5)
        assert _bounds(IconPath().rect(0, 0, 10, 5).flip_y()) == (0, 19, 10, 24)
        assert _bounds(IconPath().rect(0, 0, 10, 5).flip_x(10)) == (0, 0, 10, 5)

    def test_center(self):
        path = IconPath().rect(0, 0, 10, 4).center()
        assert _bounds(path) == (7, 10, 17, 14)

    def test_center_in_box(self):
        path = IconPath().rect(0, 0, 2, 2).center(10, 10, 4, 4)
        assert _bounds(path) == (11, 11, 13, 13)

    def test_center_empty_path(self):
        """An empty path is left as it is."""
        assert len(IconPath().center()) == 0

    def test_center_zero_extent(self):
        """A point or a flat line has no extent to center and is left unchanged."""
        assert IconPath().move_to(3, 3).center().commands == (Move(3, 3),)
        flat = IconPath().move_to(3, 3).line_to(10, 3).center()
        assert flat.commands == (Move(3, 3), Line(10, 3))
        upright = IconPath().move_to(3, 3).vertical_to(10).center()
        assert upright.commands == (Move(3, 3), VerticalLine(10))

    def test_fit_preserves_aspect(self):
        """Fit scales by the smaller factor and centers."""
        path = IconPath().rect(0, 0, 10, 5).fit()
        assert _bounds(path) == pytest.approx((0, 6, 24, 18))

    def test_fit_stretch(self):
        path = IconPath().rect(0, 0, 10, 5).fit(preserve_aspect=False)
        assert _bounds(path) == pytest.approx((0, 0, 24, 24))

    def test_fit_canvas(self):
        path = IconPath().rect(0, 0, 10, 10).fit(12, 12)
        assert _bounds(path) == pytest.approx((0, 0, 12, 12))

    def test_fit_zero_height(self):
        """A flat shape cannot be fit and is left unchanged."""
        path = IconPath().move_to(0, 5).line_to(10, 5).fit()
        assert path.commands == (Move(0, 5), Line(10, 5))

    def test_fit_zero_width(self):
        """A vertical line is left unchanged rather than scaled by an infinite factor."""
        path = IconPath().move_to(5, 0).line_to(5, 10).fit()
        assert path.commands == (Move(5, 0), Line(5, 10))
        coords = [v for command in path.commands for v in command.operands()]
        assert not any(math.isnan(v) for v in coords)

    @pytest.mark.parametrize(
        ("mode", "expected_y"),
        [
            (AlignMode.ASCENDER, (0, 12)),
            (AlignMode.DESCENDER, (12, 24)),
            (AlignMode.BASELINE, (7.2, 19.2)),
            (AlignMode.CENTER, (6, 18)),
        ],
    )
    def test_align_to_font(self, mode, expected_y):
        """Landmarks map the ascender to y = 0 and the descender to y = height."""
        path = IconPath().rect(3, 0, 18, 12).align_to_font(800, -200, mode)
        min_x, min_y, max_x, max_y = _bounds(path)
        assert (min_x, max_x) == (3, 21)
        assert (min_y, max_y) == pytest.approx(expected_y)

    def test_align_accepts_string(self):
        path = IconPath().rect(0, 0, 24, 12).align_to_font(800, -200, "descender")
        assert _bounds(path)[3] == pytest.approx(24)

    def test_transform_does_not_touch_clone(self):
        """Clones are independent of the original."""
        original = IconPath().rect(0, 0, 10, 10)
        copy = original.clone().translate(5, 5)
        assert _bounds(original) == (0, 0, 10, 10)
        assert _bounds(copy) == (5, 5, 15, 15)


class TestMeasurement:
    """Tests for bounds and centroid."""

    def test_bounds_of_empty_path(self):
        assert IconPath().bounds().is_empty

    def test_centroid(self):
        assert IconPath().rect(0, 0, 10, 10).centroid() == (5, 5)
        assert IconPath().centroid() is None


class TestExport:
    """Tests for canonical and font-space export."""

    def test_canonical_commands(self):
        path = IconPath().move_to(0, 0).horizontal_to(5).vertical_to(5).close()
        assert path.canonical_commands() == [Move(0, 0), Line(5, 0), Line(5, 5), Close()]

    def test_normalized_commands_reverse_wrong_outer(self):
        path = IconPath().move_to(0, 0).line_to(0, 24).line_to(24, 24).line_to(24, 0).close()
        normalized = path.normalized_commands()
        assert normalized[0] == Move(24, 0)

    def test_to_font_outline(self):
        outline = IconPath().rect(0, 0, 24, 24).to_font_outline(800, -200)
        assert outline[0].operator == "moveTo"
        assert outline[0].points[0] == pytest.approx((0, 800))
        assert outline[-1].operator == "closePath"

    def test_scaled_outline(self):
        """Scaling shrinks the outline around the em center."""
        outline = IconPath().rect(0, 0, 24, 24).scale(0.5).to_font_outline(800, -200)
        xs = [p[0] for i in outline for p in i.points]
        ys = [p[1] for i in outline for p in i.points]
        assert (min(xs), min(ys), max(xs), max(ys)) == pytest.approx((250, 50, 750, 550))

    def test_draw_into_pen(self):
        pen = RecordingPen()
        IconPath().rect(0, 0, 24, 24).draw(pen, 800, -200, WindingDirection.CLOCKWISE)
        assert pen.value[0][0] == "moveTo"
        assert pen.value[-1] == ("closePath", ())

    def test_to_path_data(self):
        path = IconPath().move_to(2, 2).horizontal_to(22).vertical_to(22).close()
        assert path.to_path_data() == "M 2 2 H 22 V 22 Z"
        assert path.to_path_data(canonical=True) == "M 2 2 L 22 2 L 22 22 Z"


class TestConstruction:
    """Tests for alternative constructors."""

    def test_from_path_data(self):
        path = IconPath.from_path_data("M2 2h20v20H2z", 24)
        assert _bounds(path) == (2, 2, 22, 22)
        assert path.to_path_data() == "M 2 2 H 22 V 22 H 2 Z"

    def test_from_invalid_path_data(self):
        with pytest.raises(PathDataError):
            IconPath.from_path_data("M2")

    def test_merge(self):
        """Merging concatenates commands without renormalizing."""
        a = IconPath().rect(0, 0, 2, 2)
        b = IconPath().rect(10, 10, 2, 2)
        merged = IconPath.merge([a, b])
        assert len(merged) == len(a) + len(b)
        assert _bounds(merged) == (0, 0, 12, 12)
        assert len(a) == 5


class TestFolderScenarios:
    """End-to-end layout scenarios on a 24 x 19 chamfered folder shape."""

    @pytest.fixture
    def folder(self) -> IconPath:
        return IconPath(24).rect(0, 0, 24, 19, corners={"tr": ChamferCorner(6, 6)})

    def test_center_in_grid(self, folder):
        assert _bounds(folder.center()) == (0, 2.5, 24, 21.5)

    @pytest.mark.parametrize(
        ("mode", "expected_y"),
        [
            ("ascender", (0, 19)),
            ("descender", (5, 24)),
            ("center", (2.5, 21.5)),
            ("baseline", (0.2, 19.2)),
        ],
    )
    def test_align(self, folder, mode, expected_y):
        min_x, min_y, max_x, max_y = _bounds(folder.align_to_font(800, -200, mode))
        assert (min_y, max_y) == pytest.approx(expected_y)

    def test_translate_inverse(self, folder):
        original = folder.commands
        assert folder.translate(3, -2).translate(-3, 2).commands == original

    def test_scale_inverse(self, folder):
        original = folder.commands
        assert folder.scale(2).scale(0.5).commands == original

    def test_bottom_middle_tenth_square(self):
        """A tenth-size square on the bottom edge sits on the descender."""
        path = IconPath().rect(0, 0, 24, 24).scale(0.1, pivot=(12, 24))
        outline = path.to_font_outline(800, -200)
        xs = [p[0] for i in outline for p in i.points]
        ys = [p[1] for i in outline for p in i.points]
        assert (min(xs), min(ys), max(xs), max(ys)) == pytest.approx((450, -200, 550, -100))
