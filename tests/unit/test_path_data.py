"""Unit tests for SVG path-data parsing and formatting."""

import pytest

from iconpath.domain import (
    Close,
    CubicCurve,
    HorizontalLine,
    Line,
    Move,
    QuadraticCurve,
    SmoothCubicCurve,
    SmoothQuadraticCurve,
    VerticalLine,
)
from iconpath.exceptions import PathDataError
from iconpath.io.path_data import format_number, format_path_data, parse_path_data


class TestParseAbsolute:
    """Tests for absolute commands."""

    def test_all_commands(self):
        commands = parse_path_data("M0 0 L1 1 H2 V3 Q4 4 5 5 T6 6 C7 7 8 8 9 9 S10 10 11 11 Z")
        assert commands == [
            Move(0, 0),
            Line(1, 1),
            HorizontalLine(2),
            VerticalLine(3),
            QuadraticCurve(4, 4, 5, 5),
            SmoothQuadraticCurve(6, 6),
            CubicCurve(7, 7, 8, 8, 9, 9),
            SmoothCubicCurve(10, 10, 11, 11),
            Close(),
        ]

    def test_implicit_lineto_after_move(self):
        """Extra pairs after M are line-tos."""
        assert parse_path_data("M0 0 10 0 10 10") == [Move(0, 0), Line(10, 0), Line(10, 10)]

    def test_repeated_operands(self):
        assert parse_path_data("M0 0 H1 2 3") == [
            Move(0, 0),
            HorizontalLine(1),
            HorizontalLine(2),
            HorizontalLine(3),
        ]

    def test_compact_numbers(self):
        """Signs, leading dots and exponents separate numbers."""
        assert parse_path_data("M.5-.5L1e1,2") == [Move(0.5, -0.5), Line(10, 2)]

    def test_empty(self):
        assert parse_path_data("") == []
        assert parse_path_data("   ") == []


class TestParseRelative:
    """Tests for relative commands."""

    def test_relative_lines(self):
        assert parse_path_data("m1 1 l2 0 0 2z") == [
            Move(1, 1),
            Line(3, 1),
            Line(3, 3),
            Close(),
        ]

    def test_relative_shorthands(self):
        assert parse_path_data("M2 2h20v20h-20z") == [
            Move(2, 2),
            HorizontalLine(22),
            VerticalLine(22),
            HorizontalLine(2),
            Close(),
        ]

    def test_relative_curves(self):
        commands = parse_path_data("M10 10 c1 1 2 2 3 3 s1 1 2 2 q1 1 2 2 t1 1")
        assert commands[1:] == [
            CubicCurve(11, 11, 12, 12, 13, 13),
            SmoothCubicCurve(14, 14, 15, 15),
            QuadraticCurve(16, 16, 17, 17),
            SmoothQuadraticCurve(18, 18),
        ]

    def test_relative_move_after_close(self):
        """After z the current point is the subpath start."""
        commands = parse_path_data("M1 1 L5 1 z m2 2 l1 0")
        assert commands[-2:] == [Move(3, 3), Line(4, 3)]


class TestParseArcs:
    """Tests for arc commands."""

    def test_arc_becomes_cubics(self):
        commands = parse_path_data("M0 0 A5 5 0 0 1 10 0")
        assert len(commands) == 3
        assert all(isinstance(c, CubicCurve) for c in commands[1:])
        assert (commands[-1].x, commands[-1].y) == (10, 0)

    def test_compact_arc_flags(self):
        """Flags may be written without separators."""
        assert parse_path_data("M0 0a5 5 0 0110 0") == parse_path_data("M0 0 A5 5 0 0 1 10 0")

    def test_degenerate_arc(self):
        """An arc to the current point adds nothing."""
        assert parse_path_data("M3 3 A5 5 0 0 1 3 3") == [Move(3, 3)]


class TestParseErrors:
    """Tests for malformed path data."""

    @pytest.mark.parametrize(
        ("raw", "message"),
        [
            ("M0", "multiple of 2"),
            ("M0 0 C1 1 2 2", "multiple of 6"),
            ("M0 0 L", "multiple of 2"),
            ("0 0 L1 1", "must start with a command"),
            ("M0 0 Lx 1", "non-numeric token"),
            ("M0 0 Z 1", "takes no operands"),
            ("M0 0 A1 1 0 2 0 5 5", "invalid arc flag"),
        ],
    )
    def test_rejected(self, raw, message):
        with pytest.raises(PathDataError, match=message):
            parse_path_data(raw)

    def test_error_carries_input(self):
        with pytest.raises(PathDataError) as exc_info:
            parse_path_data("M0")
        assert exc_info.value.path_data == "M0"


class TestFormat:
    """Tests for path-data output."""

    def test_format_path_data(self):
        text = format_path_data([Move(0, 0), Line(24, 0), HorizontalLine(3.5), Close()])
        assert text == "M 0 0 L 24 0 H 3.5 Z"

    def test_precision(self):
        assert format_path_data([Move(1 / 3, 2 / 3)], precision=2) == "M 0.33 0.67"

    def test_format_number(self):
        assert format_number(24.0) == "24"
        assert format_number(-0.0) == "0"
        assert format_number(-1.25) == "-1.25"
        assert format_number(-0.0001, 2) == "0"

    def test_reparse(self):
        """Formatted output parses back to the same commands."""
        commands = parse_path_data("M2 2q5 -3 10 0t10 0v8h-20z")
        assert parse_path_data(format_path_data(commands)) == commands
