"""Coordinate transforms over path commands.

All transforms are expressed as a point mapping ``fn(x, y) -> (x, y)``
applied by map_commands, which returns a fresh command list and never
mutates its input. The factories below build the mappings used by
IconPath: scale, translate, rotate and mirror.
"""

import math
from collections.abc import Callable, Iterable

from iconpath.domain import (
    Bounds,
    Close,
    CubicCurve,
    HorizontalLine,
    Line,
    Move,
    PathCommand,
    QuadraticCurve,
    SmoothCubicCurve,
    SmoothQuadraticCurve,
    VerticalLine,
)

PointMapper = Callable[[float, float], tuple[float, float]]


def map_command(command: PathCommand, fn: PointMapper) -> PathCommand:
    """Rewrite every coordinate field of a single command.

    HorizontalLine and VerticalLine are mapped along their own axis only,
    with the other axis passed as 0 and discarded, so they stay
    single-axis commands.

    Args:
        command: Command to rewrite
        fn: Point mapping

    Returns:
        New command of the same type
    """
    if isinstance(command, Move):
        return Move(*fn(command.x, command.y))
    if isinstance(command, Line):
        return Line(*fn(command.x, command.y))
    if isinstance(command, HorizontalLine):
        return HorizontalLine(fn(command.x, 0.0)[0])
    if isinstance(command, VerticalLine):
        return VerticalLine(fn(0.0, command.y)[1])
    if isinstance(command, QuadraticCurve):
        return QuadraticCurve(*fn(command.x1, command.y1), *fn(command.x, command.y))
    if isinstance(command, SmoothQuadraticCurve):
        return SmoothQuadraticCurve(*fn(command.x, command.y))
    if isinstance(command, CubicCurve):
        return CubicCurve(
            *fn(command.x1, command.y1),
            *fn(command.x2, command.y2),
            *fn(command.x, command.y),
        )
    if isinstance(command, SmoothCubicCurve):
        return SmoothCubicCurve(*fn(command.x2, command.y2), *fn(command.x, command.y))
    if isinstance(command, Close):
        return command
    raise TypeError(f"Unsupported path command: {command!r}")


def map_commands(commands: Iterable[PathCommand], fn: PointMapper) -> list[PathCommand]:
    """Apply a point mapping to every command.

    Args:
        commands: Commands to rewrite
        fn: Point mapping

    Returns:
        New list of rewritten commands
    """
    return [map_command(command, fn) for command in commands]


def scaling(sx: float, sy: float, pivot: tuple[float, float]) -> PointMapper:
    """Scale by (sx, sy) about pivot."""
    px, py = pivot

    def fn(x: float, y: float) -> tuple[float, float]:
        return ((x - px) * sx + px, (y - py) * sy + py)

    return fn


def translation(dx: float, dy: float) -> PointMapper:
    """Shift by (dx, dy)."""

    def fn(x: float, y: float) -> tuple[float, float]:
        return (x + dx, y + dy)

    return fn


def rotation(angle: float, pivot: tuple[float, float] = (0.0, 0.0)) -> PointMapper:
    """Rotate by angle (radians) about pivot."""
    px, py = pivot
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)

    def fn(x: float, y: float) -> tuple[float, float]:
        dx = x - px
        dy = y - py
        return (px + dx * cos_a - dy * sin_a, py + dx * sin_a + dy * cos_a)

    return fn


def mirror_x(ref: float) -> PointMapper:
    """Mirror horizontally: x -> ref - x."""

    def fn(x: float, y: float) -> tuple[float, float]:
        return (ref - x, y)

    return fn


def mirror_y(ref: float) -> PointMapper:
    """Mirror vertically: y -> ref - y."""

    def fn(x: float, y: float) -> tuple[float, float]:
        return (x, ref - y)

    return fn


def centering_offset(
    shape: Bounds, x: float, y: float, width: float, height: float
) -> tuple[float, float]:
    """Offset that centers shape inside the box (x, y, width, height).

    Args:
        shape: Current bounds of the shape
        x: Target box left
        y: Target box top
        width: Target box width
        height: Target box height

    Returns:
        (dx, dy) translation
    """
    dx = x + (width - shape.width) / 2 - shape.min_x
    dy = y + (height - shape.height) / 2 - shape.min_y
    return dx, dy


def font_y_to_design(font_y: float, ascender: float, descender: float, height: float) -> float:
    """Map a font-space Y value into y-down design space.

    The ascender maps to 0 and the descender maps to height.
    """
    return height - ((font_y - descender) / (ascender - descender)) * height
