"""Canonicalization of shorthand path commands.

Font outline formats only understand move, line, quadratic, cubic and
close. This module rewrites the SVG shorthands into that set:

- HorizontalLine / VerticalLine -> Line with the tracked other axis
- SmoothQuadraticCurve -> QuadraticCurve with a reflected control point
- SmoothCubicCurve -> CubicCurve with a reflected first control point
"""

from collections.abc import Iterable

from iconpath.domain import (
    CanonicalCommand,
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


def _reflect(
    control: tuple[float, float] | None, cx: float, cy: float
) -> tuple[float, float]:
    """Reflect control through (cx, cy); the current point if there is none."""
    if control is None:
        return (cx, cy)
    return (2 * cx - control[0], 2 * cy - control[1])


def canonicalize(commands: Iterable[PathCommand]) -> list[CanonicalCommand]:
    """Rewrite shorthand commands into explicit absolute commands.

    The last quadratic and cubic control points are remembered only while
    consecutive commands are of the matching curve kind; any other command
    (and every Move) forgets them.

    Args:
        commands: Path commands in drawing order

    Returns:
        Commands restricted to Move, Line, QuadraticCurve, CubicCurve, Close
    """
    out: list[CanonicalCommand] = []

    cx = cy = 0.0
    start_x = start_y = 0.0
    last_quad: tuple[float, float] | None = None
    last_cubic: tuple[float, float] | None = None

    for command in commands:
        if isinstance(command, Move):
            cx, cy = command.x, command.y
            start_x, start_y = cx, cy
            out.append(command)
            last_quad = last_cubic = None

        elif isinstance(command, Line):
            cx, cy = command.x, command.y
            out.append(command)
            last_quad = last_cubic = None

        elif isinstance(command, HorizontalLine):
            cx = command.x
            out.append(Line(cx, cy))
            last_quad = last_cubic = None

        elif isinstance(command, VerticalLine):
            cy = command.y
            out.append(Line(cx, cy))
            last_quad = last_cubic = None

        elif isinstance(command, QuadraticCurve):
            out.append(command)
            cx, cy = command.x, command.y
            last_quad = (command.x1, command.y1)
            last_cubic = None

        elif isinstance(command, SmoothQuadraticCurve):
            control = _reflect(last_quad, cx, cy)
            out.append(QuadraticCurve(control[0], control[1], command.x, command.y))
            cx, cy = command.x, command.y
            last_quad = control
            last_cubic = None

        elif isinstance(command, CubicCurve):
            out.append(command)
            cx, cy = command.x, command.y
            last_cubic = (command.x2, command.y2)
            last_quad = None

        elif isinstance(command, SmoothCubicCurve):
            control = _reflect(last_cubic, cx, cy)
            out.append(
                CubicCurve(
                    control[0], control[1], command.x2, command.y2, command.x, command.y
                )
            )
            cx, cy = command.x, command.y
            last_cubic = (command.x2, command.y2)
            last_quad = None

        elif isinstance(command, Close):
            out.append(command)
            cx, cy = start_x, start_y
            last_quad = last_cubic = None

        else:
            raise TypeError(f"Unsupported path command: {command!r}")

    return out
