"""Projection of design-space paths into font space.

The projector canonicalizes and winding-normalizes a command list and
maps every coordinate from the y-down design grid into y-up font units:

    font_x = x * (ascender - descender) / width
    font_y = ascender - y * (ascender - descender) / height

Design y = 0 lands on the ascender line and design y = height on the
descender line. There is no additional anchoring; use
IconPath.align_to_font beforehand to place a shape relative to the
baseline or descender.

The output is a list of DrawInstruction using fontTools pen operator
names, so it can be replayed into any fontTools segment pen.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from iconpath.core.canonical import canonicalize
from iconpath.core.winding import normalize_winding
from iconpath.domain import (
    Close,
    CubicCurve,
    Line,
    Move,
    PathCommand,
    QuadraticCurve,
    WindingDirection,
)


@dataclass(frozen=True, slots=True)
class DrawInstruction:
    """A single pen call in font units.

    Attributes:
        operator: Pen method name (moveTo, lineTo, qCurveTo, curveTo, closePath)
        points: Point arguments for the pen method
    """

    operator: str
    points: tuple[tuple[float, float], ...] = ()

    def to_recording(self) -> tuple[str, tuple[tuple[float, float], ...]]:
        """Convert to a RecordingPen-style (operator, points) tuple."""
        return (self.operator, self.points)


def project_to_font_space(
    commands: Iterable[PathCommand],
    width: float,
    height: float,
    ascender: float,
    descender: float,
    outer: WindingDirection = WindingDirection.CLOCKWISE,
) -> list[DrawInstruction]:
    """Project design-space commands into font-space draw instructions.

    Args:
        commands: Path commands in design space
        width: Design width of the path
        height: Design height of the path
        ascender: Font ascender in font units (e.g. 800)
        descender: Font descender in font units (e.g. -200)
        outer: Required winding of the outer contour

    Returns:
        One DrawInstruction per canonical command
    """
    em_height = ascender - descender
    factor_x = em_height / width
    factor_y = em_height / height

    def point(x: float, y: float) -> tuple[float, float]:
        return (x * factor_x, ascender - y * factor_y)

    canonical = normalize_winding(canonicalize(commands), height, outer)
    instructions: list[DrawInstruction] = []

    for command in canonical:
        if isinstance(command, Move):
            instructions.append(DrawInstruction("moveTo", (point(command.x, command.y),)))
        elif isinstance(command, Line):
            instructions.append(DrawInstruction("lineTo", (point(command.x, command.y),)))
        elif isinstance(command, QuadraticCurve):
            instructions.append(
                DrawInstruction(
                    "qCurveTo",
                    (point(command.x1, command.y1), point(command.x, command.y)),
                )
            )
        elif isinstance(command, CubicCurve):
            instructions.append(
                DrawInstruction(
                    "curveTo",
                    (
                        point(command.x1, command.y1),
                        point(command.x2, command.y2),
                        point(command.x, command.y),
                    ),
                )
            )
        elif isinstance(command, Close):
            instructions.append(DrawInstruction("closePath"))

    return instructions


def draw_instructions(instructions: Sequence[DrawInstruction], pen: Any) -> None:
    """Replay draw instructions into a fontTools segment pen.

    Contours that are never closed are terminated with endPath(), as the
    pen protocol requires every contour to be finished.

    Args:
        instructions: Output of project_to_font_space
        pen: Any object implementing the fontTools AbstractPen protocol
    """
    open_contour = False

    for instruction in instructions:
        if instruction.operator == "moveTo":
            if open_contour:
                pen.endPath()
            pen.moveTo(instruction.points[0])
            open_contour = True
        elif instruction.operator == "closePath":
            pen.closePath()
            open_contour = False
        else:
            getattr(pen, instruction.operator)(*instruction.points)

    if open_contour:
        pen.endPath()
