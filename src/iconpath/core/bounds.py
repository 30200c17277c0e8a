"""Bounding box and centroid over path commands.

Every coordinate-bearing field is taken into account, control points
included, since they may protrude beyond the endpoints.
"""

import math
from collections.abc import Iterable

from iconpath.domain import (
    Bounds,
    Close,
    CubicCurve,
    HorizontalLine,
    PathCommand,
    QuadraticCurve,
    SmoothCubicCurve,
    VerticalLine,
)


def command_coordinates(command: PathCommand) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """Split a command's fields into X-like and Y-like coordinates.

    Args:
        command: Any path command

    Returns:
        Tuple of (xs, ys)
    """
    if isinstance(command, Close):
        return (), ()
    if isinstance(command, HorizontalLine):
        return (command.x,), ()
    if isinstance(command, VerticalLine):
        return (), (command.y,)
    if isinstance(command, QuadraticCurve):
        return (command.x1, command.x), (command.y1, command.y)
    if isinstance(command, CubicCurve):
        return (command.x1, command.x2, command.x), (command.y1, command.y2, command.y)
    if isinstance(command, SmoothCubicCurve):
        return (command.x2, command.x), (command.y2, command.y)
    # Move, Line, SmoothQuadraticCurve
    return (command.x,), (command.y,)


def compute_bounds(commands: Iterable[PathCommand]) -> Bounds:
    """Compute the axis-aligned bounding box of a command list.

    Args:
        commands: Path commands

    Returns:
        Bounds covering every coordinate, or Bounds.empty() if there are none.
        A NaN coordinate makes the bounds on its axis NaN.
    """
    empty = Bounds.empty()
    min_x, min_y, max_x, max_y = empty.to_tuple()

    for command in commands:
        xs, ys = command_coordinates(command)
        for x in xs:
            if math.isnan(x) or x < min_x:
                min_x = x
            if math.isnan(x) or x > max_x:
                max_x = x
        for y in ys:
            if math.isnan(y) or y < min_y:
                min_y = y
            if math.isnan(y) or y > max_y:
                max_y = y

    return Bounds(min_x, min_y, max_x, max_y)


def centroid(commands: Iterable[PathCommand]) -> tuple[float, float] | None:
    """Mean of all X fields and of all Y fields.

    Args:
        commands: Path commands

    Returns:
        (mean_x, mean_y), or None if either axis has no coordinates
    """
    all_xs: list[float] = []
    all_ys: list[float] = []
    for command in commands:
        xs, ys = command_coordinates(command)
        all_xs.extend(xs)
        all_ys.extend(ys)

    if not all_xs or not all_ys:
        return None

    return (sum(all_xs) / len(all_xs), sum(all_ys) / len(all_ys))
