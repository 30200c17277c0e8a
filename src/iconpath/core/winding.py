"""Contour winding normalization for font export.

Font rasterizers use the winding direction of each contour to tell
filled areas from holes. This module splits canonical commands into
subpaths, measures each subpath's signed area in font orientation
(y axis up) and reverses subpaths whose direction is wrong:

- the first subpath (outer contour) gets the requested winding
- every later subpath (hole) gets the opposite winding

All functions are pure and return new command lists.
"""

from collections.abc import Iterable, Sequence

from iconpath.domain import (
    CanonicalCommand,
    Close,
    CubicCurve,
    Line,
    Move,
    QuadraticCurve,
    WindingDirection,
)


def split_subpaths(commands: Iterable[CanonicalCommand]) -> list[list[CanonicalCommand]]:
    """Split canonical commands into subpaths.

    A Move starts a new subpath and a Close ends the current one. A run of
    drawing commands that does not begin with a Move (e.g. after a Close)
    is given a Move at the current pen position. Runs that draw nothing,
    such as a stray Close, are dropped.

    Args:
        commands: Canonical commands

    Returns:
        List of subpaths, each starting with a Move
    """
    subpaths: list[list[CanonicalCommand]] = []
    current: list[CanonicalCommand] = []
    cx = cy = 0.0
    start_x = start_y = 0.0

    for command in commands:
        if isinstance(command, Move):
            if current:
                subpaths.append(current)
            current = [command]
            cx, cy = command.x, command.y
            start_x, start_y = cx, cy

        elif isinstance(command, Close):
            if current:
                current.append(command)
                subpaths.append(current)
                current = []
            cx, cy = start_x, start_y

        else:
            if not current:
                current = [Move(cx, cy)]
                start_x, start_y = cx, cy
            current.append(command)
            cx, cy = command.x, command.y

    if current:
        subpaths.append(current)

    return subpaths


def _vertices(subpath: Sequence[CanonicalCommand]) -> list[tuple[float, float]]:
    """Endpoint of every command that has one, in order."""
    return [(c.x, c.y) for c in subpath if not isinstance(c, Close)]


def signed_area_font_space(subpath: Sequence[CanonicalCommand], height: float) -> float:
    """Signed polygon area of a subpath after flipping Y into font space.

    Only endpoints are used; control points are ignored.

    Args:
        subpath: Canonical commands of one subpath
        height: Design height used for the flip (y -> height - y)

    Returns:
        Signed area: negative = clockwise, positive = counter-clockwise
    """
    points = [(x, height - y) for x, y in _vertices(subpath)]
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i][0] * points[j][1]
        area -= points[j][0] * points[i][1]

    return area / 2.0


def subpath_winding(
    subpath: Sequence[CanonicalCommand], height: float
) -> WindingDirection | None:
    """Winding direction of a subpath in font space.

    Returns:
        Direction, or None for a degenerate (zero-area) subpath
    """
    area = signed_area_font_space(subpath, height)
    if area < 0:
        return WindingDirection.CLOCKWISE
    if area > 0:
        return WindingDirection.COUNTER_CLOCKWISE
    return None


def reverse_subpath(subpath: Sequence[CanonicalCommand]) -> list[CanonicalCommand]:
    """Reverse the drawing direction of one subpath.

    The result starts at the original final vertex and visits the earlier
    vertices backwards. Quadratic controls are kept, cubic controls are
    swapped, and a trailing Close is preserved.

    Args:
        subpath: Canonical commands of one subpath, starting with a Move

    Returns:
        Reversed subpath
    """
    closed = bool(subpath) and isinstance(subpath[-1], Close)
    segments = [c for c in subpath if not isinstance(c, Close)]
    if not segments:
        return list(subpath)

    vertices = [(c.x, c.y) for c in segments]
    last_x, last_y = vertices[-1]
    reversed_path: list[CanonicalCommand] = [Move(last_x, last_y)]

    for i in range(len(segments) - 1, 0, -1):
        command = segments[i]
        px, py = vertices[i - 1]
        if isinstance(command, QuadraticCurve):
            reversed_path.append(QuadraticCurve(command.x1, command.y1, px, py))
        elif isinstance(command, CubicCurve):
            reversed_path.append(
                CubicCurve(command.x2, command.y2, command.x1, command.y1, px, py)
            )
        else:
            # Line, or a Move in the middle of an unsplit run
            reversed_path.append(Line(px, py))

    if closed:
        reversed_path.append(Close())

    return reversed_path


def normalize_winding(
    commands: Iterable[CanonicalCommand],
    height: float,
    outer: WindingDirection = WindingDirection.CLOCKWISE,
) -> list[CanonicalCommand]:
    """Normalize the winding of every subpath for font export.

    Zero-area subpaths have no direction and are left as they are, which
    makes normalizing an already normalized outline a no-op.

    Args:
        commands: Canonical commands
        height: Design height used for the Y flip
        outer: Required winding of the first subpath; holes get the opposite

    Returns:
        New command list with normalized winding
    """
    normalized: list[CanonicalCommand] = []

    for index, subpath in enumerate(split_subpaths(commands)):
        required = outer if index == 0 else outer.opposite()
        observed = subpath_winding(subpath, height)

        if observed is not None and observed is not required:
            normalized.extend(reverse_subpath(subpath))
        else:
            normalized.extend(subpath)

    return normalized
