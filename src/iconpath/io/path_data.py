"""SVG path-data text parsing and serialization.

parse_path_data turns the text of an SVG `d` attribute into absolute path
commands; format_path_data writes commands back as space-delimited
absolute notation ("M 0 0 L 24 0 Z").

Commands (command : number of values : command characters):
    MoveTo:           2: Mm
    LineTo:           2: Ll   1: Hh(x)   1: Vv(y)
    CubicBezier:      6: Cc   4: Ss
    QuadraticBezier:  4: Qq   2: Tt
    ArcCurve:         7: Aa
    ClosePath:        0: Zz
"""

import re
from collections.abc import Iterable

from iconpath.core.arc import arc_to_cubic
from iconpath.domain import (
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
from iconpath.exceptions import PathDataError

SVG_CMDS = "MmLlHhVvCcSsQqTtAaZz"

OPERAND_COUNTS: dict[str, int] = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Q": 4,
    "T": 2,
    "A": 7,
    "Z": 0,
}

_SEGMENT_RE = re.compile(f"([{SVG_CMDS}])([^{SVG_CMDS}]*)")
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_FLAG_RE = re.compile(r"[01]")
_SEPARATOR_RE = re.compile(r"[\s,]*")


def _scan_operands(text: str, letter: str, raw: str) -> list[float]:
    """Read the numeric operands that follow one command letter.

    Arc flags may be written without separators ("a1 1 0 11 5 5").
    """
    values: list[float] = []
    is_arc = letter.upper() == "A"
    pos = 0

    while True:
        pos = _SEPARATOR_RE.match(text, pos).end()
        if pos >= len(text):
            break

        if is_arc and len(values) % 7 in (3, 4):
            match = _FLAG_RE.match(text, pos)
            if match is None:
                token = text[pos:].split()[0]
                raise PathDataError(raw, f"invalid arc flag {token!r} in '{letter}' command")
        else:
            match = _NUMBER_RE.match(text, pos)
            if match is None:
                token = text[pos:].split()[0]
                raise PathDataError(raw, f"non-numeric token {token!r} in '{letter}' command")

        values.append(float(match.group()))
        pos = match.end()

    return values


def _tokenize(raw: str) -> list[tuple[str, list[float]]]:
    """Split path data into (letter, operands) pairs and validate counts."""
    stripped = raw.strip()
    if not stripped:
        return []

    if stripped[0] not in SVG_CMDS:
        raise PathDataError(raw, "path data must start with a command letter")

    segments: list[tuple[str, list[float]]] = []
    for letter, text in _SEGMENT_RE.findall(stripped):
        values = _scan_operands(text, letter, raw)
        count = OPERAND_COUNTS[letter.upper()]

        if count == 0:
            if values:
                raise PathDataError(raw, f"'{letter}' takes no operands, got {len(values)}")
        elif not values or len(values) % count != 0:
            raise PathDataError(
                raw,
                f"'{letter}' expects a multiple of {count} operands, got {len(values)}",
            )

        segments.append((letter, values))

    return segments


def parse_path_data(raw: str) -> list[PathCommand]:
    """Parse SVG path data into absolute path commands.

    Relative commands are resolved against the current point, extra
    coordinate pairs after a move are treated as line-tos, and arcs are
    expanded into cubic curves. Nothing is returned unless the whole
    string parses.

    Args:
        raw: Path data, e.g. "M0 0h24v24H0z"

    Returns:
        List of absolute path commands

    Raises:
        PathDataError: On a wrong operand count, non-numeric token,
            invalid arc flag or leading garbage
    """
    commands: list[PathCommand] = []
    cx = cy = 0.0
    start_x = start_y = 0.0

    for letter, values in _tokenize(raw):
        upper = letter.upper()
        relative = letter != upper

        if upper == "Z":
            commands.append(Close())
            cx, cy = start_x, start_y
            continue

        count = OPERAND_COUNTS[upper]
        for index in range(0, len(values), count):
            v = values[index : index + count]
            ox, oy = (cx, cy) if relative else (0.0, 0.0)

            if upper == "M":
                x, y = ox + v[0], oy + v[1]
                if index == 0:
                    commands.append(Move(x, y))
                    start_x, start_y = x, y
                else:
                    commands.append(Line(x, y))
            elif upper == "L":
                x, y = ox + v[0], oy + v[1]
                commands.append(Line(x, y))
            elif upper == "H":
                x, y = ox + v[0], cy
                commands.append(HorizontalLine(x))
            elif upper == "V":
                x, y = cx, oy + v[0]
                commands.append(VerticalLine(y))
            elif upper == "C":
                x, y = ox + v[4], oy + v[5]
                commands.append(
                    CubicCurve(ox + v[0], oy + v[1], ox + v[2], oy + v[3], x, y)
                )
            elif upper == "S":
                x, y = ox + v[2], oy + v[3]
                commands.append(SmoothCubicCurve(ox + v[0], oy + v[1], x, y))
            elif upper == "Q":
                x, y = ox + v[2], oy + v[3]
                commands.append(QuadraticCurve(ox + v[0], oy + v[1], x, y))
            elif upper == "T":
                x, y = ox + v[0], oy + v[1]
                commands.append(SmoothQuadraticCurve(x, y))
            else:
                rx, ry, x_rotation, large_arc, sweep = v[:5]
                x, y = ox + v[5], oy + v[6]
                commands.extend(
                    arc_to_cubic(cx, cy, rx, ry, x_rotation, bool(large_arc), bool(sweep), x, y)
                )

            cx, cy = x, y

    return commands


def format_number(value: float, precision: int | None = None) -> str:
    """Format a coordinate in its shortest form.

    Examples:
        >>> format_number(24.0)
        '24'
        >>> format_number(2.5)
        '2.5'
        >>> format_number(1 / 3, 3)
        '0.333'
    """
    if precision is not None:
        value = round(value, precision)
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    if text == "-0":
        text = "0"
    return text


def format_path_data(commands: Iterable[PathCommand], precision: int | None = None) -> str:
    """Serialize commands as space-delimited absolute SVG path data.

    Args:
        commands: Path commands
        precision: Optional number of decimals to round to

    Returns:
        Path data string, e.g. "M 0 0 L 24 0 Z"
    """
    parts: list[str] = []
    for command in commands:
        parts.append(command.letter)
        parts.extend(format_number(v, precision) for v in command.operands())
    return " ".join(parts)
