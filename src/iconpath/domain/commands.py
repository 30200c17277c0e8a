"""Path command vocabulary.

This module defines the closed set of drawing commands a path is made of.
Each command is an immutable dataclass carrying absolute design-space
coordinates:

- Move, Line: start a subpath / draw a straight segment to (x, y)
- HorizontalLine, VerticalLine: single-axis straight segments
- QuadraticCurve, SmoothQuadraticCurve: quadratic Bezier segments
- CubicCurve, SmoothCubicCurve: cubic Bezier segments
- Close: close the current subpath (no payload)

Commands never store relative coordinates and elliptical arcs are never
stored; arcs are expanded into CubicCurve segments when they are drawn.
"""

from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Union


@dataclass(frozen=True, slots=True)
class Move:
    """Start a new subpath at (x, y)."""

    letter: ClassVar[str] = "M"

    x: float
    y: float

    def operands(self) -> tuple[float, ...]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Line:
    """Straight segment from the current point to (x, y)."""

    letter: ClassVar[str] = "L"

    x: float
    y: float

    def operands(self) -> tuple[float, ...]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class HorizontalLine:
    """Horizontal segment to x; y stays at the current point's y."""

    letter: ClassVar[str] = "H"

    x: float

    def operands(self) -> tuple[float, ...]:
        return (self.x,)


@dataclass(frozen=True, slots=True)
class VerticalLine:
    """Vertical segment to y; x stays at the current point's x."""

    letter: ClassVar[str] = "V"

    y: float

    def operands(self) -> tuple[float, ...]:
        return (self.y,)


@dataclass(frozen=True, slots=True)
class QuadraticCurve:
    """Quadratic Bezier segment.

    Attributes:
        x1: Control point X
        y1: Control point Y
        x: End point X
        y: End point Y
    """

    letter: ClassVar[str] = "Q"

    x1: float
    y1: float
    x: float
    y: float

    def operands(self) -> tuple[float, ...]:
        return (self.x1, self.y1, self.x, self.y)


@dataclass(frozen=True, slots=True)
class SmoothQuadraticCurve:
    """Quadratic segment whose control point reflects the previous one."""

    letter: ClassVar[str] = "T"

    x: float
    y: float

    def operands(self) -> tuple[float, ...]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class CubicCurve:
    """Cubic Bezier segment.

    Attributes:
        x1: First control point X
        y1: First control point Y
        x2: Second control point X
        y2: Second control point Y
        x: End point X
        y: End point Y
    """

    letter: ClassVar[str] = "C"

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float

    def operands(self) -> tuple[float, ...]:
        return (self.x1, self.y1, self.x2, self.y2, self.x, self.y)


@dataclass(frozen=True, slots=True)
class SmoothCubicCurve:
    """Cubic segment whose first control point reflects the previous one."""

    letter: ClassVar[str] = "S"

    x2: float
    y2: float
    x: float
    y: float

    def operands(self) -> tuple[float, ...]:
        return (self.x2, self.y2, self.x, self.y)


@dataclass(frozen=True, slots=True)
class Close:
    """Close the current subpath back to its starting Move."""

    letter: ClassVar[str] = "Z"

    def operands(self) -> tuple[float, ...]:
        return ()


PathCommand = Union[
    Move,
    Line,
    HorizontalLine,
    VerticalLine,
    QuadraticCurve,
    SmoothQuadraticCurve,
    CubicCurve,
    SmoothCubicCurve,
    Close,
]

# The subset accepted by font outline formats
CanonicalCommand = Union[Move, Line, QuadraticCurve, CubicCurve, Close]

COMMAND_TYPES: dict[str, type] = {
    cls.letter: cls
    for cls in (
        Move,
        Line,
        HorizontalLine,
        VerticalLine,
        QuadraticCurve,
        SmoothQuadraticCurve,
        CubicCurve,
        SmoothCubicCurve,
        Close,
    )
}


def command_to_dict(command: PathCommand) -> dict[str, Any]:
    """Serialize a command to a plain dictionary.

    Args:
        command: Command to serialize

    Returns:
        Dictionary with a "type" letter and the command's fields
    """
    return {"type": command.letter, **asdict(command)}


def command_from_dict(data: dict[str, Any]) -> PathCommand:
    """Deserialize a command from a dictionary.

    Args:
        data: Dictionary produced by command_to_dict

    Returns:
        Command instance

    Raises:
        ValueError: If the type letter is unknown
    """
    fields = dict(data)
    letter = fields.pop("type")
    try:
        cls = COMMAND_TYPES[letter]
    except KeyError:
        raise ValueError(f"Unknown path command type: {letter!r}") from None
    return cls(**fields)
