"""Domain models for iconpath.

This module contains the value types the path engine operates on. All
models are immutable frozen dataclasses, so a command list can be copied
cheaply and shared between paths without aliasing surprises.

Key classes:
- Move, Line, HorizontalLine, VerticalLine, QuadraticCurve,
  SmoothQuadraticCurve, CubicCurve, SmoothCubicCurve, Close: path commands
- Bounds: axis-aligned bounding box
- WindingDirection: contour winding direction
- AlignMode: font landmark for vertical alignment
- SharpCorner, RoundedCorner, ChamferCorner: rectangle corner styles
"""

from iconpath.domain.commands import (
    COMMAND_TYPES,
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
    command_from_dict,
    command_to_dict,
)
from iconpath.domain.geometry import AlignMode, Bounds, WindingDirection
from iconpath.domain.shapes import (
    ChamferCorner,
    Corner,
    CornerPosition,
    RoundedCorner,
    SharpCorner,
    corner_points,
)

__all__: list[str] = [
    # Enums
    "AlignMode",
    "CornerPosition",
    "WindingDirection",
    # Commands
    "COMMAND_TYPES",
    "CanonicalCommand",
    "Close",
    "CubicCurve",
    "HorizontalLine",
    "Line",
    "Move",
    "PathCommand",
    "QuadraticCurve",
    "SmoothCubicCurve",
    "SmoothQuadraticCurve",
    "VerticalLine",
    "command_from_dict",
    "command_to_dict",
    # Geometry
    "Bounds",
    # Shapes
    "ChamferCorner",
    "Corner",
    "RoundedCorner",
    "SharpCorner",
    "corner_points",
]
