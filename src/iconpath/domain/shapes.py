"""Corner descriptions for rectangle helpers."""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class CornerPosition(str, Enum):
    """Rectangle corner, named in y-down design space."""

    TOP_LEFT = "tl"
    TOP_RIGHT = "tr"
    BOTTOM_RIGHT = "br"
    BOTTOM_LEFT = "bl"


@dataclass(frozen=True, slots=True)
class SharpCorner:
    """Square corner."""


@dataclass(frozen=True, slots=True)
class RoundedCorner:
    """Elliptical corner with radii rx, ry."""

    rx: float
    ry: float


@dataclass(frozen=True, slots=True)
class ChamferCorner:
    """Corner cut by a straight line, inset rx horizontally and ry vertically."""

    rx: float
    ry: float


Corner = Union[SharpCorner, RoundedCorner, ChamferCorner]


def corner_points(
    position: CornerPosition, x: float, y: float, rx: float, ry: float
) -> tuple[tuple[float, float], tuple[float, float]]:
    """Entry and exit points of a corner traversed clockwise (tl, tr, br, bl).

    Args:
        position: Which rectangle corner (x, y) is
        x: Corner vertex X
        y: Corner vertex Y
        rx: Horizontal inset
        ry: Vertical inset

    Returns:
        Tuple of (entry, exit) points
    """
    position = CornerPosition(position)
    if position is CornerPosition.TOP_LEFT:
        return (x, y + ry), (x + rx, y)
    if position is CornerPosition.TOP_RIGHT:
        return (x - rx, y), (x, y + ry)
    if position is CornerPosition.BOTTOM_RIGHT:
        return (x, y - ry), (x - rx, y)
    return (x + rx, y), (x, y - ry)
