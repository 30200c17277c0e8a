"""Geometric value types shared by the path engine.

- Bounds: axis-aligned bounding box with an explicit empty sentinel
- WindingDirection: contour winding direction
- AlignMode: vertical landmark used when aligning a path to font metrics
"""

import math
from dataclasses import dataclass
from enum import Enum, auto


class WindingDirection(Enum):
    """Contour winding direction.

    Measured in font space (y axis pointing up):
    - TrueType outlines wind outer contours clockwise
    - PostScript/CFF outlines wind outer contours counter-clockwise

    Holes always wind opposite to the outer contour.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()

    def opposite(self) -> "WindingDirection":
        """Return the other winding direction."""
        if self is WindingDirection.CLOCKWISE:
            return WindingDirection.COUNTER_CLOCKWISE
        return WindingDirection.CLOCKWISE


class AlignMode(str, Enum):
    """Font landmark a path is aligned to."""

    BASELINE = "baseline"
    ASCENDER = "ascender"
    DESCENDER = "descender"
    CENTER = "center"


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned bounding box.

    An empty box has min = +inf and max = -inf on both axes, so that
    any real coordinate widens it.

    Attributes:
        min_x: Smallest X coordinate
        min_y: Smallest Y coordinate
        max_x: Largest X coordinate
        max_y: Largest Y coordinate
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def empty(cls) -> "Bounds":
        """Return the empty sentinel box."""
        return cls(math.inf, math.inf, -math.inf, -math.inf)

    @property
    def is_empty(self) -> bool:
        """True if no coordinate has been collected."""
        return self.min_x > self.max_x or self.min_y > self.max_y

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> tuple[float, float]:
        """Midpoint of the box."""
        return ((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y)."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)
