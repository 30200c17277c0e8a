"""Chainable path builder for icon glyph outlines.

IconPath owns an ordered list of path commands together with the design
grid (width x height, commonly 24 x 24) the path was authored in. It
provides:

- Fluent append operations (move, line, curves, arcs, close) that return
  the path itself for chaining
- Rectangle and corner helpers
- Geometric transforms (scale, translate, rotate, flip, center, fit,
  align_to_font) that replace the whole command list with a mapped copy
- Export into font space via the projector

Example:
    path = (
        IconPath(24)
        .move_to(0, 0)
        .line_to(10, 0)
        .line_to(10, 10)
        .close()
        .scale(2)
        .center()
    )
"""

from collections.abc import Iterable
from typing import Any

from iconpath.core.arc import arc_to_cubic
from iconpath.core.bounds import centroid, compute_bounds
from iconpath.core.canonical import canonicalize
from iconpath.core.projector import DrawInstruction, draw_instructions, project_to_font_space
from iconpath.core.transform import (
    PointMapper,
    centering_offset,
    font_y_to_design,
    map_commands,
    mirror_x,
    mirror_y,
    rotation,
    scaling,
    translation,
)
from iconpath.core.winding import normalize_winding
from iconpath.domain import (
    AlignMode,
    Bounds,
    CanonicalCommand,
    ChamferCorner,
    Close,
    Corner,
    CornerPosition,
    CubicCurve,
    HorizontalLine,
    Line,
    Move,
    PathCommand,
    QuadraticCurve,
    RoundedCorner,
    SharpCorner,
    SmoothCubicCurve,
    SmoothQuadraticCurve,
    VerticalLine,
    WindingDirection,
    corner_points,
)

DEFAULT_DESIGN_SIZE = 24


class IconPath:
    """Mutable, single-owner builder over a list of path commands.

    Builder methods append and return self. Transform methods compute a
    complete mapped copy of the command list and swap it in, so a path is
    never left partially transformed.

    Attributes:
        width: Design width of the coordinate grid
        height: Design height of the coordinate grid
    """

    def __init__(
        self,
        width: float = DEFAULT_DESIGN_SIZE,
        height: float | None = None,
        commands: Iterable[PathCommand] | None = None,
    ) -> None:
        """Initialize the path.

        Args:
            width: Design width (default 24)
            height: Design height (defaults to width)
            commands: Optional initial commands
        """
        self.width = width
        self.height = width if height is None else height
        self._commands: list[PathCommand] = list(commands) if commands else []

    def __repr__(self) -> str:
        return (
            f"IconPath(width={self.width!r}, height={self.height!r}, "
            f"commands={len(self._commands)})"
        )

    def __len__(self) -> int:
        return len(self._commands)

    @property
    def commands(self) -> tuple[PathCommand, ...]:
        """Snapshot of the command list."""
        return tuple(self._commands)

    def _append(self, command: PathCommand) -> "IconPath":
        self._commands.append(command)
        return self

    def _apply(self, fn: PointMapper) -> "IconPath":
        self._commands = map_commands(self._commands, fn)
        return self

    # Builder operations

    def move_to(self, x: float, y: float) -> "IconPath":
        """Start a new subpath at (x, y)."""
        return self._append(Move(x, y))

    def line_to(self, x: float, y: float) -> "IconPath":
        """Draw a straight line to (x, y)."""
        return self._append(Line(x, y))

    def horizontal_to(self, x: float) -> "IconPath":
        """Draw a horizontal line to x."""
        return self._append(HorizontalLine(x))

    def vertical_to(self, y: float) -> "IconPath":
        """Draw a vertical line to y."""
        return self._append(VerticalLine(y))

    def quad_to(self, x1: float, y1: float, x: float, y: float) -> "IconPath":
        """Draw a quadratic curve with control (x1, y1) to (x, y)."""
        return self._append(QuadraticCurve(x1, y1, x, y))

    def curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> "IconPath":
        """Draw a cubic curve with controls (x1, y1), (x2, y2) to (x, y)."""
        return self._append(CubicCurve(x1, y1, x2, y2, x, y))

    def smooth_quad_to(self, x: float, y: float) -> "IconPath":
        """Draw a quadratic curve reflecting the previous control point."""
        return self._append(SmoothQuadraticCurve(x, y))

    def smooth_curve_to(self, x2: float, y2: float, x: float, y: float) -> "IconPath":
        """Draw a cubic curve reflecting the previous second control point."""
        return self._append(SmoothCubicCurve(x2, y2, x, y))

    def arc_to(
        self,
        rx: float,
        ry: float,
        x_rotation: float,
        large_arc: bool,
        sweep: bool,
        x: float,
        y: float,
    ) -> "IconPath":
        """Draw an SVG elliptical arc from the current point to (x, y).

        The arc is stored as its cubic approximation.

        Args:
            rx: Ellipse X radius
            ry: Ellipse Y radius
            x_rotation: X axis rotation in degrees
            large_arc: Take the larger of the two candidate arcs
            sweep: Traverse in the positive-angle direction
            x: End point X
            y: End point Y
        """
        cx, cy = self.current_point()
        self._commands.extend(
            arc_to_cubic(cx, cy, rx, ry, x_rotation, bool(large_arc), bool(sweep), x, y)
        )
        return self

    def close(self) -> "IconPath":
        """Close the current subpath."""
        return self._append(Close())

    # SVG letter aliases
    M = move_to
    L = line_to
    H = horizontal_to
    V = vertical_to
    Q = quad_to
    C = curve_to
    T = smooth_quad_to
    S = smooth_curve_to
    A = arc_to
    Z = close

    def current_point(self) -> tuple[float, float]:
        """Pen position after replaying every command.

        Returns:
            (x, y); (0, 0) for an empty path
        """
        x = y = 0.0
        start_x = start_y = 0.0

        for command in self._commands:
            if isinstance(command, Move):
                x, y = command.x, command.y
                start_x, start_y = x, y
            elif isinstance(command, HorizontalLine):
                x = command.x
            elif isinstance(command, VerticalLine):
                y = command.y
            elif isinstance(command, Close):
                x, y = start_x, start_y
            else:
                x, y = command.x, command.y

        return (x, y)

    # Shape helpers

    def sharp_corner(self, x: float, y: float) -> "IconPath":
        """Draw a line to the corner vertex (x, y)."""
        return self.line_to(x, y)

    def rounded_corner(
        self, position: CornerPosition | str, x: float, y: float, rx: float, ry: float
    ) -> "IconPath":
        """Draw a rounded corner at vertex (x, y).

        Draws a line to the corner's entry point followed by an elliptical
        arc to its exit point. Corners assume clockwise traversal in y-down
        design space (tl -> tr -> br -> bl).

        Args:
            position: Corner position ("tl", "tr", "br" or "bl")
            x: Corner vertex X
            y: Corner vertex Y
            rx: Horizontal radius
            ry: Vertical radius
        """
        (ex, ey), (xx, xy) = corner_points(CornerPosition(position), x, y, rx, ry)
        self.line_to(ex, ey)
        return self.arc_to(rx, ry, 0, False, True, xx, xy)

    def chamfer_corner(
        self, position: CornerPosition | str, x: float, y: float, rx: float, ry: float
    ) -> "IconPath":
        """Draw a chamfered corner at vertex (x, y), cut rx by ry."""
        (ex, ey), (xx, xy) = corner_points(CornerPosition(position), x, y, rx, ry)
        return self.line_to(ex, ey).line_to(xx, xy)

    def corner(
        self, position: CornerPosition | str, x: float, y: float, corner: Corner
    ) -> "IconPath":
        """Draw a corner of any style at vertex (x, y)."""
        if isinstance(corner, RoundedCorner):
            return self.rounded_corner(position, x, y, corner.rx, corner.ry)
        if isinstance(corner, ChamferCorner):
            return self.chamfer_corner(position, x, y, corner.rx, corner.ry)
        return self.sharp_corner(x, y)

    def rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        rx: float = 0.0,
        ry: float | None = None,
        corners: dict[CornerPosition | str, Corner] | None = None,
    ) -> "IconPath":
        """Draw a closed rectangle as a new subpath.

        The rectangle is traversed clockwise in design space, starting at
        the top-left corner's exit point. Corners not listed in `corners`
        are rounded by rx/ry when those are non-zero, sharp otherwise.

        Args:
            x: Left edge
            y: Top edge
            width: Rectangle width
            height: Rectangle height
            rx: Default horizontal corner radius
            ry: Default vertical corner radius (defaults to rx)
            corners: Per-corner overrides keyed by position
        """
        ry = rx if ry is None else ry
        default: Corner = RoundedCorner(rx, ry) if rx and ry else SharpCorner()
        styles = {CornerPosition(k): v for k, v in (corners or {}).items()}

        vertices = [
            (CornerPosition.TOP_LEFT, x, y),
            (CornerPosition.TOP_RIGHT, x + width, y),
            (CornerPosition.BOTTOM_RIGHT, x + width, y + height),
            (CornerPosition.BOTTOM_LEFT, x, y + height),
        ]

        tl_position, tl_x, tl_y = vertices[0]
        tl_style = styles.get(tl_position, default)
        if isinstance(tl_style, SharpCorner):
            self.move_to(tl_x, tl_y)
        else:
            _, (sx, sy) = corner_points(tl_position, tl_x, tl_y, tl_style.rx, tl_style.ry)
            self.move_to(sx, sy)

        for position, vx, vy in vertices[1:]:
            self.corner(position, vx, vy, styles.get(position, default))

        if not isinstance(tl_style, SharpCorner):
            self.corner(tl_position, tl_x, tl_y, tl_style)

        return self.close()

    # Measurement

    def bounds(self) -> Bounds:
        """Bounding box over every coordinate, control points included."""
        return compute_bounds(self._commands)

    def centroid(self) -> tuple[float, float] | None:
        """Mean of all coordinates, or None for an empty path."""
        return centroid(self._commands)

    # Transforms

    def scale(
        self,
        sx: float,
        sy: float | None = None,
        pivot: tuple[float, float] | None = None,
    ) -> "IconPath":
        """Scale about pivot (default: center of the design grid).

        Args:
            sx: Horizontal factor
            sy: Vertical factor (defaults to sx)
            pivot: Fixed point of the scaling
        """
        if sy is None:
            sy = sx
        if pivot is None:
            pivot = (self.width / 2, self.height / 2)
        return self._apply(scaling(sx, sy, pivot))

    def translate(self, dx: float, dy: float) -> "IconPath":
        """Shift every coordinate by (dx, dy)."""
        return self._apply(translation(dx, dy))

    def rotate(self, angle: float, pivot: tuple[float, float] = (0.0, 0.0)) -> "IconPath":
        """Rotate by angle radians about pivot.

        HorizontalLine and VerticalLine keep a single axis after rotation;
        canonicalize the path first when rotating such commands.
        """
        return self._apply(rotation(angle, pivot))

    def flip_x(self, ref: float | None = None) -> "IconPath":
        """Mirror horizontally: x -> ref - x (default ref: design width)."""
        return self._apply(mirror_x(self.width if ref is None else ref))

    def flip_y(self, ref: float | None = None) -> "IconPath":
        """Mirror vertically: y -> ref - y (default ref: design height)."""
        return self._apply(mirror_y(self.height if ref is None else ref))

    def center(
        self,
        x: float = 0.0,
        y: float = 0.0,
        width: float | None = None,
        height: float | None = None,
    ) -> "IconPath":
        """Center the shape's bounding box inside a target box.

        The target defaults to the full design grid. Shapes with zero width
        or height are left unchanged.
        """
        shape = self.bounds()
        if shape.is_empty or shape.width == 0 or shape.height == 0:
            return self

        dx, dy = centering_offset(
            shape,
            x,
            y,
            self.width if width is None else width,
            self.height if height is None else height,
        )
        return self.translate(dx, dy)

    def fit(
        self,
        width: float | None = None,
        height: float | None = None,
        preserve_aspect: bool = True,
    ) -> "IconPath":
        """Center and scale the shape to fill a width x height canvas.

        With preserve_aspect the smaller factor is used on both axes
        ("contain"). Shapes with zero width or height are left unchanged.

        Args:
            width: Canvas width (defaults to the design width)
            height: Canvas height (defaults to the design height)
            preserve_aspect: Keep the shape's aspect ratio
        """
        canvas_width = self.width if width is None else width
        canvas_height = self.height if height is None else height

        shape = self.bounds()
        if shape.is_empty or shape.width == 0 or shape.height == 0:
            return self

        sx = canvas_width / shape.width
        sy = canvas_height / shape.height
        if preserve_aspect:
            sx = sy = min(sx, sy)

        self.center(0.0, 0.0, canvas_width, canvas_height)
        return self.scale(sx, sy, (canvas_width / 2, canvas_height / 2))

    def align_to_font(
        self, ascender: float, descender: float, mode: AlignMode | str
    ) -> "IconPath":
        """Align the shape vertically to a font landmark.

        Landmarks are mapped into design space with the ascender at y = 0
        and the descender at y = height. Horizontal position is unchanged.

        Args:
            ascender: Font ascender (e.g. 800)
            descender: Font descender (e.g. -200)
            mode: "ascender" (top on ascender), "descender" (bottom on
                descender), "baseline" (bottom on baseline) or "center"
                (middle on the em middle)
        """
        mode = AlignMode(mode)
        shape = self.bounds()
        if shape.is_empty:
            return self

        def to_design(font_y: float) -> float:
            return font_y_to_design(font_y, ascender, descender, self.height)

        if mode is AlignMode.ASCENDER:
            offset = to_design(ascender) - shape.min_y
        elif mode is AlignMode.DESCENDER:
            offset = to_design(descender) - shape.max_y
        elif mode is AlignMode.BASELINE:
            offset = to_design(0) - shape.max_y
        else:
            em_middle = to_design((ascender + descender) / 2)
            offset = em_middle - (shape.min_y + shape.max_y) / 2

        return self.translate(0.0, offset)

    # Export

    def canonical_commands(self) -> list[CanonicalCommand]:
        """Commands rewritten into Move/Line/QuadraticCurve/CubicCurve/Close."""
        return canonicalize(self._commands)

    def normalized_commands(
        self, outer: WindingDirection = WindingDirection.CLOCKWISE
    ) -> list[CanonicalCommand]:
        """Canonical commands with font-ready winding."""
        return normalize_winding(canonicalize(self._commands), self.height, outer)

    def to_font_outline(
        self,
        ascender: float,
        descender: float,
        outer: WindingDirection = WindingDirection.CLOCKWISE,
    ) -> list[DrawInstruction]:
        """Project the path into font units.

        Args:
            ascender: Font ascender (e.g. 800)
            descender: Font descender (e.g. -200)
            outer: Required winding of the outer contour

        Returns:
            Ordered draw instructions in absolute font units
        """
        return project_to_font_space(
            self._commands, self.width, self.height, ascender, descender, outer
        )

    def draw(
        self,
        pen: Any,
        ascender: float,
        descender: float,
        outer: WindingDirection = WindingDirection.CLOCKWISE,
    ) -> None:
        """Draw the font-space outline into a fontTools pen."""
        draw_instructions(self.to_font_outline(ascender, descender, outer), pen)

    def to_path_data(self, precision: int | None = None, canonical: bool = False) -> str:
        """Serialize to SVG path-data notation.

        Args:
            precision: Optional number of decimals to round to
            canonical: Serialize the canonical form instead of the raw commands
        """
        from iconpath.io.path_data import format_path_data

        commands = self.canonical_commands() if canonical else self._commands
        return format_path_data(commands, precision)

    # Construction helpers

    def clone(self) -> "IconPath":
        """Independent copy with the same commands and design size."""
        return IconPath(self.width, self.height, list(self._commands))

    @classmethod
    def merge(
        cls,
        paths: Iterable["IconPath"],
        width: float = DEFAULT_DESIGN_SIZE,
        height: float | None = None,
    ) -> "IconPath":
        """Concatenate the commands of several paths into a new path.

        No coordinate renormalization is done; the paths are assumed to
        share a coordinate system.
        """
        merged = cls(width, height)
        for path in paths:
            merged._commands.extend(path.commands)
        return merged

    @classmethod
    def from_path_data(
        cls,
        raw: str,
        width: float = DEFAULT_DESIGN_SIZE,
        height: float | None = None,
    ) -> "IconPath":
        """Build a path from SVG path-data text (the `d` attribute).

        Raises:
            PathDataError: If the text is malformed
        """
        from iconpath.io.path_data import parse_path_data

        return cls(width, height, parse_path_data(raw))
