"""Core path geometry for iconpath.

This module contains the geometry engine behind IconPath:

- Arc conversion (SVG endpoint arcs to cubic Bezier segments)
- Coordinate transforms (scale, translate, rotate, mirror, centering)
- Bounding boxes and centroids over raw commands
- Canonicalization (H/V/T/S rewritten to L/Q/C)
- Winding normalization for font export
- Projection from the y-down design grid into y-up font units

All functions are pure and return new command lists; only IconPath holds
mutable state.

Key functions:
- arc_to_cubic: Convert an elliptical arc into cubic curves
- compute_bounds: Axis-aligned bounds including control points
- canonicalize: Rewrite commands into the canonical subset
- normalize_winding: Reverse subpaths with the wrong direction
- project_to_font_space: Produce pen instructions in font units

Key classes:
- IconPath: Chainable path builder
- DrawInstruction: One fontTools pen call
"""

from iconpath.core.arc import arc_to_cubic
from iconpath.core.bounds import centroid, command_coordinates, compute_bounds
from iconpath.core.canonical import canonicalize
from iconpath.core.path import DEFAULT_DESIGN_SIZE, IconPath
from iconpath.core.projector import (
    DrawInstruction,
    draw_instructions,
    project_to_font_space,
)
from iconpath.core.transform import (
    centering_offset,
    font_y_to_design,
    map_command,
    map_commands,
    mirror_x,
    mirror_y,
    rotation,
    scaling,
    translation,
)
from iconpath.core.winding import (
    normalize_winding,
    reverse_subpath,
    signed_area_font_space,
    split_subpaths,
    subpath_winding,
)

__all__ = [
    "DEFAULT_DESIGN_SIZE",
    # Path builder
    "IconPath",
    # Projector
    "DrawInstruction",
    "draw_instructions",
    "project_to_font_space",
    # Geometry functions
    "arc_to_cubic",
    "canonicalize",
    "centering_offset",
    "centroid",
    "command_coordinates",
    "compute_bounds",
    "font_y_to_design",
    "map_command",
    "map_commands",
    "mirror_x",
    "mirror_y",
    "rotation",
    "scaling",
    "translation",
    # Winding functions
    "normalize_winding",
    "reverse_subpath",
    "signed_area_font_space",
    "split_subpaths",
    "subpath_winding",
]
