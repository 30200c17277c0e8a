"""Font and text I/O layer for iconpath.

This module connects IconPath to the outside world: SVG path-data text,
font files assembled with fontTools, CSS stylesheets and JSON manifests.

Key responsibilities:
- Parse and format SVG path data
- Assemble glyphs into TrueType/CFF fonts and web font flavors
- Generate @font-face and icon class CSS
- Load and validate icon-font manifests

Key classes:
- IconFontGlyph: One icon with its code point and metrics
- IconFont: A complete icon font
- IconFontProcessor: Manifest-driven build with logging and statistics
"""

from iconpath.io.css import base_class_rule, font_face_rule, glyph_rule, stylesheet
from iconpath.io.font import IconFont, IconFontGlyph
from iconpath.io.manifest import build_font, build_glyph, load_manifest
from iconpath.io.path_data import format_number, format_path_data, parse_path_data
from iconpath.io.processor import IconFontProcessor

__all__ = [
    "IconFont",
    "IconFontGlyph",
    "IconFontProcessor",
    "base_class_rule",
    "build_font",
    "build_glyph",
    "font_face_rule",
    "format_number",
    "format_path_data",
    "glyph_rule",
    "load_manifest",
    "parse_path_data",
    "stylesheet",
]
