"""iconpath - Build icon fonts from SVG-style vector paths.

iconpath lets you author icon outlines on a small design grid (commonly
24 x 24) with a chainable path builder, transform and align them, and
project them into font units for TrueType/CFF glyphs, web fonts and CSS.

Example:
    >>> from iconpath import IconPath
    >>> path = IconPath(24).rect(2, 2, 20, 20, rx=3).center()
    >>> outline = path.to_font_outline(ascender=800, descender=-200)

From the command line:
    $ iconpath build icons.json -o dist
"""

from iconpath.core import DrawInstruction, IconPath
from iconpath.domain import AlignMode, Bounds, WindingDirection

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = [
    "AlignMode",
    "Bounds",
    "DrawInstruction",
    "IconPath",
    "WindingDirection",
    "__author__",
    "__version__",
]
