"""Icon-font manifests.

A manifest is a JSON document matching IconFontSettings:

    {
      "font": {"family_name": "neptune", "prefix": "ni"},
      "glyphs": [
        {"name": "home", "unicode": "e001", "path": "M3 10 12 3l9 7v11H3z", "fit": true}
      ],
      "output": {"directory": "dist", "formats": ["ttf", "woff2"]}
    }
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from iconpath.config.settings import FontConfig, GlyphConfig, IconFontSettings
from iconpath.core.path import IconPath
from iconpath.exceptions import ManifestError, PathDataError
from iconpath.io.font import IconFont, IconFontGlyph

logger = logging.getLogger(__name__)


def load_manifest(path: Path) -> IconFontSettings:
    """Read and validate a manifest file.

    Args:
        path: JSON manifest path

    Returns:
        Validated settings

    Raises:
        ManifestError: If the file cannot be read or does not validate
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestError(str(path), str(e)) from e

    try:
        settings = IconFontSettings.model_validate_json(text)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
            for error in e.errors()
        )
        raise ManifestError(str(path), details) from e

    logger.debug(
        "Manifest %s loaded: %s, %d glyphs",
        path, settings.font.family_name, len(settings.glyphs)
    )
    return settings


def build_glyph(config: GlyphConfig, font: FontConfig) -> IconFontGlyph:
    """Build a font glyph from its manifest entry.

    The path data is parsed on the glyph's design grid and the layout
    steps are applied in order: fit, center, align.

    Raises:
        PathDataError: If the path data is malformed
    """
    path = IconPath.from_path_data(config.path, config.width, config.height)

    if config.fit:
        path.fit()
    if config.center:
        path.center()
    if config.align is not None:
        path.align_to_font(font.ascender, font.descender, config.align)

    advance_width = config.advance_width
    if advance_width is None:
        advance_width = font.ascender - font.descender

    return IconFontGlyph(
        config.name,
        config.unicode,
        path,
        advance_width=advance_width,
        left_side_bearing=config.left_side_bearing,
        description=config.description,
    )


def build_font(settings: IconFontSettings) -> IconFont:
    """Build every glyph of a manifest into an IconFont.

    Raises:
        PathDataError: If any glyph's path data is malformed
    """
    glyphs: list[IconFontGlyph] = []
    for config in settings.glyphs:
        try:
            glyphs.append(build_glyph(config, settings.font))
        except PathDataError:
            logger.debug("Invalid path data in glyph %s", config.name)
            raise
    return IconFont(settings.font, glyphs)
