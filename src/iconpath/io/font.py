"""Icon font assembly with fontTools.

This module turns IconPath outlines into installable fonts. Glyph outlines
are projected into font units, drawn into fontTools pens and assembled
with FontBuilder into a TrueType (glyf) or CFF flavored sfnt, which can
then be written as TTF/OTF or compressed to WOFF/WOFF2.
"""

import logging
import re
from collections.abc import Iterable
from io import BytesIO
from pathlib import Path
from typing import Any

from fontTools.fontBuilder import FontBuilder
from fontTools.misc.roundTools import otRound
from fontTools.pens.boundsPen import ControlBoundsPen
from fontTools.pens.cu2quPen import Cu2QuPen
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont

from iconpath.config.settings import FontConfig, FontFormat, OutlineFormat
from iconpath.core.path import IconPath
from iconpath.domain import WindingDirection
from iconpath.exceptions import FontBuildError, FontSaveError, GlyphBuildError
from iconpath.io.css import glyph_rule, stylesheet

logger = logging.getLogger(__name__)

NOTDEF = ".notdef"


class IconFontGlyph:
    """A single icon in an icon font.

    Stores the glyph name (used in CSS class names), its code point, the
    design-space outline and horizontal metrics.

    Example:
        glyph = IconFontGlyph("home", 0xE001, IconPath(24).rect(2, 2, 20, 20))
        glyph.css_rule("icon", "neptune")
    """

    def __init__(
        self,
        name: str,
        unicode: int,
        path: IconPath,
        advance_width: int = 1000,
        left_side_bearing: int | None = None,
        description: str | None = None,
    ) -> None:
        """Initialize the glyph.

        Args:
            name: Glyph name
            unicode: Code point
            path: Outline in design coordinates
            advance_width: Horizontal advance in font units
            left_side_bearing: Left side bearing (defaults to the outline's x minimum)
            description: Optional free-form description
        """
        self.name = name
        self.unicode = unicode
        self.path = path
        self.advance_width = advance_width
        self.left_side_bearing = left_side_bearing
        self.description = description

    def __repr__(self) -> str:
        return f"IconFontGlyph(name={self.name!r}, unicode=U+{self.unicode:04X})"

    def draw(
        self,
        pen: Any,
        ascender: float,
        descender: float,
        outer: WindingDirection = WindingDirection.CLOCKWISE,
    ) -> None:
        """Draw the outline in font units into a fontTools pen."""
        self.path.draw(pen, ascender, descender, outer)

    def font_bounds(
        self, ascender: float, descender: float
    ) -> tuple[float, float, float, float] | None:
        """Control-point bounds in font units, or None for an empty outline."""
        pen = ControlBoundsPen(None)
        self.draw(pen, ascender, descender)
        return pen.bounds

    def resolved_left_side_bearing(self, ascender: float, descender: float) -> int:
        """Left side bearing, defaulting to the rounded outline x minimum."""
        if self.left_side_bearing is not None:
            return self.left_side_bearing
        bounds = self.font_bounds(ascender, descender)
        return otRound(bounds[0]) if bounds else 0

    def to_truetype_glyph(self, ascender: float, descender: float, max_err: float = 1.0) -> Any:
        """Build a glyf table glyph with quadratic contours.

        Cubic segments are approximated with quadratics within max_err
        font units.
        """
        tt_pen = TTGlyphPen(None)
        pen = Cu2QuPen(tt_pen, max_err, reverse_direction=False)
        self.draw(pen, ascender, descender, OutlineFormat.TRUETYPE.outer_winding())
        return tt_pen.glyph()

    def to_charstring(
        self,
        ascender: float,
        descender: float,
        private: Any = None,
        global_subrs: Any = None,
    ) -> Any:
        """Build a Type 2 charstring for a CFF table."""
        pen = T2CharStringPen(self.advance_width, None)
        self.draw(pen, ascender, descender, OutlineFormat.CFF.outer_winding())
        return pen.getCharString(private, global_subrs)

    def css_rule(self, prefix: str, family_name: str) -> str:
        """CSS ::before rule rendering this glyph."""
        return glyph_rule(prefix, self.name, self.unicode, family_name)


def _postscript_name(family_name: str, style_name: str) -> str:
    family = re.sub(r"[^A-Za-z0-9]", "", family_name) or "Icons"
    style = re.sub(r"[^A-Za-z0-9]", "", style_name) or "Regular"
    return f"{family}-{style}"


def _file_stem(family_name: str) -> str:
    return re.sub(r"[^A-Za-z0-9_-]+", "-", family_name).strip("-") or "icons"


class IconFont:
    """A complete icon font built from a set of IconFontGlyph.

    The font is assembled lazily on the first request for its binary
    data; the resulting sfnt bytes are cached and reused for every output
    format.

    Example:
        font = IconFont(FontConfig(family_name="neptune", prefix="ni"), glyphs)
        font.save(Path("dist"), [FontFormat.TTF, FontFormat.WOFF2])
        css = font.to_css(woff2_path="neptune.woff2")
    """

    def __init__(self, config: FontConfig, glyphs: Iterable[IconFontGlyph]) -> None:
        """Initialize the font.

        Args:
            config: Family metadata and vertical metrics
            glyphs: Icons in glyph order
        """
        self.config = config
        self.glyphs = list(glyphs)
        self._buffer: bytes | None = None

    @property
    def family_name(self) -> str:
        return self.config.family_name

    @property
    def prefix(self) -> str:
        return self.config.prefix

    @property
    def sfnt_extension(self) -> str:
        """File extension matching the outline format ("ttf" or "otf")."""
        return "otf" if self.config.outline_format is OutlineFormat.CFF else "ttf"

    def _check_glyphs(self) -> None:
        names: set[str] = {NOTDEF}
        codes: set[int] = set()
        for glyph in self.glyphs:
            if glyph.name in names:
                raise FontBuildError(self.family_name, f"duplicate glyph name '{glyph.name}'")
            if glyph.unicode in codes:
                raise FontBuildError(
                    self.family_name, f"duplicate code point U+{glyph.unicode:04X}"
                )
            names.add(glyph.name)
            codes.add(glyph.unicode)

    def _name_strings(self) -> dict[str, str]:
        cfg = self.config
        ps_name = _postscript_name(cfg.family_name, cfg.style_name)
        strings = {
            "familyName": cfg.family_name,
            "styleName": cfg.style_name,
            "uniqueFontIdentifier": f"{ps_name};{cfg.version or '1.000'}",
            "fullName": f"{cfg.family_name} {cfg.style_name}",
            "psName": ps_name,
            "version": f"Version {cfg.version or '1.000'}",
            "copyright": cfg.copyright,
            "trademark": cfg.trademark,
            "manufacturer": cfg.manufacturer,
            "designer": cfg.designer,
            "description": cfg.description,
            "vendorURL": cfg.manufacturer_url,
            "designerURL": cfg.designer_url,
            "licenseDescription": cfg.license,
            "licenseInfoURL": cfg.license_url,
        }
        return {key: value for key, value in strings.items() if value}

    def _setup_truetype(self, fb: FontBuilder, metrics: dict[str, tuple[int, int]]) -> None:
        cfg = self.config
        outlines = {NOTDEF: TTGlyphPen(None).glyph()}

        for glyph in self.glyphs:
            logger.debug("Drawing glyph %s (glyf)", glyph.name)
            try:
                outlines[glyph.name] = glyph.to_truetype_glyph(
                    cfg.ascender, cfg.descender, cfg.cu2qu_max_err
                )
            except Exception as e:
                raise GlyphBuildError(glyph.name, str(e)) from e

        fb.setupGlyf(outlines)

        glyf = fb.font["glyf"]
        for glyph in self.glyphs:
            if glyph.left_side_bearing is None:
                metrics[glyph.name] = (glyph.advance_width, getattr(glyf[glyph.name], "xMin", 0))
        fb.setupHorizontalMetrics(metrics)

    def _setup_cff(
        self,
        fb: FontBuilder,
        metrics: dict[str, tuple[int, int]],
        names: dict[str, str],
    ) -> None:
        cfg = self.config
        notdef_width = metrics[NOTDEF][0]
        charstrings = {NOTDEF: T2CharStringPen(notdef_width, None).getCharString()}

        for glyph in self.glyphs:
            logger.debug("Drawing glyph %s (cff)", glyph.name)
            try:
                charstrings[glyph.name] = glyph.to_charstring(cfg.ascender, cfg.descender)
            except Exception as e:
                raise GlyphBuildError(glyph.name, str(e)) from e

        font_info = {"FullName": names["fullName"], "FamilyName": cfg.family_name}
        if cfg.copyright:
            font_info["Copyright"] = cfg.copyright
        fb.setupCFF(names["psName"], font_info, charstrings, {})
        fb.setupHorizontalMetrics(metrics)

    def build(self) -> TTFont:
        """Assemble the font with FontBuilder.

        Returns:
            A fontTools TTFont with glyph order, cmap, outlines, hmtx,
            hhea, OS/2, name and post tables

        Raises:
            GlyphBuildError: If a glyph outline cannot be drawn
            FontBuildError: If the font tables cannot be assembled
        """
        self._check_glyphs()
        cfg = self.config
        em_height = cfg.ascender - cfg.descender

        glyph_order = [NOTDEF] + [glyph.name for glyph in self.glyphs]
        cmap = {glyph.unicode: glyph.name for glyph in self.glyphs}

        metrics: dict[str, tuple[int, int]] = {NOTDEF: (otRound(em_height / 2), 0)}
        for glyph in self.glyphs:
            try:
                lsb = glyph.resolved_left_side_bearing(cfg.ascender, cfg.descender)
            except Exception as e:
                raise GlyphBuildError(glyph.name, str(e)) from e
            metrics[glyph.name] = (glyph.advance_width, lsb)

        names = self._name_strings()
        logger.debug(
            "Building font %s: %d glyphs, %s outlines",
            cfg.family_name, len(self.glyphs), cfg.outline_format.value
        )

        is_ttf = cfg.outline_format is OutlineFormat.TRUETYPE
        fb = FontBuilder(cfg.units_per_em, isTTF=is_ttf)
        try:
            fb.setupGlyphOrder(glyph_order)
            fb.setupCharacterMap(cmap)
        except Exception as e:
            raise FontBuildError(cfg.family_name, str(e)) from e

        if is_ttf:
            self._setup_truetype(fb, metrics)
        else:
            self._setup_cff(fb, metrics, names)

        try:
            fb.setupHorizontalHeader(ascent=cfg.ascender, descent=cfg.descender)
            fb.setupNameTable(names)
            fb.setupOS2(
                sTypoAscender=cfg.ascender,
                sTypoDescender=cfg.descender,
                sTypoLineGap=0,
                usWinAscent=cfg.ascender,
                usWinDescent=-cfg.descender,
            )
            fb.setupPost()
        except Exception as e:
            raise FontBuildError(cfg.family_name, str(e)) from e

        return fb.font

    def get_buffer(self) -> bytes:
        """Serialized sfnt data, built on first use and cached."""
        if self._buffer is None:
            font = self.build()
            stream = BytesIO()
            try:
                font.save(stream)
            except Exception as e:
                raise FontBuildError(self.family_name, str(e)) from e
            self._buffer = stream.getvalue()
        return self._buffer

    def _flavored(self, flavor: str) -> bytes:
        font = TTFont(BytesIO(self.get_buffer()))
        font.flavor = flavor
        stream = BytesIO()
        try:
            font.save(stream)
        except Exception as e:
            raise FontBuildError(self.family_name, f"{flavor} compression failed: {e}") from e
        return stream.getvalue()

    def to_ttf(self) -> bytes:
        """Raw sfnt bytes (TrueType or CFF outlines)."""
        return self.get_buffer()

    def to_woff(self) -> bytes:
        """WOFF-compressed font bytes."""
        return self._flavored("woff")

    def to_woff2(self) -> bytes:
        """WOFF2-compressed font bytes (requires brotli)."""
        return self._flavored("woff2")

    def data_for(self, fmt: FontFormat) -> bytes:
        """Font bytes for an output format."""
        if fmt is FontFormat.WOFF:
            return self.to_woff()
        if fmt is FontFormat.WOFF2:
            return self.to_woff2()
        if fmt.value != self.sfnt_extension:
            logger.warning(
                "Extension .%s does not match %s outlines",
                fmt.value, self.config.outline_format.value
            )
        return self.to_ttf()

    def file_name(self, fmt: FontFormat | str) -> str:
        """Output file name for a format, e.g. "neptune.woff2"."""
        return f"{_file_stem(self.family_name)}.{FontFormat(fmt).value}"

    def save(self, directory: Path, formats: Iterable[FontFormat | str]) -> list[Path]:
        """Write the font in each requested format.

        Args:
            directory: Output directory (created if missing)
            formats: Formats to write

        Returns:
            Paths of the written files

        Raises:
            FontSaveError: If a file cannot be written
        """
        written: list[Path] = []
        for fmt in dict.fromkeys(FontFormat(f) for f in formats):
            path = directory / self.file_name(fmt)
            data = self.data_for(fmt)
            try:
                directory.mkdir(parents=True, exist_ok=True)
                path.write_bytes(data)
            except OSError as e:
                raise FontSaveError(str(path), str(e)) from e
            logger.debug("Font written to %s (%d bytes)", path, len(data))
            written.append(path)
        return written

    def to_css(
        self,
        woff2_path: str | None = None,
        woff_path: str | None = None,
        ttf_path: str | None = None,
    ) -> str:
        """Full stylesheet with @font-face, base class and glyph rules."""
        return stylesheet(
            self.family_name,
            self.prefix,
            ((glyph.name, glyph.unicode) for glyph in self.glyphs),
            woff2_path,
            woff_path,
            ttf_path,
        )

    def save_css(self, directory: Path, formats: Iterable[FontFormat | str]) -> Path:
        """Write the stylesheet referencing the font files by relative name.

        Raises:
            FontSaveError: If the file cannot be written
        """
        wanted = {FontFormat(f) for f in formats}
        css = self.to_css(
            woff2_path=self.file_name(FontFormat.WOFF2) if FontFormat.WOFF2 in wanted else None,
            woff_path=self.file_name(FontFormat.WOFF) if FontFormat.WOFF in wanted else None,
            ttf_path=self.file_name(FontFormat.TTF) if FontFormat.TTF in wanted else None,
        )
        path = directory / f"{_file_stem(self.family_name)}.css"
        try:
            directory.mkdir(parents=True, exist_ok=True)
            path.write_text(css + "\n", encoding="utf-8")
        except OSError as e:
            raise FontSaveError(str(path), str(e)) from e
        logger.debug("Stylesheet written to %s", path)
        return path
