"""Configuration settings for iconpath."""

import re
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from iconpath.domain import AlignMode, WindingDirection

_UNICODE_RE = re.compile(r"^(?:U\+|u\+|0x|0X)?([0-9A-Fa-f]{1,6})$")


class OutlineFormat(str, Enum):
    """Glyph outline flavor of the generated font."""

    TRUETYPE = "truetype"
    CFF = "cff"

    def outer_winding(self) -> WindingDirection:
        """Winding rasterizers expect for outer contours in this format."""
        if self is OutlineFormat.CFF:
            return WindingDirection.COUNTER_CLOCKWISE
        return WindingDirection.CLOCKWISE


class FontFormat(str, Enum):
    """Output file format."""

    TTF = "ttf"
    OTF = "otf"
    WOFF = "woff"
    WOFF2 = "woff2"


class FontConfig(BaseModel):
    """Font family metadata and vertical metrics."""

    family_name: str = Field(
        min_length=1,
        description="Font family name, also used in CSS",
    )
    prefix: str = Field(
        default="icon",
        min_length=1,
        description="CSS class prefix (e.g. 'icon' -> .icon-home)",
    )
    style_name: str = Field(
        default="Regular",
        description="Font style name",
    )
    units_per_em: int = Field(
        default=1000,
        ge=16,
        le=16384,
        description="Font units per em",
    )
    ascender: int = Field(
        default=800,
        description="Ascender in font units",
    )
    descender: int = Field(
        default=-200,
        description="Descender in font units (usually negative)",
    )
    outline_format: OutlineFormat = Field(
        default=OutlineFormat.TRUETYPE,
        description="Glyph outline flavor (quadratic glyf or cubic CFF)",
    )
    cu2qu_max_err: float = Field(
        default=1.0,
        gt=0.0,
        le=10.0,
        description="Maximum error in font units when converting cubics to quadratics",
    )
    copyright: str | None = Field(default=None, description="Copyright notice")
    trademark: str | None = Field(default=None, description="Trademark notice")
    manufacturer: str | None = Field(default=None, description="Manufacturer name")
    manufacturer_url: str | None = Field(default=None, description="Manufacturer URL")
    designer: str | None = Field(default=None, description="Designer name")
    designer_url: str | None = Field(default=None, description="Designer URL")
    version: str | None = Field(default=None, description="Font version string")
    description: str | None = Field(default=None, description="Font description")
    license: str | None = Field(default=None, description="License description")
    license_url: str | None = Field(default=None, description="License URL")

    @model_validator(mode="after")
    def _check_metrics(self) -> "FontConfig":
        if self.ascender <= self.descender:
            raise ValueError(
                f"ascender ({self.ascender}) must be greater than descender ({self.descender})"
            )
        return self

    def outer_winding(self) -> WindingDirection:
        """Required winding of outer contours for this font's outline format."""
        return self.outline_format.outer_winding()


class GlyphConfig(BaseModel):
    """A single icon glyph described by SVG path data."""

    name: str = Field(
        min_length=1,
        pattern=r"^[A-Za-z0-9_.\-]+$",
        description="Glyph name, used in CSS class names",
    )
    unicode: int = Field(
        ge=0,
        le=0x10FFFF,
        description="Code point (int, or hex string like 'e001' / 'U+E001')",
    )
    path: str = Field(
        description="SVG path data in design coordinates",
    )
    width: float = Field(
        default=24,
        gt=0,
        description="Design grid width",
    )
    height: float | None = Field(
        default=None,
        gt=0,
        description="Design grid height (defaults to width)",
    )
    advance_width: int | None = Field(
        default=None,
        ge=0,
        description="Advance width in font units (defaults to the em height)",
    )
    left_side_bearing: int | None = Field(
        default=None,
        description="Left side bearing (defaults to the outline's x minimum)",
    )
    description: str | None = Field(
        default=None,
        description="Free-form glyph description",
    )
    fit: bool = Field(
        default=False,
        description="Scale the shape to fill the design grid, keeping aspect",
    )
    center: bool = Field(
        default=False,
        description="Center the shape in the design grid",
    )
    align: AlignMode | None = Field(
        default=None,
        description="Vertical alignment to a font landmark",
    )

    @field_validator("unicode", mode="before")
    @classmethod
    def _parse_unicode(cls, value: Any) -> Any:
        if isinstance(value, str):
            match = _UNICODE_RE.match(value.strip())
            if match is None:
                raise ValueError(f"invalid code point {value!r}")
            return int(match.group(1), 16)
        return value


class OutputConfig(BaseModel):
    """Configuration for generated files."""

    directory: Path = Field(
        default=Path("dist"),
        description="Output directory",
    )
    formats: list[FontFormat] = Field(
        default_factory=lambda: [FontFormat.TTF, FontFormat.WOFF, FontFormat.WOFF2],
        min_length=1,
        description="Font formats to write",
    )
    css: bool = Field(
        default=True,
        description="Write a CSS stylesheet next to the fonts",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class IconFontSettings(BaseModel):
    """Main application settings, usually loaded from a manifest."""

    font: FontConfig
    glyphs: list[GlyphConfig] = Field(default_factory=list)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def _check_unique_glyphs(self) -> "IconFontSettings":
        names: set[str] = set()
        codes: set[int] = set()
        for glyph in self.glyphs:
            if glyph.name in names:
                raise ValueError(f"duplicate glyph name '{glyph.name}'")
            if glyph.unicode in codes:
                raise ValueError(f"duplicate code point U+{glyph.unicode:04X}")
            names.add(glyph.name)
            codes.add(glyph.unicode)
        return self


def get_default_settings(family_name: str = "icons") -> IconFontSettings:
    """Get default application settings."""
    return IconFontSettings(font=FontConfig(family_name=family_name))
