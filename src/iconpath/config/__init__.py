"""Configuration management for iconpath.

This module provides configuration management using Pydantic models.
Configuration is read from a JSON manifest, with CLI overrides.

Key classes:
- FontConfig: Family metadata and vertical metrics
- GlyphConfig: One icon and its layout steps
- OutputConfig: Output directory, formats and CSS
- LoggingConfig: Logging settings
- IconFontSettings: Main application settings
"""

from iconpath.config.settings import (
    FontConfig,
    FontFormat,
    GlyphConfig,
    IconFontSettings,
    LoggingConfig,
    OutlineFormat,
    OutputConfig,
    get_default_settings,
)

__all__ = [
    "FontConfig",
    "FontFormat",
    "GlyphConfig",
    "IconFontSettings",
    "LoggingConfig",
    "OutlineFormat",
    "OutputConfig",
    "get_default_settings",
]
