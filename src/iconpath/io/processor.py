"""Manifest-driven icon font builds.

IconFontProcessor runs the whole pipeline for a manifest: build every
glyph, assemble the font, write each requested format and the
stylesheet, and collect statistics along the way.
"""

import time
import traceback
from collections.abc import Callable
from pathlib import Path

from iconpath.config.settings import IconFontSettings
from iconpath.exceptions import GlyphError, PathDataError
from iconpath.io.font import IconFont, IconFontGlyph
from iconpath.io.manifest import build_glyph
from iconpath.utils import BuildLogger, BuildStats, configure_logging

ProgressCallback = Callable[[int, int, str, bool], None]


class IconFontProcessor:
    """Orchestrates an icon font build.

    Manages the complete workflow:
    1. Build each glyph from its path data and layout steps
    2. Assemble the font with every glyph that built
    3. Save the requested font formats
    4. Save the CSS stylesheet

    A glyph whose path data is malformed is logged and left out; the
    remaining glyphs are still built.

    Example:
        settings = load_manifest(Path("icons.json"))
        processor = IconFontProcessor(settings)
        stats = processor.process()
    """

    def __init__(self, settings: IconFontSettings, quiet: bool = False) -> None:
        """Initialize the processor and configure logging.

        Args:
            settings: Validated build settings
            quiet: Suppress console log output except errors
        """
        self.settings = settings
        self.logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        self.build_logger = BuildLogger(self.logger)
        self.font: IconFont | None = None

    def build_glyphs(
        self, progress_callback: ProgressCallback | None = None
    ) -> list[IconFontGlyph]:
        """Build every glyph in manifest order.

        Args:
            progress_callback: Optional callback(completed, total, glyph_name, success)

        Returns:
            Glyphs that built successfully
        """
        configs = self.settings.glyphs
        total = len(configs)
        glyphs: list[IconFontGlyph] = []

        for index, config in enumerate(configs, start=1):
            self.build_logger.log_glyph_start(config.name)
            start = time.time()
            success = False

            try:
                glyph = build_glyph(config, self.settings.font)
            except (PathDataError, GlyphError) as e:
                self.build_logger.log_glyph_error(config.name, e, traceback.format_exc())
            else:
                if len(glyph.path) == 0:
                    self.build_logger.log_glyph_skipped(config.name, "empty outline")
                else:
                    glyphs.append(glyph)
                    self.build_logger.log_glyph_complete(
                        config.name,
                        config.unicode,
                        len(glyph.path),
                        (time.time() - start) * 1000,
                    )
                    success = True

            if progress_callback:
                progress_callback(index, total, config.name, success)

        return glyphs

    def process(self, progress_callback: ProgressCallback | None = None) -> BuildStats:
        """Build the font and write all outputs.

        Args:
            progress_callback: Optional callback(completed, total, glyph_name, success)

        Returns:
            BuildStats with counts, written files and timing

        Raises:
            FontBuildError: If the font tables cannot be assembled
            GlyphBuildError: If a built glyph cannot be drawn into the font
            FontSaveError: If an output file cannot be written
        """
        stats = self.build_logger.stats
        stats.start_time = time.time()
        output = self.settings.output

        self.logger.info(
            "Starting font build",
            family=self.settings.font.family_name,
            glyphs=len(self.settings.glyphs),
            output=str(output.directory),
            formats=[fmt.value for fmt in output.formats],
        )

        glyphs = self.build_glyphs(progress_callback)
        self.font = IconFont(self.settings.font, glyphs)

        for path in self.font.save(output.directory, output.formats):
            self.build_logger.log_font_written(path, _file_size(path))

        if output.css:
            css_path = self.font.save_css(output.directory, output.formats)
            self.build_logger.log_font_written(css_path, _file_size(css_path))

        stats.end_time = time.time()
        self.logger.info(
            "Build complete",
            built=stats.built_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            files=len(stats.files_written),
            duration_s=round(stats.duration_seconds, 3),
        )
        return stats


def _file_size(path: Path) -> int:
    return path.stat().st_size
