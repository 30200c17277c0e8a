"""CLI application entry point for iconpath.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from fontTools.pens.boundsPen import ControlBoundsPen

from iconpath import __version__
from iconpath.cli.output import (
    console,
    create_progress,
    print_error,
    print_glyph_errors,
    print_header,
    print_inspection,
    print_manifest_info,
    print_step,
    print_success,
)
from iconpath.config import FontFormat, LoggingConfig, OutlineFormat
from iconpath.core import IconPath, signed_area_font_space, split_subpaths, subpath_winding
from iconpath.exceptions import FontSaveError, IconPathError, ManifestError, PathDataError
from iconpath.io import IconFontProcessor, load_manifest

# Create the Typer app
app = typer.Typer(
    name="iconpath",
    help="Build icon fonts from SVG-style vector paths.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]iconpath[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Build icon fonts from SVG-style vector paths."""


@app.command()
def build(
    manifest: Annotated[
        Path,
        typer.Argument(
            help="Path to the JSON icon-font manifest",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output directory (default: from manifest)",
        ),
    ] = None,
    formats: Annotated[
        list[FontFormat] | None,
        typer.Option(
            "--format",
            "-f",
            help="Font format to write; repeat for several (default: from manifest)",
        ),
    ] = None,
    no_css: Annotated[
        bool,
        typer.Option(
            "--no-css",
            help="Do not write the CSS stylesheet",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Build an icon font and stylesheet from a manifest.

    Example:
        iconpath build icons.json -o dist -f ttf -f woff2

    Glyphs whose path data cannot be parsed are reported and left out;
    the command then exits with status 1.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not manifest.exists():
        print_error(
            f"Manifest not found: {manifest}",
            details=f"The file '{manifest}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not manifest.is_file():
        print_error(
            f"Manifest path is not a file: {manifest}",
            details="Please provide a path to a JSON manifest.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    try:
        settings = load_manifest(manifest)

        output_updates: dict[str, object] = {}
        if output is not None:
            output_updates["directory"] = output
        if formats:
            output_updates["formats"] = formats
        if no_css:
            output_updates["css"] = False

        settings = settings.model_copy(
            update={
                "output": settings.output.model_copy(update=output_updates),
                "logging": LoggingConfig(
                    log_file=log_file or settings.logging.log_file,
                    log_level=log_level if not quiet else "WARNING",
                    file_log_level=settings.logging.file_log_level,
                ),
            }
        )

        if not quiet:
            print_step("Loading manifest")
            print_manifest_info(
                manifest_path=str(manifest),
                family_name=settings.font.family_name,
                glyph_count=len(settings.glyphs),
                upm=settings.font.units_per_em,
                outline=settings.font.outline_format.value,
            )
            print_step("Building glyphs")

        processor = IconFontProcessor(settings, quiet=quiet)

        if not quiet:
            with create_progress() as progress:
                task_id = progress.add_task(
                    f"Building {len(settings.glyphs)} glyphs",
                    total=len(settings.glyphs),
                )

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                stats = processor.process(progress_callback=update_progress)
        else:
            stats = processor.process()

        if not quiet:
            print_success(
                files=[(path, path.stat().st_size) for path in stats.files_written],
                total_time_s=stats.duration_seconds,
                built=stats.built_count,
                skipped=stats.skipped_count,
                errors=stats.error_count,
            )
            if verbose and processor.font is not None:
                font = settings.font
                for glyph in processor.font.glyphs:
                    console.print(f"  {glyph.css_rule(font.prefix, font.family_name)}", markup=False)

        if stats.errors:
            print_glyph_errors(stats.errors)
            raise typer.Exit(code=1)

    except ManifestError as e:
        print_error(f"Could not read manifest: {e.reason}")
        raise typer.Exit(code=1)
    except FontSaveError as e:
        print_error(f"Could not save font: {e.reason}")
        raise typer.Exit(code=1)
    except IconPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.command()
def inspect(
    path_data: Annotated[
        str,
        typer.Argument(
            help="SVG path data, e.g. 'M2 2h20v20H2z'",
            show_default=False,
        ),
    ],
    width: Annotated[
        float,
        typer.Option("--width", help="Design grid width", min=0.001),
    ] = 24.0,
    height: Annotated[
        float | None,
        typer.Option("--height", help="Design grid height (default: width)", min=0.001),
    ] = None,
    ascender: Annotated[
        int,
        typer.Option("--ascender", help="Font ascender in font units"),
    ] = 800,
    descender: Annotated[
        int,
        typer.Option("--descender", help="Font descender in font units"),
    ] = -200,
    outline: Annotated[
        OutlineFormat,
        typer.Option("--outline", help="Outline format used for winding"),
    ] = OutlineFormat.TRUETYPE,
) -> None:
    """Show canonical form, bounds and winding of a path.

    Example:
        iconpath inspect "M2 2h20v20H2z M8 8v8h8V8z"
    """
    if ascender <= descender:
        print_error(f"Ascender ({ascender}) must be greater than descender ({descender})")
        raise typer.Exit(code=1)

    try:
        path = IconPath.from_path_data(path_data, width, height)
    except PathDataError as e:
        print_error(f"Invalid path data: {e.reason}")
        raise typer.Exit(code=1)

    bounds = path.bounds()
    design_bounds = None if bounds.is_empty else bounds.to_tuple()

    windings: list[tuple[int, str, float]] = []
    for index, subpath in enumerate(split_subpaths(path.canonical_commands())):
        direction = subpath_winding(subpath, path.height)
        label = direction.name.lower().replace("_", "-") if direction else "degenerate"
        windings.append((index, label, signed_area_font_space(subpath, path.height)))

    pen = ControlBoundsPen(None)
    path.draw(pen, ascender, descender, outline.outer_winding())

    print_inspection(
        path.to_path_data(precision=3, canonical=True),
        design_bounds,
        windings,
        pen.bounds,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
