"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from pathlib import Path

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for glyph building.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]iconpath[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_manifest_info(
    manifest_path: str, family_name: str, glyph_count: int, upm: int, outline: str
) -> None:
    """Print manifest summary.

    Args:
        manifest_path: Path to the manifest file
        family_name: Font family name
        glyph_count: Number of glyphs declared
        upm: Units per em value
        outline: Outline format ("truetype" or "cff")
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(manifest_path)
    line1.append(f" ({family_name})")
    console.print(line1)
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm:,} UPM {SYM_DOT} {outline}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def format_file_size(size_bytes: int) -> str:
    """Format a byte count in human-readable form (e.g. "12 KB")."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def print_success(
    files: list[tuple[Path, int]],
    total_time_s: float,
    built: int,
    skipped: int,
    errors: int,
) -> None:
    """Print success message with summary.

    Args:
        files: Written files with their sizes in bytes
        total_time_s: Total build time in seconds
        built: Number of glyphs built
        skipped: Number of glyphs skipped
        errors: Number of glyphs that failed
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    for path, size in files:
        line = Text("  ")
        line.append(str(path), style="bold")
        line.append(f" ({format_file_size(size)})")
        console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {built} glyphs {SYM_DOT} {skipped} skipped {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )


def print_glyph_errors(errors: list[tuple[str, str]]) -> None:
    """Print one line per failed glyph."""
    for glyph_name, message in errors:
        line = Text(f"  {SYM_ERR} ", style="red")
        line.append(glyph_name, style="bold")
        line.append(f" {SYM_DOT} {message}", style="default")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_inspection(
    path_data: str,
    design_bounds: tuple[float, float, float, float] | None,
    windings: list[tuple[int, str, float]],
    font_bounds: tuple[float, float, float, float] | None,
) -> None:
    """Print the analysis of a single path.

    Args:
        path_data: Canonical path data
        design_bounds: (min_x, min_y, max_x, max_y) in design units, or None
        windings: (subpath index, direction, signed area) per subpath
        font_bounds: (x_min, y_min, x_max, y_max) in font units, or None
    """

    def fmt(bounds: tuple[float, float, float, float] | None) -> str:
        if bounds is None:
            return "empty"
        return ", ".join(f"{v:g}" for v in bounds)

    console.print(Text(path_data or "(empty)", style="bold"))

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Property")
    table.add_column("Value")
    table.add_row("Design bounds", fmt(design_bounds))
    table.add_row("Font bounds", fmt(font_bounds))
    for index, direction, area in windings:
        table.add_row(f"Subpath {index}", f"{direction} {SYM_DOT} area {area:g}")
    console.print(table)
