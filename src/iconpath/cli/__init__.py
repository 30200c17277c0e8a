"""Command-line interface for iconpath.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Manifest-driven font builds with a progress bar
- Path inspection (canonical form, bounds, winding)
- Verbose/quiet output modes
- Detailed error reporting
"""

from iconpath.cli.app import cli, main

__all__ = ["cli", "main"]
