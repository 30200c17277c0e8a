"""Utility functions for iconpath.

This module provides utility functions including:

- Logging setup and configuration
- Build statistics tracking
"""

from iconpath.utils.logging import (
    BuildLogger,
    BuildStats,
    configure_logging,
)

__all__ = [
    "BuildLogger",
    "BuildStats",
    "configure_logging",
]
