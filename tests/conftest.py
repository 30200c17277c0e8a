"""Shared fixtures."""

import json
import logging
from pathlib import Path

import pytest
import structlog


@pytest.fixture(autouse=True)
def restore_logging():
    """Remove handlers added by configure_logging and reset structlog."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def manifest_data(tmp_path: Path) -> dict:
    """A small two-glyph manifest writing into tmp_path."""
    return {
        "font": {"family_name": "neptune", "prefix": "nt"},
        "glyphs": [
            {"name": "square", "unicode": "e001", "path": "M2 2h20v20H2z"},
            {
                "name": "frame",
                "unicode": "U+E002",
                "path": "M2 2h20v20H2z M8 8v8h8V8z",
                "fit": True,
            },
        ],
        "output": {"directory": str(tmp_path / "dist"), "formats": ["ttf"]},
        "logging": {"log_file": str(tmp_path / "build.log")},
    }


@pytest.fixture
def manifest_file(tmp_path: Path, manifest_data: dict) -> Path:
    path = tmp_path / "icons.json"
    path.write_text(json.dumps(manifest_data), encoding="utf-8")
    return path
