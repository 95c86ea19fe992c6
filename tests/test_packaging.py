"""Tests for the declared package metadata."""

from __future__ import annotations

import sys
import tomllib
from pathlib import Path

PYPROJECT = Path(__file__).parent.parent / "pyproject.toml"


def test_python_floor_covers_typing_features():
    """typing.TypeIs is used by the id map, so 3.13 is the oldest supported Python."""
    project = tomllib.loads(PYPROJECT.read_text())["project"]

    assert project["requires-python"] == ">=3.13"
    assert sys.version_info >= (3, 13)
