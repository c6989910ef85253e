"""Shared pytest fixtures for LINEQ tests."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a factory writing lineq.toml into a temporary directory."""

    def _write(content: str) -> Path:
        path = tmp_path / "lineq.toml"
        path.write_text(content)
        return path

    return _write
