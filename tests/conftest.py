"""
Pytest configuration and fixtures for segre tests.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SEGRE_* variables and any .env file out of tests."""
    for name in ("SEGRE_CONFIG", "SEGRE_IGNORE", "SEGRE_RECURSIVE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Empty directory to organize."""
    directory = tmp_path / "target"
    directory.mkdir()
    return directory.resolve()


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """Factory creating a file, optionally with a given modification time."""

    def _make_file(
        path: Path, content: str = "content", modified: Optional[datetime] = None
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        if modified is not None:
            timestamp = modified.timestamp()
            os.utime(path, (timestamp, timestamp))
        return path

    return _make_file
