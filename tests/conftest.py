"""Global test fixtures for tickline."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from tickline.logger import remove_handler


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Keep tests away from the real user config, project config and env vars."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("TICKLINE_DEBUG", raising=False)
    monkeypatch.delenv("TICKLINE_MAX_EVALUATIONS", raising=False)
    monkeypatch.chdir(work)
    yield work


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo setup_logging so handlers never outlive a test's captured stream."""
    root = logging.getLogger()
    level = root.level
    yield
    remove_handler(root)
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    return tmp_path / "home"
