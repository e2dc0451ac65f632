# tests/conftest.py

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from datetime import date
from pathlib import Path

import pytest

from taskmeter.config import Settings
from taskmeter.domain.task import ProjectEntry
from taskmeter.infrastructure.storage import TaskStore
from taskmeter.interfaces.cli.common import LOG_HANDLER_NAME


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Point the config directory at a per-test tmp dir and drop any
    TASKMETER_* variables from the developer's environment.
    """
    for key in list(os.environ):
        if key.startswith("TASKMETER_"):
            monkeypatch.delenv(key)
    config_dir = tmp_path / "config"
    monkeypatch.setenv("TASKMETER_CONFIG_DIR", str(config_dir))
    return config_dir


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo what a CLI run did to the root logger."""
    root = logging.getLogger()
    level = root.level
    yield root
    for h in list(root.handlers):
        if h.get_name() == LOG_HANDLER_NAME:
            root.removeHandler(h)
    root.setLevel(level)


@pytest.fixture()
def fixed_day() -> date:
    return date(2024, 8, 28)


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def settings() -> Settings:
    return Settings()


@pytest.fixture()
def make_rows() -> Callable[..., list[ProjectEntry]]:
    """
    Build project rows from (name, planned, unit, completed) tuples.
    Values may be ints; they are stored as strings like the form does.
    """

    def _make(*rows: tuple) -> list[ProjectEntry]:
        return [
            ProjectEntry(
                name=str(name),
                planned_count=str(planned),
                unit_time=str(unit),
                completed_count=str(completed),
            )
            for name, planned, unit, completed in rows
        ]

    return _make


@pytest.fixture()
def two_rows(make_rows) -> list[ProjectEntry]:
    """The 0.75 example: (10-5)*2 + (5-5)*4 = 10 remaining of 40."""
    return make_rows(("design", 10, 2, 5), ("review", 5, 4, 5))
