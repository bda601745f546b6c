# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_app.config import reset_settings
from todo_app.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the CLI bootstrap.

    A SimpleNamespace rather than the real config keeps tests independent of
    the caller's environment and .env files.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        db_path=tmp_path / "data" / "tasks.db",
        log_file=None,
    )


@pytest.fixture()
def store(tmp_path: Path) -> Iterator[TaskStore]:
    s = TaskStore(tmp_path / "tasks.db")
    try:
        yield s
    finally:
        s.close()


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    reset_settings()
    yield
    reset_settings()
