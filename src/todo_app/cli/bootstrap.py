# src/todo_app/cli/bootstrap.py

"""
CLI bootstrap helpers.

Composition root shared by the entry points:
- loads settings once and configures logging from them,
- resolves the database path (explicit setting or ~/.todo_app/tasks.db),
- opens the TaskStore.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import Settings, get_settings
from ..errors import StoragePathError
from ..logging_setup import level_from_name, setup_logging
from ..tasks.task_store import TaskStore, locate_storage_path

logger = logging.getLogger(__name__)


def init_logging(settings: Settings) -> None:
    setup_logging(
        console_level=level_from_name(settings.log_level),
        log_file=settings.log_file,
    )


def resolve_db_path(settings: Settings) -> Path:
    if settings.db_path is not None:
        try:
            settings.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoragePathError(f"Unable to create {settings.db_path.parent}: {exc}") from exc
        return settings.db_path
    return locate_storage_path()


def open_store(*, settings: Settings | None = None) -> TaskStore:
    """
    Open the TaskStore described by `settings`.

    Keeping settings injectable lets tests point the store at a temp directory.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    db_path = resolve_db_path(settings)
    logger.debug("Opening task store at %s", db_path)
    return TaskStore.open(db_path)
