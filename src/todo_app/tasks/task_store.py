# src/todo_app/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from pathlib import Path
from types import TracebackType
from typing import Any

from ..errors import HomeDirectoryError, StorageError, StoragePathError
from .task_models import Task

logger = logging.getLogger(__name__)

APP_DIR_NAME = ".todo_app"
DB_FILE_NAME = "tasks.db"

# SQLite INTEGER is a signed 64-bit value; ids outside this range cannot exist.
_MIN_ROWID = -(2**63)
_MAX_ROWID = 2**63 - 1


def locate_storage_path(
    home: str | Path | None = None,
    *,
    app_dir_name: str = APP_DIR_NAME,
    db_file_name: str = DB_FILE_NAME,
) -> Path:
    """
    Resolve `<home>/.todo_app/tasks.db`, creating the app directory if needed.

    `home` defaults to the current user's home directory. Raises
    HomeDirectoryError if it cannot be determined and StoragePathError if the
    directory cannot be created.
    """
    if home is None:
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as exc:
            raise HomeDirectoryError("Unable to find user home directory") from exc

    app_dir = Path(home) / app_dir_name
    try:
        app_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StoragePathError(f"Unable to create {app_dir}: {exc}") from exc

    return app_dir / db_file_name


class TaskStore:
    """
    SQLite task store.

    One connection is opened in the constructor and kept until close().
    Every operation is a single statement, committed immediately.

    The parent directory of `db_path` must exist; use locate_storage_path()
    to get a default location with the directory already created.
    """

    def __init__(self, db_path: str | Path, *, timeout: float = 5.0) -> None:
        self._db_path = Path(db_path)
        self._timeout = float(timeout)
        self._conn: sqlite3.Connection | None = None
        self._conn = self._get_conn()
        try:
            self._ensure_schema()
            total = self.count()
        except StorageError:
            self.close()
            raise
        logger.info("TaskStore ready db=%s total=%s", self._db_path, total)

    @classmethod
    def open(cls, db_path: str | Path, *, timeout: float = 5.0) -> TaskStore:
        return cls(db_path, timeout=timeout)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        if self._conn is None:
            return
        try:
            self._conn.close()
        except sqlite3.Error as exc:
            raise StorageError(f"Failed to close {self._db_path}: {exc}") from exc
        finally:
            self._conn = None
        logger.debug("TaskStore closed db=%s", self._db_path)

    def __enter__(self) -> TaskStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(str(self._db_path), timeout=self._timeout)
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot open {self._db_path}: {exc}") from exc
        conn.row_factory = sqlite3.Row
        return conn

    def _execute(self, sql: str, params: tuple[Any, ...] = ()) -> sqlite3.Cursor:
        if self._conn is None:
            raise StorageError(f"TaskStore for {self._db_path} is closed")
        try:
            cur = self._conn.execute(sql, params)
            self._conn.commit()
        except (sqlite3.Error, ValueError) as exc:
            # ValueError covers text sqlite cannot encode (e.g. lone surrogates).
            with contextlib.suppress(sqlite3.Error):
                self._conn.rollback()
            raise StorageError(f"{exc} (db={self._db_path})") from exc
        return cur

    def _ensure_schema(self) -> None:
        self._execute(
            """
            CREATE TABLE IF NOT EXISTS tasks (
                id          INTEGER PRIMARY KEY,
                description TEXT NOT NULL,
                completed   BOOLEAN NOT NULL
            )
            """
        )

    @staticmethod
    def _storable_id(task_id: int) -> int | None:
        n = int(task_id)
        return n if _MIN_ROWID <= n <= _MAX_ROWID else None

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            description=str(row["description"]),
            completed=bool(row["completed"]),
        )

    # ---- public API ----

    def count(self) -> int:
        (n,) = self._execute("SELECT COUNT(*) FROM tasks").fetchone()
        return int(n)

    def add(self, description: str) -> int:
        cur = self._execute(
            "INSERT INTO tasks (description, completed) VALUES (?, ?)",
            (description, False),
        )
        rowid = cur.lastrowid
        if rowid is None:
            raise StorageError("SQLite did not return lastrowid for tasks insert")
        task_id = int(rowid)
        logger.debug("Task added id=%s", task_id)
        return task_id

    def list(self) -> list[Task]:
        rows = self._execute("SELECT id, description, completed FROM tasks ORDER BY id").fetchall()
        return [self._row_to_task(r) for r in rows]

    def complete(self, task_id: int) -> None:
        """Mark a task completed. Unknown ids are ignored."""
        row_id = self._storable_id(task_id)
        if row_id is None:
            logger.debug("Task complete id=%s out of range, ignored", task_id)
            return
        cur = self._execute("UPDATE tasks SET completed = 1 WHERE id = ?", (row_id,))
        logger.debug("Task complete id=%s updated=%s", task_id, cur.rowcount)

    def delete(self, task_id: int) -> None:
        """Delete a task. Unknown ids are ignored."""
        row_id = self._storable_id(task_id)
        if row_id is None:
            logger.debug("Task delete id=%s out of range, ignored", task_id)
            return
        cur = self._execute("DELETE FROM tasks WHERE id = ?", (row_id,))
        logger.debug("Task delete id=%s deleted=%s", task_id, cur.rowcount)
