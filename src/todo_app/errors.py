# src/todo_app/errors.py

"""
Error taxonomy for the task tracker.

Every failure surfaces as a TodoAppError subclass carrying a `kind`, so callers
(and tests) can tell environment, filesystem and storage failures apart while
still aborting on any of them.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    ENVIRONMENT = "environment"  # home directory cannot be resolved
    IO = "io"  # storage directory cannot be created/accessed
    STORAGE = "storage"  # sqlite open/schema/query failure


class TodoAppError(Exception):
    kind: ErrorKind = ErrorKind.STORAGE

    def __str__(self) -> str:
        msg = super().__str__()
        return f"[{self.kind}] {msg}" if msg else f"[{self.kind}]"


class HomeDirectoryError(TodoAppError):
    kind = ErrorKind.ENVIRONMENT


class StoragePathError(TodoAppError, OSError):
    kind = ErrorKind.IO


class StorageError(TodoAppError):
    kind = ErrorKind.STORAGE
