# src/todo_app/config.py

"""Settings loaded from environment variables (+ optional .env).

Nothing here is required: with no variables set the app stores tasks in
~/.todo_app/tasks.db and logs to stderr only.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    app_name: str
    log_level: str

    # None -> locate_storage_path() default under the home directory
    db_path: Path | None
    # None -> console logging only
    log_file: Path | None

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "todo").strip() or "todo",
            log_level=_env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO",
            db_path=_env_path(_k("DB_PATH")),
            log_file=_env_path(_k("LOG_FILE")),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(find_dotenv(usecwd=True), override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() re-reads the environment."""
    global _SETTINGS
    _SETTINGS = None
