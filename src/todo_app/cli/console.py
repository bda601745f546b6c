# src/todo_app/cli/console.py

"""
Interactive console for the task store.

Lines starting with "/" are commands (see /help); any other line is added
as a new task. /exit, /quit, EOF or Ctrl+C end the loop.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..config import get_settings
from ..errors import TodoAppError
from ..tasks.task_store import TaskStore
from .bootstrap import init_logging, open_store
from .commands import CommandRegistry
from .commands import registry as command_registry

logger = logging.getLogger(__name__)


def run_console_loop(
    store: TaskStore,
    *,
    input_fn: Callable[[str], str] | None = None,
    registry: CommandRegistry = command_registry,
) -> None:
    read_line = input_fn or input
    logger.info("Console started db=%s", store.db_path)
    print("Type a task to add it. Use /help for commands. Use /exit to quit.")

    while True:
        try:
            line = read_line("todo> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not line:
            continue

        if line.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = registry.handle(store, line)
            if reply is None:
                task_id = store.add(line)
                reply = f"Added task {task_id}."
        except TodoAppError as e:
            logger.error("Command failed: %s", e)
            print(f"Error: {e}")
            continue

        print(reply)

    logger.info("Console finished.")


def main() -> None:
    settings = get_settings()
    init_logging(settings)

    with open_store(settings=settings) as store:
        run_console_loop(store)


if __name__ == "__main__":
    main()
