# src/todo_app/cli/main.py

"""
CLI entrypoint.

Initializes logging, opens the task store and runs the demo sequence:
add two tasks, list them, complete task 1, list again.
Any failure propagates and aborts the run with a traceback.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..tasks.task_store import TaskStore
from .bootstrap import init_logging, open_store
from .commands import format_tasks

logger = logging.getLogger(__name__)

DEMO_TASKS = ("Learn Python", "Build a to-do app")


def print_tasks(store: TaskStore, title: str) -> None:
    print(f"{title}:")
    listing = format_tasks(store.list())
    if listing:
        print(listing)


def run_demo(store: TaskStore) -> None:
    for description in DEMO_TASKS:
        store.add(description)

    print_tasks(store, "Tasks")

    store.complete(1)

    print_tasks(store, "Updated Tasks")


def main() -> None:
    settings = get_settings()
    init_logging(settings)

    logger.info("Starting %s...", settings.app_name)

    with open_store(settings=settings) as store:
        run_demo(store)

    logger.info("Bye.")


if __name__ == "__main__":
    main()
