# src/todo_app/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore

CommandHandler = Callable[[TaskStore, list[str]], str]

logger = logging.getLogger(__name__)


def format_tasks(tasks: Iterable[Task]) -> str:
    return "\n".join(t.render() for t in tasks)


class CommandRegistry:
    """Slash-command registry used by the console loop (/add, /list, /done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, store: TaskStore, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        Storage errors propagate to the caller.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        logger.debug("Command /%s args=%s", name, args)
        return handler(store, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str]) -> int | None:
    if len(args) != 1:
        return None
    try:
        return int(args[0])
    except ValueError:
        return None


def cmd_help(store: TaskStore, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(store: TaskStore, args: list[str]) -> str:
    if not args:
        return "Usage: /add <description>"
    task_id = store.add(" ".join(args))
    return f"Added task {task_id}."


def cmd_list(store: TaskStore, args: list[str]) -> str:
    tasks = store.list()
    if not tasks:
        return "No tasks."
    return format_tasks(tasks)


def cmd_done(store: TaskStore, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>"
    store.complete(task_id)
    return f"Task {task_id} marked as completed."


def cmd_delete(store: TaskStore, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /delete <id>"
    store.delete(task_id)
    return f"Task {task_id} deleted."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <description>.")
registry.register("list", cmd_list, help_text="List all tasks.", aliases=["ls"])
registry.register("done", cmd_done, help_text="Mark a task completed: /done <id>.", aliases=["complete"])
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
