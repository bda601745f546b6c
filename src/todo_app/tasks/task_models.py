# src/todo_app/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    description: str
    completed: bool = False

    def render(self) -> str:
        """One listing line: `<id>: <description> [x]` (or `[ ]` when open)."""
        mark = "x" if self.completed else " "
        return f"{self.id}: {self.description} [{mark}]"
