# src/todo_list/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from .task_errors import ValidationError

# Syntax only: "2024-13-32" is accepted.
DUE_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class TaskFilter(StrEnum):
    """Selection used by TodoListManager.list_tasks."""

    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"

    @classmethod
    def parse(cls, raw: object) -> TaskFilter | None:
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw.lower())
        except ValueError:
            return None


def _is_blank(value: object) -> bool:
    return not isinstance(value, str) or not value.strip()


def _is_due_date(value: object) -> bool:
    return isinstance(value, str) and DUE_DATE_RE.fullmatch(value) is not None


@dataclass(slots=True, eq=False)
class Task:
    """
    A single to-do item.

    Notes:
    - equality is identity: two tasks with the same fields are still different tasks
    - description is stored trimmed and is never blank
    - due_date is stored verbatim and always looks like YYYY-MM-DD
    - id cannot be reassigned once set
    """

    id: int
    description: str
    due_date: str
    completed: bool = False

    def __post_init__(self) -> None:
        if _is_blank(self.description):
            raise ValidationError("Task description cannot be empty.")
        if not _is_due_date(self.due_date):
            raise ValidationError("Invalid or missing due date. Expected format YYYY-MM-DD.")
        self.description = self.description.strip()

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and hasattr(self, "id"):
            raise AttributeError("Task id is read-only")
        object.__setattr__(self, name, value)

    def mark_complete(self) -> None:
        self.completed = True

    def mark_incomplete(self) -> None:
        self.completed = False

    def update_description(self, new_description: str) -> None:
        if _is_blank(new_description):
            raise ValidationError("New task description cannot be empty.")
        self.description = new_description.strip()

    def update_due_date(self, new_due_date: str) -> None:
        if not _is_due_date(new_due_date):
            raise ValidationError("Invalid or missing new due date. Expected format YYYY-MM-DD.")
        self.due_date = new_due_date

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "due_date": self.due_date,
            "completed": self.completed,
        }
