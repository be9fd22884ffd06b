# src/todo_list/tasks/task_errors.py

from __future__ import annotations

from collections.abc import Iterable


class TodoError(Exception):
    """Base class for every error raised by the task list."""


class ValidationError(TodoError, ValueError):
    """A description or due date was rejected. Nothing was mutated."""


class NotFoundError(TodoError, LookupError):
    def __init__(self, task_id: object, action: str) -> None:
        self.task_id = task_id
        self.action = action
        super().__init__(f"Task with ID {task_id} not found. Cannot {action}.")


class InvalidFilterError(TodoError, ValueError):
    def __init__(self, value: object, allowed: Iterable[str]) -> None:
        self.value = value
        self.allowed = tuple(allowed)
        choices = ", ".join(f"'{a}'" for a in self.allowed[:-1])
        super().__init__(
            f'Invalid filter status: "{value}". Use {choices}, or \'{self.allowed[-1]}\'.'
        )
