# src/todo_list/tasks/task_manager.py

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from .task_errors import InvalidFilterError, NotFoundError, ValidationError
from .task_models import Task, TaskFilter

logger = logging.getLogger(__name__)

# Checked in order by update_task; the first one present wins.
DUE_DATE_KEYS = ("due_date", "dueDate")


class TodoListManager:
    """
    In-memory task list.

    - tasks keep insertion order
    - ids come from a counter starting at 1 and are never reused
    - lookups are linear scans (the list is expected to be small)

    Not thread-safe: callers sharing one manager must serialize access.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    @property
    def next_id(self) -> int:
        return self._next_id

    # ---- low-level helpers ----

    @staticmethod
    def _is_task_id(task_id: object) -> bool:
        return isinstance(task_id, int) and not isinstance(task_id, bool)

    def _index_of(self, task_id: object) -> int | None:
        if not self._is_task_id(task_id):
            return None
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def _require(self, task_id: object, action: str) -> Task:
        task = self.find_by_id(task_id)
        if task is None:
            raise NotFoundError(task_id, action)
        return task

    # ---- public API ----

    def add_task(self, description: str, due_date: str) -> Task:
        """
        Create a task with the next id and append it.

        Validation failures are logged, then re-raised; the counter and the
        list are left untouched.
        """
        try:
            task = Task(self._next_id, description, due_date)
        except ValidationError as e:
            logger.error("Error adding task: %s", e)
            raise

        self._tasks.append(task)
        self._next_id += 1
        logger.debug("Task added id=%s due_date=%s", task.id, task.due_date)
        return task

    def find_by_id(self, task_id: object) -> Task | None:
        if not self._is_task_id(task_id):
            logger.warning("Attempted to find task with non-numeric ID: %r", task_id)
            return None
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def mark_task_complete(self, task_id: int) -> Task:
        task = self._require(task_id, "mark as complete")
        task.mark_complete()
        return task

    def mark_task_incomplete(self, task_id: int) -> Task:
        task = self._require(task_id, "mark as incomplete")
        task.mark_incomplete()
        return task

    def list_tasks(self, filter_status: str = TaskFilter.ALL) -> list[Task]:
        """
        Return a new list of tasks matching the filter, in list order.

        The returned list is a copy; the Task objects in it are shared with
        the manager.
        """
        selected = TaskFilter.parse(filter_status)
        if selected is None:
            raise InvalidFilterError(filter_status, [f.value for f in TaskFilter])

        if selected is TaskFilter.COMPLETED:
            return [t for t in self._tasks if t.completed]
        if selected is TaskFilter.PENDING:
            return [t for t in self._tasks if not t.completed]
        return list(self._tasks)

    def delete_task(self, task_id: int) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            raise NotFoundError(task_id, "delete")
        del self._tasks[idx]
        logger.debug("Task deleted id=%s", task_id)
        return True

    def update_task(self, task_id: int, updates: Mapping[str, Any]) -> Task:
        """
        Apply "description" and/or "due_date" from `updates`.

        "dueDate" is accepted for the due date when "due_date" is absent.
        Description goes first. If the due date is then rejected, the new
        description stays in place.
        """
        task = self._require(task_id, "update")

        if "description" in updates:
            task.update_description(updates["description"])
        for key in DUE_DATE_KEYS:
            if key in updates:
                task.update_due_date(updates[key])
                break
        return task
