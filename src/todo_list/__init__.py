"""In-memory task list: validated Task records and a TodoListManager."""

from .tasks.task_errors import InvalidFilterError, NotFoundError, TodoError, ValidationError
from .tasks.task_manager import TodoListManager
from .tasks.task_models import Task, TaskFilter

__all__ = [
    "InvalidFilterError",
    "NotFoundError",
    "Task",
    "TaskFilter",
    "TodoError",
    "TodoListManager",
    "ValidationError",
]
