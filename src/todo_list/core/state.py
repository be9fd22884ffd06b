# src/todo_list/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_manager import TodoListManager


@dataclass
class AppState:
    # Settings object (config.Settings or any object with the same attributes).
    settings: Any
    manager: TodoListManager
