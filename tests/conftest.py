# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_list.core.state import AppState
from todo_list.tasks.task_manager import TodoListManager
from todo_list.tasks.task_models import TaskFilter


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        console_enabled=True,
        default_filter=TaskFilter.ALL,
    )


@pytest.fixture()
def manager() -> TodoListManager:
    return TodoListManager()


@pytest.fixture()
def state(settings: SimpleNamespace, manager: TodoListManager) -> AppState:
    return AppState(settings=settings, manager=manager)
