# src/todo_list/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it wires settings and a fresh
TodoListManager into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_manager import TodoListManager

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    state = AppState(settings=settings, manager=TodoListManager())
    logger.debug("State created app=%s", getattr(settings, "app_name", "todo"))
    return state
