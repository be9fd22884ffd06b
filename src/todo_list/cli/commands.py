# src/todo_list/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_errors import NotFoundError, TodoError
from ..tasks.task_models import Task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandArgs(list):
    """Whitespace-split arguments that keep the raw text they came from."""

    def __init__(self, raw: str) -> None:
        super().__init__(raw.split())
        self.raw = raw

    def rest(self, skip: int) -> str:
        """Raw text after the first `skip` arguments, inner whitespace kept."""
        parts = self.raw.split(maxsplit=skip)
        return parts[skip] if len(parts) > skip else ""


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

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

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Task errors become the reply text; anything else propagates.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = CommandArgs(parts[1] if len(parts) > 1 else "")

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)
            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except TodoError as e:
            logger.debug("/%s rejected: %s", name, e)
            return str(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"[{mark}] #{task.id} {task.due_date} {task.description}"


def _parse_id(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    manager = state.manager
    done = len(manager.list_tasks("completed"))
    return (
        "Status:\n"
        f"  Tasks: {len(manager)} ({done} completed, {len(manager) - done} pending)\n"
        f"  Next id: {manager.next_id}\n"
        f"  Default filter: {getattr(state.settings, 'default_filter', 'all')}"
    )


def cmd_add(state: AppState, args: CommandArgs) -> str:
    """
    /add 2024-08-15 Buy milk
    """
    if len(args) < 2:
        return "Usage: /add YYYY-MM-DD description"
    task = state.manager.add_task(args.rest(1), args[0])
    return f"Added: {format_task(task)}"


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list            -> default filter from settings
    /list completed  -> only completed
    /list pending    -> only pending
    """
    filter_status = args[0] if args else str(getattr(state.settings, "default_filter", "all"))
    tasks = state.manager.list_tasks(filter_status)
    if not tasks:
        return f"No tasks ({filter_status.lower()})."
    return "\n".join(format_task(t) for t in tasks)


def cmd_show(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args[0]) if args else None
    if task_id is None:
        return "Usage: /show ID"
    task = state.manager.find_by_id(task_id)
    if task is None:
        return f"Task with ID {task_id} not found."
    fields = task.to_dict()
    lines = [f"Task #{fields.pop('id')}:"]
    lines.extend(f"  {key}: {value}" for key, value in fields.items())
    return "\n".join(lines)


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args[0]) if args else None
    if task_id is None:
        return "Usage: /done ID"
    return f"Completed: {format_task(state.manager.mark_task_complete(task_id))}"


def cmd_undo(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args[0]) if args else None
    if task_id is None:
        return "Usage: /undo ID"
    return f"Reopened: {format_task(state.manager.mark_task_incomplete(task_id))}"


def cmd_delete(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    """
    /del 3        -> delete one task
    /del 3 4 7    -> delete several; each outcome is emitted as it happens
    """
    task_ids = [_parse_id(a) for a in args]
    if not task_ids or None in task_ids:
        return "Usage: /del ID [ID ...]"

    if len(task_ids) == 1:
        state.manager.delete_task(task_ids[0])
        return f"Deleted task #{task_ids[0]}."

    deleted = 0
    for task_id in task_ids:
        try:
            state.manager.delete_task(task_id)
        except NotFoundError as e:
            note = str(e)
        else:
            deleted += 1
            note = f"Deleted task #{task_id}."
        if emit:
            emit(note)
    logger.debug("Bulk delete ids=%s deleted=%d", task_ids, deleted)
    return f"Deleted {deleted} of {len(task_ids)} tasks."


def cmd_desc(state: AppState, args: CommandArgs) -> str:
    task_id = _parse_id(args[0]) if args else None
    if task_id is None or len(args) < 2:
        return "Usage: /desc ID new description"
    task = state.manager.update_task(task_id, {"description": args.rest(1)})
    return f"Updated: {format_task(task)}"


def cmd_due(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args[0]) if args else None
    if task_id is None or len(args) != 2:
        return "Usage: /due ID YYYY-MM-DD"
    task = state.manager.update_task(task_id, {"due_date": args[1]})
    return f"Updated: {format_task(task)}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task counts and settings.")
registry.register("add", cmd_add, help_text="Add a task: /add YYYY-MM-DD description.")
registry.register(
    "list", cmd_list, help_text="List tasks: /list [all | completed | pending].", aliases=["ls"]
)
registry.register("show", cmd_show, help_text="Show one task: /show ID.")
registry.register("done", cmd_done, help_text="Mark a task complete: /done ID.")
registry.register("undo", cmd_undo, help_text="Mark a task pending again: /undo ID.")
registry.register("del", cmd_delete, help_text="Delete tasks: /del ID [ID ...].", aliases=["rm"])
registry.register("desc", cmd_desc, help_text="Change a description: /desc ID text.")
registry.register("due", cmd_due, help_text="Change a due date: /due ID YYYY-MM-DD.")
