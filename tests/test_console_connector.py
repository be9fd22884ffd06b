# tests/test_console_connector.py

from __future__ import annotations

import pytest

from todo_list.connectors.console_connector import run_console_loop


def _feed(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> None:
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_console_loop_runs_commands_until_exit(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["/add 2024-08-15 Buy milk", "", "hello", "/exit", "/add 2024-01-01 Never"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Added: [ ] #1 2024-08-15 Buy milk" in out
    assert "Commands start with '/'" in out
    assert [t.description for t in state.manager] == ["Buy milk"]


def test_console_loop_stops_on_eof(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["/add 2024-08-15 One"])

    run_console_loop(state)

    assert len(state.manager) == 1


def test_console_loop_reports_handler_crash(state, monkeypatch, capsys) -> None:
    from todo_list.cli import commands

    def boom(line_state, args):
        raise RuntimeError("boom")

    monkeypatch.setitem(commands.registry._handlers, "crash", boom)
    _feed(monkeypatch, ["/crash"])

    run_console_loop(state)

    assert "Internal error while handling a command." in capsys.readouterr().out
