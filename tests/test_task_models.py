# tests/test_task_models.py

from __future__ import annotations

import pytest

from todo_list.tasks.task_errors import ValidationError
from todo_list.tasks.task_models import Task, TaskFilter


def test_task_created_with_valid_fields() -> None:
    task = Task(1, "  Test Task  ", "2024-12-31")

    assert task.id == 1
    assert task.description == "Test Task"
    assert task.due_date == "2024-12-31"
    assert task.completed is False


def test_task_accepts_explicit_completed_flag() -> None:
    assert Task(3, "Done already", "2024-01-01", completed=True).completed is True


@pytest.mark.parametrize("description", ["", "   ", None, 42])
def test_task_rejects_blank_or_non_text_description(description) -> None:
    with pytest.raises(ValidationError, match="Task description cannot be empty."):
        Task(1, description, "2024-12-31")


@pytest.mark.parametrize(
    "due_date",
    ["2024/12/31", "31-12-2024", "", None, "2024-1-01", " 2024-01-01", "2024-01-01\n", "２０２４-01-01"],
)
def test_task_rejects_malformed_due_date(due_date) -> None:
    with pytest.raises(ValidationError, match="Invalid or missing due date"):
        Task(1, "Valid Desc", due_date)


def test_due_date_is_checked_for_shape_only() -> None:
    assert Task(1, "Odd date", "2024-13-32").due_date == "2024-13-32"


def test_task_methods_update_fields() -> None:
    task = Task(1, "Initial", "2024-01-01")

    task.mark_complete()
    task.mark_complete()
    assert task.completed is True

    task.mark_incomplete()
    assert task.completed is False

    task.update_description("  Updated Desc ")
    assert task.description == "Updated Desc"

    task.update_due_date("2025-01-01")
    assert task.due_date == "2025-01-01"


def test_failed_updates_leave_task_unchanged() -> None:
    task = Task(1, "Initial", "2024-01-01")

    with pytest.raises(ValidationError, match="New task description cannot be empty."):
        task.update_description("  ")
    with pytest.raises(ValidationError, match="Invalid or missing new due date"):
        task.update_due_date("tomorrow")

    assert task.description == "Initial"
    assert task.due_date == "2024-01-01"


def test_task_id_is_read_only() -> None:
    task = Task(7, "Pinned", "2024-01-01")

    with pytest.raises(AttributeError):
        task.id = 8
    assert task.id == 7


def test_validation_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Task(1, "", "2024-01-01")


def test_to_dict() -> None:
    task = Task(2, "Report", "2024-08-20")
    assert task.to_dict() == {
        "id": 2,
        "description": "Report",
        "due_date": "2024-08-20",
        "completed": False,
    }


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("all", TaskFilter.ALL),
        ("COMPLETED", TaskFilter.COMPLETED),
        ("Pending", TaskFilter.PENDING),
        ("urgent", None),
        (None, None),
    ],
)
def test_task_filter_parse(raw, expected) -> None:
    assert TaskFilter.parse(raw) is expected


def test_tasks_with_equal_fields_are_distinct() -> None:
    a = Task(5, "a", "2024-01-01")
    b = Task(5, "a", "2024-01-01")

    assert a != b
    assert a == a
    assert len({a, b}) == 2
