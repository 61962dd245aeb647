# tests/test_validation.py

from __future__ import annotations

from datetime import timedelta
from uuid import uuid4

import pytest

from tasktrack.domain.task import TaskStatus, Violation, is_valid, validate_person, validate_task

from .conftest import T0, make_task


def fields(task) -> list[str]:
    return [v.field for v in validate_task(task)]


def test_valid_draft_has_no_violations() -> None:
    task = make_task(title="Valid", due_date=T0 + timedelta(days=1))

    assert validate_task(task) == []
    assert is_valid(task)


@pytest.mark.parametrize("title", ["", " ", "   ", "\t", "\n \t"])
def test_blank_title_is_rejected(title: str) -> None:
    task = make_task(title=title)

    assert validate_task(task) == [Violation("Title", "Title cannot be empty or whitespace.")]


@pytest.mark.parametrize("title", ["a", " padded ", "x" * 200])
def test_non_blank_title_is_accepted(title: str) -> None:
    assert "Title" not in fields(make_task(title=title))


@pytest.mark.parametrize(
    "offset",
    [timedelta(0), -timedelta(seconds=1), -timedelta(days=30)],
)
def test_due_date_not_after_creation_is_rejected(offset: timedelta) -> None:
    task = make_task(due_date=T0 + offset)

    assert fields(task) == ["DueDate"]
    assert validate_task(task)[0].message == "Due date must be after the creation date."


@pytest.mark.parametrize("offset", [timedelta(microseconds=1), timedelta(days=7)])
def test_due_date_after_creation_is_accepted(offset: timedelta) -> None:
    assert "DueDate" not in fields(make_task(due_date=T0 + offset))


def test_due_date_rule_uses_task_timestamp_not_clock() -> None:
    # Both dates far in the past: only their order matters.
    task = make_task(created_at=T0 - timedelta(days=400), due_date=T0 - timedelta(days=399))

    assert is_valid(task)


def test_naive_due_date_is_compared_as_utc() -> None:
    task = make_task(due_date=(T0 + timedelta(hours=1)).replace(tzinfo=None))

    assert is_valid(task)


@pytest.mark.parametrize(
    "status",
    [TaskStatus.IN_PROGRESS, TaskStatus.UNDER_REVIEW, TaskStatus.COMPLETED],
)
def test_missing_estimate_is_rejected(status: TaskStatus) -> None:
    task = make_task(status=status, assigned_to_id=uuid4(), estimated_hours=None)

    assert fields(task) == ["EstimatedHours"]


def test_estimate_messages_differ_for_completed() -> None:
    in_progress = make_task(status=TaskStatus.IN_PROGRESS, assigned_to_id=uuid4())
    completed = make_task(status=TaskStatus.COMPLETED)

    assert validate_task(in_progress)[0].message == (
        "Estimated hours must be provided for tasks in progress or under review."
    )
    assert validate_task(completed)[0].message == (
        "Completed tasks must have estimated hours defined."
    )


@pytest.mark.parametrize(
    "status",
    [TaskStatus.DRAFT, TaskStatus.ASSIGNED, TaskStatus.CANCELLED, TaskStatus.REJECTED],
)
def test_estimate_not_required(status: TaskStatus) -> None:
    task = make_task(status=status, assigned_to_id=uuid4())

    assert "EstimatedHours" not in fields(task)


@pytest.mark.parametrize(
    "status",
    [TaskStatus.ASSIGNED, TaskStatus.IN_PROGRESS, TaskStatus.UNDER_REVIEW],
)
def test_missing_assignee_is_rejected(status: TaskStatus) -> None:
    task = make_task(status=status, estimated_hours=3, assigned_to_id=None)

    assert fields(task) == ["AssignedTo"]
    assert validate_task(task)[0].message == "Task must have an assignee in the current status."


@pytest.mark.parametrize(
    "status",
    [TaskStatus.DRAFT, TaskStatus.COMPLETED, TaskStatus.CANCELLED, TaskStatus.REJECTED],
)
def test_assignee_not_required(status: TaskStatus) -> None:
    task = make_task(status=status, estimated_hours=3)

    assert "AssignedTo" not in fields(task)


def test_blank_tags_are_rejected_one_violation_each() -> None:
    task = make_task(tags=["ok", "", "  ", "fine"])

    assert fields(task) == ["Tags", "Tags"]
    assert all(v.message == "Tags cannot contain empty values." for v in validate_task(task))


def test_all_rules_run_and_keep_rule_order() -> None:
    task = make_task(
        title=" ",
        status=TaskStatus.UNDER_REVIEW,
        due_date=T0 - timedelta(days=1),
        tags=[""],
    )

    assert fields(task) == ["Title", "DueDate", "EstimatedHours", "AssignedTo", "Tags"]


def test_completed_without_estimate_or_assignee() -> None:
    task = make_task(status=TaskStatus.COMPLETED)

    assert fields(task) == ["EstimatedHours"]


def test_validation_is_repeatable() -> None:
    task = make_task(title="", tags=[" "])

    assert validate_task(task) == validate_task(task)


def test_violation_str() -> None:
    assert str(Violation("Title", "bad")) == "Title: bad"


def test_terminal_statuses() -> None:
    terminal = {s for s in TaskStatus if s.is_terminal}

    assert terminal == {TaskStatus.COMPLETED, TaskStatus.CANCELLED, TaskStatus.REJECTED}


class TestValidatePerson:
    def test_valid(self) -> None:
        assert validate_person("Jane", "jane@example.com") == []
        assert validate_person("Jane") == []

    def test_blank_name(self) -> None:
        assert [v.field for v in validate_person("  ")] == ["Name"]

    def test_long_name(self) -> None:
        assert [v.field for v in validate_person("n" * 101)] == ["Name"]

    @pytest.mark.parametrize("email", ["not-an-email", "a@b", "two@@example.com", "sp ace@x.io"])
    def test_bad_email(self, email: str) -> None:
        assert [v.field for v in validate_person("Jane", email)] == ["Email"]

    def test_long_email(self) -> None:
        email = "a" * 95 + "@x.com"
        assert [v.field for v in validate_person("Jane", email)] == ["Email"]
