"""Shared utilities for tasktrack CLI commands.

This module provides common utilities used across CLI commands:
- The per-invocation state (service and repository) stored on the Typer context
- Outcome handling (print failures, exit non-zero)
- Formatted output helpers (error, success, info)
- Task and person formatting for display

Commands branch only on ``Outcome.is_success`` and print ``message`` and
``errors``; they never inspect exception types raised by storage.
"""

from dataclasses import dataclass
from typing import TypeVar
from uuid import UUID

import typer
from pydantic import ValidationError

from tasktrack.application import TaskService
from tasktrack.domain.shared import Outcome, map_outcome, unwrap_or
from tasktrack.domain.task import Person, Priority, TaskStatus, WorkTask
from tasktrack.infrastructure.storage import JsonTaskRepository

T = TypeVar("T")

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S"]

PRIORITY_COLORS = {
    Priority.LOW: typer.colors.GREEN,
    Priority.MEDIUM: typer.colors.YELLOW,
    Priority.HIGH: typer.colors.BRIGHT_RED,
    Priority.CRITICAL: typer.colors.RED,
}

STATUS_COLORS = {
    TaskStatus.DRAFT: typer.colors.WHITE,
    TaskStatus.ASSIGNED: typer.colors.CYAN,
    TaskStatus.IN_PROGRESS: typer.colors.BLUE,
    TaskStatus.UNDER_REVIEW: typer.colors.MAGENTA,
    TaskStatus.COMPLETED: typer.colors.GREEN,
    TaskStatus.CANCELLED: typer.colors.BRIGHT_BLACK,
    TaskStatus.REJECTED: typer.colors.BRIGHT_BLACK,
}


@dataclass
class CliState:
    """Objects shared by every command of one CLI invocation."""

    repository: JsonTaskRepository
    service: TaskService


def get_state(ctx: typer.Context) -> CliState:
    """Get the CLI state set up by the main callback."""
    state = ctx.find_root().obj
    if not isinstance(state, CliState):
        print_error("tasktrack was not initialised")
        raise typer.Exit(1)
    return state


def get_service(ctx: typer.Context) -> TaskService:
    """Get the task service for this invocation."""
    return get_state(ctx).service


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message.

    Args:
        msg: Success message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    """Print a formatted info message.

    Args:
        msg: Info message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_separator(char: str = "=", width: int = 60) -> None:
    """Print a separator line.

    Args:
        char: Character to use for separator
        width: Width of the separator line
    """
    typer.echo(char * width)


def print_header(title: str, width: int = 60) -> None:
    """Print a formatted header with separators.

    Args:
        title: Header title text
        width: Width of the separator lines
    """
    print_separator("=", width)
    typer.echo(title)
    print_separator("=", width)


def print_failure(outcome: Outcome) -> None:
    """Print a failed outcome's message and each of its errors."""
    print_error(outcome.message)
    for error in outcome.errors:
        typer.echo(f"  - {error}", err=True)


def require(outcome: Outcome[T]) -> T:
    """Return the payload of a successful outcome, or exit with code 1.

    Args:
        outcome: Outcome returned by a service call.

    Returns:
        The outcome's payload.

    Raises:
        typer.Exit: If the outcome is a failure.
    """
    if not outcome.is_success:
        print_failure(outcome)
        raise typer.Exit(1)
    return outcome.value


def build_task(data: dict) -> WorkTask:
    """Build a task from CLI input, exiting with readable errors if invalid.

    Raises:
        typer.Exit: If a field fails its type-level checks.
    """
    try:
        return WorkTask(**data)
    except ValidationError as e:
        print_error("Invalid task")
        for err in e.errors():
            field = ".".join(str(part) for part in err["loc"])
            typer.echo(f"  - {field}: {err['msg']}", err=True)
        raise typer.Exit(1) from e


def people_lookup(service: TaskService) -> dict[UUID, Person]:
    """Map person ids to people, or an empty mapping if people can't be read."""
    outcome = map_outcome(service.get_all_people(), lambda people: {p.id: p for p in people})
    return unwrap_or(outcome, {})


def style_status(status: TaskStatus, width: int = 0) -> str:
    return typer.style(status.value.ljust(width), fg=STATUS_COLORS.get(status))


def style_priority(priority: Priority, width: int = 0) -> str:
    return typer.style(priority.value.ljust(width), fg=PRIORITY_COLORS.get(priority))


def format_date(value) -> str:
    return value.strftime("%Y-%m-%d") if value else "-"


def assignee_name(task: WorkTask, people: dict[UUID, Person]) -> str:
    """Resolve the assignee's display name for a task."""
    if task.assigned_to_id is None:
        return "-"
    person = people.get(task.assigned_to_id)
    return person.name if person else str(task.assigned_to_id)


def print_task_table(tasks: list[WorkTask], people: dict[UUID, Person]) -> None:
    """Print tasks as one line each.

    Columns: short id, status, priority, due date, assignee, title.
    """
    if not tasks:
        print_info("No tasks.")
        return

    typer.echo(f"{'ID':<8}  {'STATUS':<12}  {'PRIORITY':<8}  {'DUE':<10}  {'ASSIGNEE':<16}  TITLE")
    for task in tasks:
        typer.echo(
            f"{str(task.id)[:8]:<8}  {style_status(task.status, 12)}  "
            f"{style_priority(task.priority, 8)}  "
            f"{format_date(task.due_date):<10}  {assignee_name(task, people)[:16]:<16}  {task.title}"
        )


def print_task_detail(task: WorkTask, people: dict[UUID, Person]) -> None:
    """Print every field of a task."""
    print_header(task.title)
    typer.echo(f"ID:              {task.id}")
    typer.echo(f"Status:          {style_status(task.status)}")
    typer.echo(f"Priority:        {style_priority(task.priority)}")
    typer.echo(f"Assigned to:     {assignee_name(task, people)}")
    typer.echo(f"Created:         {task.created_at.strftime('%Y-%m-%d %H:%M')}")
    typer.echo(f"Due:             {format_date(task.due_date)}")
    hours = task.estimated_hours if task.estimated_hours is not None else "-"
    typer.echo(f"Estimated hours: {hours}")
    typer.echo(f"Tags:            {', '.join(task.tags) if task.tags else '-'}")
    if task.description:
        typer.echo("")
        typer.echo(task.description)
    print_separator()


def print_people_table(people: list[Person]) -> None:
    """Print people as one line each."""
    if not people:
        print_info("No people.")
        return

    typer.echo(f"{'ID':<36}  {'NAME':<24}  EMAIL")
    for person in people:
        typer.echo(f"{str(person.id):<36}  {person.name:<24}  {person.email or '-'}")


def resolve_task_id(service: TaskService, value: str) -> UUID:
    """Resolve a full task id or a unique id prefix, as shown by ``list``.

    Raises:
        typer.Exit: If nothing or more than one task matches.
    """
    try:
        return UUID(value)
    except ValueError:
        pass

    prefix = value.lower()
    tasks = require(service.get_all())
    matches = [t.id for t in tasks if t.id is not None and str(t.id).startswith(prefix)]
    if len(matches) == 1:
        return matches[0]
    if not matches:
        print_error(f"No task with ID {value}")
    else:
        print_error(f"ID prefix '{value}' matches {len(matches)} tasks")
    raise typer.Exit(1)


__all__ = [
    "CliState",
    "DATE_FORMATS",
    "get_state",
    "get_service",
    "print_error",
    "print_success",
    "print_info",
    "print_separator",
    "print_header",
    "print_failure",
    "require",
    "build_task",
    "people_lookup",
    "print_task_table",
    "print_task_detail",
    "print_people_table",
    "resolve_task_id",
]
