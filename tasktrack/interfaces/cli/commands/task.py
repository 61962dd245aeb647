"""Task management CLI commands.

Commands for the task lifecycle: listing, showing, adding, editing and
deleting tasks, plus filtering, searching and exporting task lists.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional
from uuid import UUID

import typer

from tasktrack.application import TaskService
from tasktrack.domain.task import Priority, TaskStatus
from tasktrack.infrastructure.export import ExportFormat, export_tasks
from tasktrack.infrastructure.storage import StorageError
from tasktrack.interfaces.cli.common import (
    DATE_FORMATS,
    build_task,
    get_service,
    people_lookup,
    print_error,
    print_failure,
    print_info,
    print_success,
    print_task_detail,
    print_task_table,
    require,
    resolve_task_id,
)

app = typer.Typer(help="Task management commands")


# =============================================================================
# Helpers
# =============================================================================


def _resolve_person_id(service: TaskService, value: str) -> UUID:
    """Resolve a person by full id, id prefix or exact name (case-insensitive)."""
    people = require(service.get_all_people())
    lowered = value.lower()
    matches = [
        p.id for p in people if str(p.id).startswith(lowered) or p.name.lower() == lowered
    ]
    if len(matches) == 1:
        return matches[0]
    if not matches:
        print_error(f"No person matching '{value}'")
    else:
        print_error(f"'{value}' matches {len(matches)} people")
    raise typer.Exit(1)


def _assignee_id(
    service: TaskService,
    assignee: str | None,
    new_assignee: str | None,
) -> UUID | None:
    """Pick the assignee from an existing person or quick-add a new one."""
    if assignee and new_assignee:
        print_error("Use either --assignee or --new-assignee, not both")
        raise typer.Exit(1)
    if new_assignee:
        person = require(service.add_person(new_assignee))
        print_info(f"Added person {person.name} ({person.id})")
        return person.id
    if assignee:
        return _resolve_person_id(service, assignee)
    return None


def _print_tasks(service: TaskService, outcome) -> None:
    tasks = require(outcome)
    print_task_table(tasks, people_lookup(service))
    print_info(outcome.message)


# =============================================================================
# Commands
# =============================================================================


@app.command("list")
def list_tasks(ctx: typer.Context) -> None:
    """List all tasks, newest first."""
    service = get_service(ctx)
    _print_tasks(service, service.get_all())


@app.command("show")
def show(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID or unique ID prefix"),
) -> None:
    """Show every field of a task."""
    service = get_service(ctx)
    task = require(service.get_by_id(resolve_task_id(service, task_id)))
    print_task_detail(task, people_lookup(service))


@app.command("add")
def add(
    ctx: typer.Context,
    title: str = typer.Option(..., "--title", help="Task title"),
    description: str = typer.Option("", "--description", "-d", help="Task description"),
    status: Optional[TaskStatus] = typer.Option(None, "--status", "-s", help="Initial status"),
    priority: Optional[Priority] = typer.Option(None, "--priority", "-p", help="Priority"),
    due: Optional[datetime] = typer.Option(None, "--due", formats=DATE_FORMATS, help="Due date"),
    hours: Optional[int] = typer.Option(None, "--hours", help="Estimated hours"),
    assignee: Optional[str] = typer.Option(
        None, "--assignee", "-a", help="Person ID, ID prefix or name"
    ),
    new_assignee: Optional[str] = typer.Option(
        None, "--new-assignee", help="Add a new person with this name and assign them"
    ),
    tags: Optional[list[str]] = typer.Option(None, "--tag", "-t", help="Tag (repeatable)"),
) -> None:
    """Create a new task.

    Example:
        tasktrack task add --title "Write docs" --priority high --tag docs
    """
    service = get_service(ctx)

    data: dict = {"title": title, "description": description, "tags": tags or []}
    if status is not None:
        data["status"] = status
    if priority is not None:
        data["priority"] = priority
    if due is not None:
        data["due_date"] = due
    if hours is not None:
        data["estimated_hours"] = hours

    task = build_task(data)
    assigned_to_id = _assignee_id(service, assignee, new_assignee)
    if assigned_to_id is not None:
        task = task.model_copy(update={"assigned_to_id": assigned_to_id})

    outcome = service.create(task)
    created = require(outcome)
    print_success(f"{outcome.message}: {created.id}")


@app.command("edit")
def edit(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID or unique ID prefix"),
    title: Optional[str] = typer.Option(None, "--title", help="New title"),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="New description"),
    status: Optional[TaskStatus] = typer.Option(None, "--status", "-s", help="New status"),
    priority: Optional[Priority] = typer.Option(None, "--priority", "-p", help="New priority"),
    due: Optional[datetime] = typer.Option(None, "--due", formats=DATE_FORMATS, help="New due date"),
    clear_due: bool = typer.Option(False, "--clear-due", help="Remove the due date"),
    hours: Optional[int] = typer.Option(None, "--hours", help="New estimated hours"),
    assignee: Optional[str] = typer.Option(
        None, "--assignee", "-a", help="Person ID, ID prefix or name"
    ),
    new_assignee: Optional[str] = typer.Option(
        None, "--new-assignee", help="Add a new person with this name and assign them"
    ),
    unassign: bool = typer.Option(False, "--unassign", help="Remove the assignee"),
    tags: Optional[list[str]] = typer.Option(
        None, "--tag", "-t", help="Replace tags (repeatable)"
    ),
    clear_tags: bool = typer.Option(False, "--clear-tags", help="Remove all tags"),
) -> None:
    """Edit a task.

    The task is loaded, the given fields are replaced, and the complete
    record is saved back.
    """
    service = get_service(ctx)
    existing = require(service.get_by_id(resolve_task_id(service, task_id)))

    data = existing.model_dump()
    if title is not None:
        data["title"] = title
    if description is not None:
        data["description"] = description
    if status is not None:
        data["status"] = status
    if priority is not None:
        data["priority"] = priority
    if clear_due:
        data["due_date"] = None
    elif due is not None:
        data["due_date"] = due
    if hours is not None:
        data["estimated_hours"] = hours
    if clear_tags:
        data["tags"] = []
    elif tags:
        data["tags"] = tags

    task = build_task(data)
    if unassign:
        task = task.model_copy(update={"assigned_to_id": None})
    else:
        assigned_to_id = _assignee_id(service, assignee, new_assignee)
        if assigned_to_id is not None:
            task = task.model_copy(update={"assigned_to_id": assigned_to_id})

    outcome = service.update(task)
    require(outcome)
    print_success(outcome.message)


@app.command("delete")
def delete(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID or unique ID prefix"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a task."""
    service = get_service(ctx)
    resolved = resolve_task_id(service, task_id)

    if not yes:
        found = service.get_by_id(resolved)
        label = found.value.title if found.is_success else str(resolved)
        typer.confirm(f"Are you sure you want to delete '{label}'?", abort=True)

    outcome = service.delete(resolved)
    if not outcome.is_success:
        print_failure(outcome)
        raise typer.Exit(1)
    print_success(outcome.message)


@app.command("filter")
def filter_tasks(
    ctx: typer.Context,
    status: Optional[TaskStatus] = typer.Option(None, "--status", "-s", help="Status to match"),
    priority: Optional[Priority] = typer.Option(None, "--priority", "-p", help="Priority to match"),
    person: Optional[str] = typer.Option(
        None, "--person", help="Assignee ID, ID prefix or name"
    ),
) -> None:
    """Filter tasks by status, priority or assignee.

    All three criteria together must all match. With fewer, only the first
    given of status, priority, person is applied.
    """
    service = get_service(ctx)
    person_id = _resolve_person_id(service, person) if person else None
    _print_tasks(service, service.filter(status, priority, person_id))


@app.command("search")
def search(
    ctx: typer.Context,
    term: str = typer.Argument("", help="Text to look for in titles and descriptions"),
) -> None:
    """Search task titles and descriptions (case-insensitive)."""
    service = get_service(ctx)
    _print_tasks(service, service.search(term))


@app.command("export")
def export(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Destination file"),
    fmt: ExportFormat = typer.Option(ExportFormat.CSV, "--format", "-f", help="File format"),
    status: Optional[TaskStatus] = typer.Option(
        None, "--status", "-s", help="Only tasks with this status"
    ),
    priority: Optional[Priority] = typer.Option(
        None, "--priority", "-p", help="Only tasks with this priority"
    ),
    term: Optional[str] = typer.Option(None, "--search", help="Only tasks matching this text"),
) -> None:
    """Export tasks to a CSV or tab-separated file.

    At most one of --status, --priority and --search may be given.
    """
    given = {"--status": status, "--priority": priority, "--search": term}
    selectors = [name for name, value in given.items() if value]
    if len(selectors) > 1:
        print_error(f"Use only one of {', '.join(selectors)}")
        raise typer.Exit(1)

    service = get_service(ctx)
    if term:
        tasks = require(service.search(term))
    else:
        tasks = require(service.filter(status, priority))
    people = require(service.get_all_people())

    try:
        count = export_tasks(tasks, people, path, fmt)
    except StorageError as e:
        print_error(f"Export failed: {e}")
        raise typer.Exit(1) from e
    print_success(f"Exported {count} tasks to {path}")
