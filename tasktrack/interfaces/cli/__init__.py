"""CLI interface for tasktrack using Typer.

This module provides the command-line interface for tasktrack,
a single-user task tracker.

Usage:
    tasktrack list                       # Show all tasks
    tasktrack add --title "Write docs"   # Create a task
    tasktrack filter --status in-progress
    tasktrack search docs
    tasktrack people list

The CLI is structured as:
- app: Main Typer application
- commands/: Individual command groups (task, people)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from tasktrack import __version__
from tasktrack.application import TaskService
from tasktrack.config import get_config
from tasktrack.infrastructure.storage import JsonTaskRepository, StorageError, seed_data

# Import command groups
from tasktrack.interfaces.cli.commands import people, task
from tasktrack.interfaces.cli.common import CliState, get_state, print_error, print_success
from tasktrack.logging_setup import setup_logging

logger = logging.getLogger(__name__)

# Create the main Typer application
app = typer.Typer(
    name="tasktrack",
    help="Single-user task tracking",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"tasktrack version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    data_file: Optional[Path] = typer.Option(
        None,
        "--data-file",
        help="Task data file (or set TASKTRACK_DATA env var)",
        envvar="TASKTRACK_DATA",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log progress to stderr"),
) -> None:
    """tasktrack - track work items and who they are assigned to."""
    config = get_config()
    setup_logging(logging.DEBUG if verbose else config.log_level, config.log_file)

    path = data_file or config.resolve_data_file()
    repository = JsonTaskRepository(path)

    if config.seed_on_first_run and not path.exists():
        try:
            seed_data(repository)
        except StorageError as e:
            logger.warning("Could not seed %s: %s", path, e)

    ctx.obj = CliState(repository=repository, service=TaskService(repository))


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(task.app, name="task")
app.add_typer(people.app, name="people")


# =============================================================================
# Top-Level Shortcuts for Common Commands
# =============================================================================

app.command("list", help="List all tasks (shortcut for 'task list').")(task.list_tasks)
app.command("show", help="Show a task (shortcut for 'task show').")(task.show)
app.command("add", help="Create a task (shortcut for 'task add').")(task.add)
app.command("edit", help="Edit a task (shortcut for 'task edit').")(task.edit)
app.command("delete", help="Delete a task (shortcut for 'task delete').")(task.delete)
app.command("filter", help="Filter tasks (shortcut for 'task filter').")(task.filter_tasks)
app.command("search", help="Search tasks (shortcut for 'task search').")(task.search)
app.command("export", help="Export tasks (shortcut for 'task export').")(task.export)


@app.command("seed")
def seed(ctx: typer.Context) -> None:
    """Load sample people and tasks into an empty data file."""
    state = get_state(ctx)
    try:
        written = seed_data(state.repository)
    except StorageError as e:
        print_error(f"Seeding failed: {e}")
        raise typer.Exit(1) from e

    if written:
        print_success(f"Seeded sample data into {state.repository.path}")
    else:
        print_error("The data file already has tasks or people; nothing seeded")
        raise typer.Exit(1)


__all__ = ["app"]
