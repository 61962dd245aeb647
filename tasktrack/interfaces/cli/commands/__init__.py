"""CLI command groups for tasktrack.

Each module provides a Typer app with a set of related commands that gets
registered with the main app using app.add_typer().

Command groups:
- task: Task lifecycle (list, show, add, edit, delete, filter, search, export)
- people: People management (list, add, delete)
"""

from tasktrack.interfaces.cli.commands import people, task

__all__ = ["task", "people"]
