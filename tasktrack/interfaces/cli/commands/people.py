"""People management CLI commands.

Commands for listing, adding and removing the people tasks are assigned to.
"""

from typing import Optional

import typer

from tasktrack.interfaces.cli.common import (
    get_service,
    print_error,
    print_info,
    print_people_table,
    print_success,
    require,
)

app = typer.Typer(help="People management commands")


@app.command("list")
def list_people(ctx: typer.Context) -> None:
    """List everyone tasks can be assigned to."""
    outcome = get_service(ctx).get_all_people()
    print_people_table(require(outcome))
    print_info(outcome.message)


@app.command("add")
def add(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Display name"),
    email: Optional[str] = typer.Option(None, "--email", "-e", help="Email address"),
) -> None:
    """Add a person."""
    outcome = get_service(ctx).add_person(name, email)
    person = require(outcome)
    print_success(f"{outcome.message}: {person.id}")


@app.command("delete")
def delete(
    ctx: typer.Context,
    person_id: str = typer.Argument(..., help="Person ID or unique ID prefix"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a person. Their tasks are kept but become unassigned."""
    service = get_service(ctx)
    people = require(service.get_all_people())
    matches = [p for p in people if str(p.id).startswith(person_id.lower())]
    if not matches:
        print_error(f"No person with ID {person_id}")
        raise typer.Exit(1)
    if len(matches) > 1:
        print_error(f"ID prefix '{person_id}' matches {len(matches)} people")
        raise typer.Exit(1)

    person = matches[0]
    if not yes:
        typer.confirm(f"Are you sure you want to delete '{person.name}'?", abort=True)

    outcome = service.delete_person(person.id)
    require(outcome)
    print_success(outcome.message)
