"""Spreadsheet export of task lists.

Writes tasks as comma-separated (CSV) or tab-separated (TSV) text that
opens directly in spreadsheet applications.
"""

import csv
import logging
from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from uuid import UUID

from tasktrack.domain.task.models import Person, WorkTask
from tasktrack.infrastructure.storage.json_storage import StorageError

logger = logging.getLogger(__name__)


class ExportFormat(str, Enum):
    """Spreadsheet file flavour."""

    CSV = "csv"
    TSV = "tsv"

    @property
    def delimiter(self) -> str:
        return "\t" if self is ExportFormat.TSV else ","


EXPORT_COLUMNS = (
    "Title",
    "Status",
    "Priority",
    "Assigned To",
    "Due Date",
    "Created Date",
    "Estimated Hours",
    "Description",
    "Tags",
)


def task_to_row(task: WorkTask, people_by_id: dict[UUID, Person]) -> list[str]:
    """Flatten a task into export column values.

    Args:
        task: Task to flatten.
        people_by_id: Lookup used to resolve the assignee's name.

    Returns:
        One string per column in EXPORT_COLUMNS.
    """
    assignee = people_by_id.get(task.assigned_to_id) if task.assigned_to_id else None
    description = " ".join(task.description.split())
    return [
        task.title,
        task.status.value,
        task.priority.value,
        assignee.name if assignee else "",
        task.due_date.strftime("%Y-%m-%d") if task.due_date else "",
        task.created_at.strftime("%Y-%m-%d"),
        str(task.estimated_hours) if task.estimated_hours is not None else "",
        description,
        "; ".join(task.tags),
    ]


def export_tasks(
    tasks: Iterable[WorkTask],
    people: Iterable[Person],
    path: Path,
    fmt: ExportFormat = ExportFormat.CSV,
) -> int:
    """Write tasks to a spreadsheet file.

    Args:
        tasks: Tasks to export, in the order they should appear.
        people: People used to resolve assignee names.
        path: Destination file (overwritten).
        fmt: CSV for comma-separated, TSV for tab-separated (or their
            string values).

    Returns:
        Number of task rows written.

    Raises:
        StorageError: If the file cannot be written.
    """
    people_by_id = {p.id: p for p in people}
    delimiter = ExportFormat(fmt).delimiter

    count = 0
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f, delimiter=delimiter)
            writer.writerow(EXPORT_COLUMNS)
            for task in tasks:
                writer.writerow(task_to_row(task, people_by_id))
                count += 1
    except OSError as e:
        raise StorageError(f"Error writing {path}: {e}") from e

    logger.info("Exported %d tasks to %s", count, path)
    return count
