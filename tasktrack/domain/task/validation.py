"""Business rule validation for tasks and people.

Validation is a pure computation over a model snapshot: no I/O, no clock.
Every rule runs and every violation is collected, in rule order, so that
callers can show all problems at once.
"""

from dataclasses import dataclass

from tasktrack.domain.task.models import (
    EMAIL_MAX_LENGTH,
    EMAIL_PATTERN,
    NAME_MAX_LENGTH,
    TaskStatus,
    WorkTask,
)

# Statuses that require an estimate
_ESTIMATE_REQUIRED = (TaskStatus.IN_PROGRESS, TaskStatus.UNDER_REVIEW)

# Statuses that require an assignee
_ASSIGNEE_REQUIRED = (TaskStatus.ASSIGNED, TaskStatus.IN_PROGRESS, TaskStatus.UNDER_REVIEW)


@dataclass(frozen=True)
class Violation:
    """A business rule a model snapshot fails.

    Attributes:
        field: Name of the offending field (e.g. "Title", "DueDate").
        message: Human-readable description of the rule.
    """

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


def validate_task(task: WorkTask) -> list[Violation]:
    """Check a task against the business rules.

    Rules:
    - Title must not be blank
    - Due date, when set, must be after the creation timestamp
    - In progress and under review tasks need estimated hours
    - Assigned, in progress and under review tasks need an assignee
    - Tags must not be blank
    - Completed tasks need estimated hours

    Args:
        task: Snapshot of the task to check.

    Returns:
        Violations in rule order; empty when the task is valid.
    """
    violations: list[Violation] = []

    if not task.title.strip():
        violations.append(Violation("Title", "Title cannot be empty or whitespace."))

    if task.due_date is not None and not task.due_date > task.created_at:
        violations.append(Violation("DueDate", "Due date must be after the creation date."))

    if task.status in _ESTIMATE_REQUIRED and task.estimated_hours is None:
        violations.append(
            Violation(
                "EstimatedHours",
                "Estimated hours must be provided for tasks in progress or under review.",
            )
        )

    if task.status in _ASSIGNEE_REQUIRED and task.assigned_to_id is None:
        violations.append(
            Violation("AssignedTo", "Task must have an assignee in the current status.")
        )

    for tag in task.tags:
        if not tag.strip():
            violations.append(Violation("Tags", "Tags cannot contain empty values."))

    if task.status == TaskStatus.COMPLETED and task.estimated_hours is None:
        violations.append(
            Violation("EstimatedHours", "Completed tasks must have estimated hours defined.")
        )

    return violations


def is_valid(task: WorkTask) -> bool:
    """Check if a task passes every business rule."""
    return not validate_task(task)


def validate_person(name: str, email: str | None = None) -> list[Violation]:
    """Check the fields of a person before it is built.

    Args:
        name: Display name.
        email: Optional email address.

    Returns:
        Violations for "Name" and "Email"; empty when both are acceptable.
    """
    violations: list[Violation] = []

    if not name.strip():
        violations.append(Violation("Name", "Name cannot be empty or whitespace."))
    elif len(name) > NAME_MAX_LENGTH:
        violations.append(
            Violation("Name", f"Name cannot be longer than {NAME_MAX_LENGTH} characters.")
        )

    if email is not None:
        if len(email) > EMAIL_MAX_LENGTH:
            violations.append(
                Violation("Email", f"Email cannot be longer than {EMAIL_MAX_LENGTH} characters.")
            )
        elif not EMAIL_PATTERN.match(email):
            violations.append(Violation("Email", "Email must be a valid email address."))

    return violations
