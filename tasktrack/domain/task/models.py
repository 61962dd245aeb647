"""Task domain models.

Pure domain models for work items and the people they are assigned to.
Uses Pydantic for serialization compatibility with the storage layer.

Type-level limits (field lengths, positive hours, email format) are checked
when a model is built. The state-dependent business rules live in
``tasktrack.domain.task.validation``.
"""

import re
from datetime import UTC, datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 100

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def as_utc(value: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC so all timestamps compare safely."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class TaskStatus(str, Enum):
    """Lifecycle status of a work item.

    Any status may be set directly; only the validator's invariants
    constrain which field values go with which status.
    """

    DRAFT = "draft"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in-progress"
    UNDER_REVIEW = "under-review"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        """Check if no further work is expected in this status."""
        return self in (TaskStatus.COMPLETED, TaskStatus.CANCELLED, TaskStatus.REJECTED)


class Priority(str, Enum):
    """Priority of a work item."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Person(BaseModel):
    """Someone a task can be assigned to.

    A person does not own tasks. Tasks point at a person through
    ``WorkTask.assigned_to_id``.
    """

    id: UUID = Field(default_factory=uuid4)
    name: str = Field(max_length=NAME_MAX_LENGTH)
    email: str | None = Field(default=None, max_length=EMAIL_MAX_LENGTH)

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str | None) -> str | None:
        if value is not None and not EMAIL_PATTERN.match(value):
            raise ValueError(f"'{value}' is not a valid email address")
        return value


class WorkTask(BaseModel):
    """A tracked unit of work.

    ``id`` is None until the store persists the task. ``created_at`` defaults
    to the construction time and is overwritten by the store on add.
    """

    id: UUID | None = None
    title: str = Field(default="", max_length=TITLE_MAX_LENGTH)
    description: str = Field(default="", max_length=DESCRIPTION_MAX_LENGTH)
    status: TaskStatus = TaskStatus.DRAFT
    priority: Priority = Priority.MEDIUM
    created_at: datetime = Field(default_factory=utc_now)
    due_date: datetime | None = None
    estimated_hours: int | None = Field(default=None, gt=0)
    assigned_to_id: UUID | None = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("created_at", "due_date")
    @classmethod
    def _normalize_timestamp(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)

    def is_assigned_to(self, person_id: UUID) -> bool:
        """Check if this task is assigned to the given person."""
        return self.assigned_to_id is not None and self.assigned_to_id == person_id
