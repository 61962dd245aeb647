"""Task domain - work items, people and their business rules.

This module provides the domain layer for tasktrack's task management.
All exports are pure (no I/O, no side effects).

Key Types:
    TaskStatus - Task state enumeration
    Priority - Task priority enumeration
    WorkTask - A tracked unit of work
    Person - Someone a task can be assigned to
    Violation - A failed business rule

Validation Functions:
    validate_task - Collect task rule violations
    is_valid - Check a task passes every rule
    validate_person - Collect person field violations

Ports:
    TaskRepository - Storage operations the service depends on
"""

from .models import (
    DESCRIPTION_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    Person,
    Priority,
    TaskStatus,
    WorkTask,
    as_utc,
    utc_now,
)
from .repository import TaskRepository
from .validation import Violation, is_valid, validate_person, validate_task

__all__ = [
    # Models
    "TaskStatus",
    "Priority",
    "WorkTask",
    "Person",
    "TITLE_MAX_LENGTH",
    "DESCRIPTION_MAX_LENGTH",
    "NAME_MAX_LENGTH",
    "EMAIL_MAX_LENGTH",
    "utc_now",
    "as_utc",
    # Validation
    "Violation",
    "validate_task",
    "is_valid",
    "validate_person",
    # Ports
    "TaskRepository",
]
