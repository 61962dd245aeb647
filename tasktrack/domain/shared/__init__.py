"""Shared domain utilities for tasktrack.

This package provides the building blocks used across domain modules:

- Outcome envelope for explicit error handling

Example usage:
    >>> from tasktrack.domain.shared import Outcome
    >>>
    >>> def find_task(task_id: str) -> Outcome[dict]:
    ...     if task_id == "not-found":
    ...         return Outcome.failure("Task not found", f"No task with ID {task_id}")
    ...     return Outcome.success({"id": task_id}, "Task retrieved successfully")
"""

from tasktrack.domain.shared.outcome import (
    DEFAULT_SUCCESS_MESSAGE,
    Outcome,
    map_outcome,
    unwrap_or,
)

__all__ = [
    "DEFAULT_SUCCESS_MESSAGE",
    "Outcome",
    "map_outcome",
    "unwrap_or",
]
