"""Application service layer for tasktrack.

This package contains application services that orchestrate domain
operations on top of a repository.

Services:
    task_service - Task and person use cases (CRUD, filter, search)

Example usage:
    >>> from tasktrack.application import TaskService
    >>> from tasktrack.infrastructure.storage import JsonTaskRepository
    >>>
    >>> service = TaskService(JsonTaskRepository(path))
    >>> outcome = service.get_all()
    >>> if outcome.is_success:
    ...     print(outcome.message)
    Retrieved 3 tasks
"""

from tasktrack.application.task_service import TaskService

__all__ = [
    "TaskService",
]
