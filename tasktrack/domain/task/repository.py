"""Persistence port for the task domain.

The task service depends on this Protocol rather than on a concrete store,
which keeps storage swappable and makes the service easy to test with an
in-memory fake.

Every method may raise; the task service is the boundary that turns those
exceptions into failure outcomes.
"""

from typing import Protocol
from uuid import UUID

from tasktrack.domain.task.models import Person, Priority, TaskStatus, WorkTask


class TaskRepository(Protocol):
    """Storage operations the task service relies on.

    Task listings are ordered by creation timestamp, newest first.
    People are ordered by name.
    """

    def list_all(self) -> list[WorkTask]: ...

    def get_by_id(self, task_id: UUID) -> WorkTask | None: ...

    def add(self, task: WorkTask) -> WorkTask:
        """Persist a new task, assigning a fresh id and creation timestamp."""
        ...

    def update(self, task: WorkTask) -> None:
        """Replace the stored record with the same id. No-op if it is absent."""
        ...

    def delete_by_id(self, task_id: UUID) -> None: ...

    def list_by_status(self, status: TaskStatus) -> list[WorkTask]: ...

    def list_by_priority(self, priority: Priority) -> list[WorkTask]: ...

    def list_by_person(self, person_id: UUID) -> list[WorkTask]: ...

    def search(self, term: str) -> list[WorkTask]:
        """Tasks whose title or description contains term, ignoring case."""
        ...

    def list_all_people(self) -> list[Person]: ...

    def add_person(self, person: Person) -> Person:
        """Persist a person. Raises if the email is already taken."""
        ...

    def delete_person(self, person_id: UUID) -> None:
        """Remove a person and clear the assignee of their tasks."""
        ...
