"""Repository implementations for the task domain.

Provides a file-backed implementation of the TaskRepository port. The whole
data set lives in one JSON document:

    {"people": [...], "tasks": [...]}

Each call reads the file afresh and each write rewrites it, so no state is
held between calls.
"""

import logging
from pathlib import Path
from typing import Any
from uuid import UUID, uuid4

from pydantic import ValidationError

from tasktrack.domain.task.models import Person, Priority, TaskStatus, WorkTask, utc_now
from tasktrack.infrastructure.storage.json_storage import JsonStorage, StorageError

logger = logging.getLogger(__name__)


def _newest_first(tasks: list[WorkTask]) -> list[WorkTask]:
    return sorted(tasks, key=lambda t: t.created_at, reverse=True)


class _Snapshot:
    """Decoded contents of the data file."""

    def __init__(self, people: list[Person], tasks: list[WorkTask]) -> None:
        self.people = people
        self.tasks = tasks

    def to_json(self) -> dict[str, Any]:
        return {
            "people": [p.model_dump(mode="json") for p in self.people],
            "tasks": [t.model_dump(mode="json") for t in self.tasks],
        }

    def person_ids(self) -> set[UUID]:
        return {p.id for p in self.people}


class JsonTaskRepository:
    """Task and person persistence backed by a JSON file.

    Implements the TaskRepository port. Errors surface as StorageError,
    which the task service turns into failure outcomes.
    """

    def __init__(self, path: Path, storage: JsonStorage | None = None) -> None:
        """Initialize the repository.

        Args:
            path: Location of the data file. It is created on first write.
            storage: JsonStorage instance to use. Creates new one if not provided.
        """
        self._path = Path(path)
        self._storage = storage or JsonStorage()

    @property
    def path(self) -> Path:
        return self._path

    # ---- tasks ----

    def list_all(self) -> list[WorkTask]:
        return _newest_first(self._load().tasks)

    def get_by_id(self, task_id: UUID) -> WorkTask | None:
        for task in self._load().tasks:
            if task.id == task_id:
                return task
        return None

    def add(self, task: WorkTask) -> WorkTask:
        """Persist a new task with a fresh id and creation timestamp.

        Any id or timestamp on the incoming task is discarded.
        """
        snapshot = self._load()
        self._check_assignee(snapshot, task)

        created = task.model_copy(update={"id": uuid4(), "created_at": utc_now()}, deep=True)
        snapshot.tasks.append(created)
        self._save(snapshot)
        logger.debug("Added task %s", created.id)
        return created

    def update(self, task: WorkTask) -> None:
        snapshot = self._load()
        for i, existing in enumerate(snapshot.tasks):
            if existing.id == task.id:
                self._check_assignee(snapshot, task)
                snapshot.tasks[i] = task.model_copy(
                    update={"created_at": existing.created_at}, deep=True
                )
                self._save(snapshot)
                logger.debug("Updated task %s", task.id)
                return

    def delete_by_id(self, task_id: UUID) -> None:
        snapshot = self._load()
        remaining = [t for t in snapshot.tasks if t.id != task_id]
        if len(remaining) != len(snapshot.tasks):
            snapshot.tasks = remaining
            self._save(snapshot)
            logger.debug("Deleted task %s", task_id)

    def list_by_status(self, status: TaskStatus) -> list[WorkTask]:
        return _newest_first([t for t in self._load().tasks if t.status == status])

    def list_by_priority(self, priority: Priority) -> list[WorkTask]:
        return _newest_first([t for t in self._load().tasks if t.priority == priority])

    def list_by_person(self, person_id: UUID) -> list[WorkTask]:
        return _newest_first([t for t in self._load().tasks if t.is_assigned_to(person_id)])

    def search(self, term: str) -> list[WorkTask]:
        """Find tasks whose title or description contains term, ignoring case.

        A blank term matches every task.
        """
        if not term.strip():
            return self.list_all()

        needle = term.casefold()
        return _newest_first(
            [
                t
                for t in self._load().tasks
                if needle in t.title.casefold() or needle in t.description.casefold()
            ]
        )

    # ---- people ----

    def list_all_people(self) -> list[Person]:
        return sorted(self._load().people, key=lambda p: p.name)

    def add_person(self, person: Person) -> Person:
        snapshot = self._load()

        if person.id in snapshot.person_ids():
            raise StorageError(f"A person with ID {person.id} already exists")
        if person.email is not None:
            email = person.email.casefold()
            if any(p.email is not None and p.email.casefold() == email for p in snapshot.people):
                raise StorageError(f"Email already in use: {person.email}")

        snapshot.people.append(person)
        self._save(snapshot)
        logger.debug("Added person %s", person.id)
        return person

    def delete_person(self, person_id: UUID) -> None:
        """Remove a person and unassign their tasks. Tasks are kept."""
        snapshot = self._load()
        snapshot.people = [p for p in snapshot.people if p.id != person_id]
        snapshot.tasks = [
            t.model_copy(update={"assigned_to_id": None}) if t.is_assigned_to(person_id) else t
            for t in snapshot.tasks
        ]
        self._save(snapshot)
        logger.debug("Deleted person %s", person_id)

    # ---- file helpers ----

    def restore(self, people: list[Person], tasks: list[WorkTask]) -> None:
        """Append records as given, keeping their ids and timestamps.

        Used for seeding and imports; bypasses the id and timestamp
        assignment done by ``add``.
        """
        snapshot = self._load()
        snapshot.people.extend(people)
        snapshot.tasks.extend(tasks)
        for task in tasks:
            self._check_assignee(snapshot, task)
        self._save(snapshot)
        logger.debug("Restored %d people and %d tasks", len(people), len(tasks))

    def is_empty(self) -> bool:
        """Check if the store holds no tasks and no people."""
        snapshot = self._load()
        return not snapshot.tasks and not snapshot.people

    def _load(self) -> _Snapshot:
        if not self._path.exists():
            # No data file means an empty store - not an error
            return _Snapshot(people=[], tasks=[])

        data = self._storage.load_json(self._path)
        try:
            people = [Person(**item) for item in data.get("people", [])]
            tasks = [WorkTask(**item) for item in data.get("tasks", [])]
        except (TypeError, ValidationError) as e:
            raise StorageError(f"Invalid task data in {self._path}: {e}") from e
        return _Snapshot(people=people, tasks=tasks)

    def _save(self, snapshot: _Snapshot) -> None:
        self._storage.save_json(self._path, snapshot.to_json())

    @staticmethod
    def _check_assignee(snapshot: _Snapshot, task: WorkTask) -> None:
        if task.assigned_to_id is not None and task.assigned_to_id not in snapshot.person_ids():
            raise StorageError(f"Unknown person: {task.assigned_to_id}")
