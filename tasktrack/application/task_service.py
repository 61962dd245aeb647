"""Task application service.

Orchestrates task lifecycle operations by combining the validator with a
repository. Every operation returns an Outcome; exceptions raised by the
repository are caught here and reported as failures with the original
diagnostic text in the error list.
"""

import logging
from uuid import UUID

from tasktrack.domain.shared import Outcome
from tasktrack.domain.task import (
    Person,
    Priority,
    TaskRepository,
    TaskStatus,
    WorkTask,
    validate_person,
    validate_task,
)

logger = logging.getLogger(__name__)


class TaskService:
    """Use cases for tasks and people.

    The service holds no state between calls besides the repository
    reference; each call re-reads from the store.
    """

    def __init__(self, repository: TaskRepository) -> None:
        """Initialize the service.

        Args:
            repository: Store the service reads from and writes to.
        """
        self._repository = repository

    def get_all(self) -> Outcome[list[WorkTask]]:
        """List every task, newest first."""
        try:
            tasks = self._repository.list_all()
            return Outcome.success(tasks, f"Retrieved {len(tasks)} tasks")
        except Exception as e:
            return self._storage_failure("Failed to retrieve tasks", e)

    def get_by_id(self, task_id: UUID) -> Outcome[WorkTask]:
        """Get a single task.

        Args:
            task_id: Id of the task to fetch.

        Returns:
            Success wrapping the task, or a "Task not found" failure.
        """
        try:
            task = self._repository.get_by_id(task_id)
            if task is None:
                return Outcome.failure("Task not found", f"No task with ID {task_id}")
            return Outcome.success(task, "Task retrieved successfully")
        except Exception as e:
            return self._storage_failure("Failed to retrieve task", e)

    def create(self, task: WorkTask) -> Outcome[WorkTask]:
        """Validate and persist a new task.

        The repository is not touched when validation fails. The persisted
        task carries the id and creation timestamp assigned by the store.

        Args:
            task: The task to create.

        Returns:
            Success wrapping the persisted task, or a failure.
        """
        try:
            violations = validate_task(task)
            if violations:
                logger.info("Rejected new task: %s", "; ".join(map(str, violations)))
                return Outcome.failure("Validation failed", [v.message for v in violations])

            created = self._repository.add(task)
            logger.info("Created task %s", created.id)
            return Outcome.success(created, "Task created successfully")
        except Exception as e:
            return self._storage_failure("Failed to create task", e)

    def update(self, task: WorkTask) -> Outcome[None]:
        """Replace an existing task with the given state.

        The caller supplies the complete desired record. Existence is checked
        before validation; nothing is written unless both pass. The stored
        creation timestamp is kept whatever the caller sends.

        Args:
            task: Full desired state of the task, identified by its id.

        Returns:
            Plain success, or a failure.
        """
        try:
            existing = self._repository.get_by_id(task.id) if task.id is not None else None
            if existing is None:
                return Outcome.failure("Task not found", f"No task with ID {task.id}")

            # created_at is fixed at persistence time
            task = task.model_copy(update={"created_at": existing.created_at})
            violations = validate_task(task)
            if violations:
                logger.info("Rejected update of task %s: %s", task.id, "; ".join(map(str, violations)))
                return Outcome.failure("Validation failed", [v.message for v in violations])

            self._repository.update(task)
            logger.info("Updated task %s", task.id)
            return Outcome.success(message="Task updated successfully")
        except Exception as e:
            return self._storage_failure("Failed to update task", e)

    def delete(self, task_id: UUID) -> Outcome[None]:
        """Delete a task by id, after checking it exists."""
        try:
            existing = self._repository.get_by_id(task_id)
            if existing is None:
                return Outcome.failure("Task not found", f"No task with ID {task_id}")

            self._repository.delete_by_id(task_id)
            logger.info("Deleted task %s", task_id)
            return Outcome.success(message="Task deleted successfully")
        except Exception as e:
            return self._storage_failure("Failed to delete task", e)

    def filter(
        self,
        status: TaskStatus | None = None,
        priority: Priority | None = None,
        person_id: UUID | None = None,
    ) -> Outcome[list[WorkTask]]:
        """Filter tasks by status, priority and assignee.

        When all three criteria are given, tasks must match all of them.
        Otherwise only the first present criterion, in the order status,
        priority, person, is applied: ``filter(status=X, priority=Y)``
        returns every task with status X whatever its priority. With no
        criteria every task is returned.

        Args:
            status: Optional status to match.
            priority: Optional priority to match.
            person_id: Optional assignee id to match.

        Returns:
            Success wrapping the matching tasks, or a failure.
        """
        try:
            if status is not None and priority is not None and person_id is not None:
                tasks = [
                    t
                    for t in self._repository.list_all()
                    if t.status == status and t.priority == priority and t.is_assigned_to(person_id)
                ]
            elif status is not None:
                tasks = self._repository.list_by_status(status)
            elif priority is not None:
                tasks = self._repository.list_by_priority(priority)
            elif person_id is not None:
                tasks = self._repository.list_by_person(person_id)
            else:
                tasks = self._repository.list_all()

            return Outcome.success(tasks, f"Found {len(tasks)} tasks")
        except Exception as e:
            return self._storage_failure("Failed to filter tasks", e)

    def search(self, term: str | None) -> Outcome[list[WorkTask]]:
        """Search task titles and descriptions.

        A blank term behaves exactly like ``get_all``.
        """
        if term is None or not term.strip():
            return self.get_all()

        try:
            tasks = self._repository.search(term)
            return Outcome.success(tasks, f"Found {len(tasks)} tasks matching '{term}'")
        except Exception as e:
            return self._storage_failure("Failed to search tasks", e)

    def get_all_people(self) -> Outcome[list[Person]]:
        """List everyone tasks can be assigned to, ordered by name."""
        try:
            people = self._repository.list_all_people()
            return Outcome.success(people, f"Retrieved {len(people)} people")
        except Exception as e:
            return self._storage_failure("Failed to retrieve people", e)

    def add_person(self, name: str, email: str | None = None) -> Outcome[Person]:
        """Create and persist a new person.

        Args:
            name: Display name; surrounding whitespace is trimmed.
            email: Optional email; must be unique across people.

        Returns:
            Success wrapping the persisted person, or a failure.
        """
        name = name.strip()
        if email is not None:
            email = email.strip() or None

        violations = validate_person(name, email)
        if violations:
            return Outcome.failure("Validation failed", [v.message for v in violations])

        try:
            person = self._repository.add_person(Person(name=name, email=email))
            logger.info("Added person %s (%s)", person.id, person.name)
            return Outcome.success(person, "Person added successfully")
        except Exception as e:
            return self._storage_failure("Failed to add person", e)

    def delete_person(self, person_id: UUID) -> Outcome[None]:
        """Delete a person; their tasks stay but lose their assignee."""
        try:
            people = self._repository.list_all_people()
            if not any(p.id == person_id for p in people):
                return Outcome.failure("Person not found", f"No person with ID {person_id}")

            self._repository.delete_person(person_id)
            logger.info("Deleted person %s", person_id)
            return Outcome.success(message="Person deleted successfully")
        except Exception as e:
            return self._storage_failure("Failed to delete person", e)

    @staticmethod
    def _storage_failure(message: str, error: Exception) -> Outcome:
        logger.error("%s: %s", message, error, exc_info=error)
        return Outcome.failure(message, str(error))
