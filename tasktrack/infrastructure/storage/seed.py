"""Sample data for a fresh store.

Seeding only happens when the store holds no tasks and no people, so running
it twice is harmless.
"""

import logging
from datetime import datetime, timedelta
from uuid import uuid4

from tasktrack.domain.task.models import Person, Priority, TaskStatus, WorkTask, utc_now
from tasktrack.infrastructure.storage.repositories import JsonTaskRepository

logger = logging.getLogger(__name__)


def _days(now: datetime, offset: int) -> datetime:
    return now + timedelta(days=offset)


def build_sample_people() -> list[Person]:
    """Build the four sample people."""
    return [
        Person(name="John Doe", email="john.doe@example.com"),
        Person(name="Jane Smith", email="jane.smith@example.com"),
        Person(name="Bob Johnson", email="bob.johnson@example.com"),
        Person(name="Alice Williams", email="alice.williams@example.com"),
    ]


def build_sample_tasks(people: list[Person], now: datetime | None = None) -> list[WorkTask]:
    """Build sample tasks spread over the last two weeks.

    Args:
        people: The sample people, in the order returned by build_sample_people.
        now: Reference time (default: current UTC time).

    Returns:
        Tasks that each satisfy the task business rules.
    """
    now = now or utc_now()
    john, jane, bob, alice = people

    def task(title: str, description: str, status: TaskStatus, priority: Priority,
             created: int, due: int, hours: int | None, assignee: Person | None,
             tags: list[str]) -> WorkTask:
        return WorkTask(
            id=uuid4(),
            title=title,
            description=description,
            status=status,
            priority=priority,
            created_at=_days(now, created),
            due_date=_days(now, due),
            estimated_hours=hours,
            assigned_to_id=assignee.id if assignee else None,
            tags=tags,
        )

    return [
        task("Setup development environment", "Install the toolchain and required tools",
             TaskStatus.COMPLETED, Priority.HIGH, -10, -8, 4, john,
             ["setup", "environment", "dev"]),
        task("Design database schema", "Create an entity relationship diagram for the application",
             TaskStatus.COMPLETED, Priority.HIGH, -9, -7, 6, jane,
             ["database", "design"]),
        task("Implement user authentication", "Add login and registration with token based sessions",
             TaskStatus.IN_PROGRESS, Priority.CRITICAL, -5, 2, 8, john,
             ["security", "authentication", "backend"]),
        task("Create main window UI", "Design and implement the main application window",
             TaskStatus.IN_PROGRESS, Priority.HIGH, -4, 3, 10, bob,
             ["ui", "frontend"]),
        task("Write unit tests for TaskService", "Cover all CRUD operations with unit tests",
             TaskStatus.ASSIGNED, Priority.MEDIUM, -3, 5, 6, alice,
             ["testing", "unit-tests"]),
        task("Optimize database queries", "Review slow queries and add appropriate indexes",
             TaskStatus.DRAFT, Priority.LOW, -2, 7, None, None,
             ["performance", "database", "optimization"]),
        task("Deploy to production", "Set up a CI/CD pipeline and deploy the application",
             TaskStatus.DRAFT, Priority.MEDIUM, -1, 10, None, None,
             ["deployment", "devops", "production"]),
        task("Fix critical bug in payment module", "Users report failed transactions, investigate and fix",
             TaskStatus.UNDER_REVIEW, Priority.CRITICAL, -1, 1, 3, jane,
             ["bug", "critical", "payment"]),
        task("Update documentation", "Update the API documentation and user manual for new features",
             TaskStatus.ASSIGNED, Priority.LOW, 0, 14, 5, bob,
             ["documentation", "manual"]),
        task("Research new UI framework", "Evaluate alternatives to the current UI implementation",
             TaskStatus.REJECTED, Priority.LOW, -15, -5, 8, alice,
             ["research", "ui"]),
    ]


def seed_data(repository: JsonTaskRepository) -> bool:
    """Write the sample people and tasks into an empty store.

    Args:
        repository: Store to seed.

    Returns:
        True if data was written, False if the store already had records.
    """
    if not repository.is_empty():
        logger.info("Store at %s already has data, skipping seed", repository.path)
        return False

    people = build_sample_people()
    tasks = build_sample_tasks(people)
    repository.restore(people, tasks)
    logger.info("Seeded %d people and %d tasks", len(people), len(tasks))
    return True
