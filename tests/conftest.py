# tests/conftest.py

from __future__ import annotations

from datetime import datetime, timedelta, UTC
from pathlib import Path
from uuid import uuid4

import pytest

from tasktrack.application import TaskService
from tasktrack.domain.task import Person, Priority, TaskStatus, WorkTask
from tasktrack.infrastructure.storage import JsonTaskRepository

from .fakes import FakeTaskRepository

# Fixed reference time keeps ordering and due-date rules deterministic.
T0 = datetime(2026, 1, 15, 9, 0, tzinfo=UTC)


def make_task(**overrides) -> WorkTask:
    """A valid persisted-looking draft task; override any field."""
    data = {
        "id": uuid4(),
        "title": "Task",
        "status": TaskStatus.DRAFT,
        "priority": Priority.MEDIUM,
        "created_at": T0,
    }
    data.update(overrides)
    return WorkTask(**data)


@pytest.fixture()
def alice() -> Person:
    return Person(name="Alice Williams", email="alice@example.com")


@pytest.fixture()
def bob() -> Person:
    return Person(name="Bob Johnson", email="bob@example.com")


@pytest.fixture()
def sample_tasks(alice: Person, bob: Person) -> list[WorkTask]:
    """Four tasks, created one hour apart (oldest first)."""
    return [
        make_task(
            title="Write report",
            description="Quarterly numbers",
            status=TaskStatus.IN_PROGRESS,
            priority=Priority.HIGH,
            estimated_hours=4,
            assigned_to_id=alice.id,
            created_at=T0,
        ),
        make_task(
            title="Review report",
            status=TaskStatus.IN_PROGRESS,
            priority=Priority.MEDIUM,
            estimated_hours=2,
            assigned_to_id=bob.id,
            created_at=T0 + timedelta(hours=1),
        ),
        make_task(
            title="Plan offsite",
            description="Book a venue for the REPORT party",
            status=TaskStatus.DRAFT,
            priority=Priority.HIGH,
            created_at=T0 + timedelta(hours=2),
        ),
        make_task(
            title="Fix printer",
            status=TaskStatus.IN_PROGRESS,
            priority=Priority.HIGH,
            estimated_hours=1,
            assigned_to_id=bob.id,
            created_at=T0 + timedelta(hours=3),
        ),
    ]


@pytest.fixture()
def fake_repo(sample_tasks: list[WorkTask], alice: Person, bob: Person) -> FakeTaskRepository:
    return FakeTaskRepository(tasks=sample_tasks, people=[alice, bob])


@pytest.fixture()
def service(fake_repo: FakeTaskRepository) -> TaskService:
    return TaskService(fake_repo)


@pytest.fixture()
def json_repo(tmp_path: Path) -> JsonTaskRepository:
    """Real file-backed repository in a temporary directory."""
    return JsonTaskRepository(tmp_path / "tasks.json")
