# tests/test_json_repository.py

from __future__ import annotations

import json
from datetime import timedelta
from pathlib import Path
from uuid import uuid4

import pytest

from tasktrack.application import TaskService
from tasktrack.domain.task import Person, Priority, TaskStatus, WorkTask
from tasktrack.infrastructure.storage import JsonStorage, JsonTaskRepository, StorageError

from .conftest import T0, make_task


def test_missing_file_is_an_empty_store(json_repo: JsonTaskRepository) -> None:
    assert json_repo.list_all() == []
    assert json_repo.list_all_people() == []
    assert json_repo.is_empty()
    assert not json_repo.path.exists()


def test_add_assigns_fresh_id_and_timestamp(json_repo: JsonTaskRepository) -> None:
    client_id = uuid4()

    created = json_repo.add(WorkTask(id=client_id, title="Hello", created_at=T0, tags=["a"]))

    assert created.id != client_id
    assert created.created_at > T0
    assert json_repo.get_by_id(created.id) == created
    assert json_repo.path.exists()


def test_round_trip_through_file(tmp_path: Path, alice: Person) -> None:
    path = tmp_path / "data" / "tasks.json"
    first = JsonTaskRepository(path)
    first.add_person(alice)
    created = first.add(
        WorkTask(
            title="Persist me",
            description="with every field",
            status=TaskStatus.UNDER_REVIEW,
            priority=Priority.CRITICAL,
            due_date=T0 + timedelta(days=365),
            estimated_hours=3,
            assigned_to_id=alice.id,
            tags=["x", "y"],
        )
    )

    reloaded = JsonTaskRepository(path).get_by_id(created.id)

    assert reloaded == created
    assert JsonTaskRepository(path).list_all_people() == [alice]


def test_list_all_is_newest_first(json_repo: JsonTaskRepository) -> None:
    older = make_task(title="older", created_at=T0)
    newer = make_task(title="newer", created_at=T0 + timedelta(days=1))
    json_repo.restore([], [older, newer])

    assert [t.title for t in json_repo.list_all()] == ["newer", "older"]


def test_update_replaces_whole_record(json_repo: JsonTaskRepository) -> None:
    created = json_repo.add(WorkTask(title="v1", tags=["old"], description="keep?"))

    json_repo.update(created.model_copy(update={"title": "v2", "tags": [], "description": ""}))

    stored = json_repo.get_by_id(created.id)
    assert stored.title == "v2"
    assert stored.tags == []
    assert stored.description == ""


def test_update_keeps_creation_timestamp(json_repo: JsonTaskRepository) -> None:
    created = json_repo.add(WorkTask(title="v1"))

    json_repo.update(
        created.model_copy(
            update={"title": "v2", "created_at": created.created_at - timedelta(days=365)}
        )
    )

    stored = json_repo.get_by_id(created.id)
    assert stored.title == "v2"
    assert stored.created_at == created.created_at


def test_service_update_keeps_creation_timestamp(json_repo: JsonTaskRepository) -> None:
    service = TaskService(json_repo)
    created = service.create(WorkTask(title="original")).value

    outcome = service.update(
        WorkTask(
            id=created.id,
            title="renamed",
            created_at=created.created_at - timedelta(days=365),
        )
    )

    assert outcome.is_success
    assert json_repo.get_by_id(created.id).created_at == created.created_at


def test_update_of_missing_id_is_a_noop(json_repo: JsonTaskRepository) -> None:
    json_repo.add(WorkTask(title="only"))

    json_repo.update(make_task(title="ghost"))

    assert [t.title for t in json_repo.list_all()] == ["only"]


def test_delete_by_id(json_repo: JsonTaskRepository) -> None:
    keep = json_repo.add(WorkTask(title="keep"))
    drop = json_repo.add(WorkTask(title="drop"))

    json_repo.delete_by_id(drop.id)
    json_repo.delete_by_id(uuid4())

    assert json_repo.list_all() == [keep]


def test_indexed_lookups(json_repo: JsonTaskRepository, alice: Person) -> None:
    json_repo.add_person(alice)
    json_repo.restore(
        [],
        [
            make_task(title="a", status=TaskStatus.ASSIGNED, assigned_to_id=alice.id, created_at=T0),
            make_task(title="b", priority=Priority.LOW, created_at=T0 + timedelta(hours=1)),
            make_task(title="c", priority=Priority.LOW, assigned_to_id=alice.id,
                      created_at=T0 + timedelta(hours=2)),
        ],
    )

    assert [t.title for t in json_repo.list_by_status(TaskStatus.ASSIGNED)] == ["a"]
    assert [t.title for t in json_repo.list_by_priority(Priority.LOW)] == ["c", "b"]
    assert [t.title for t in json_repo.list_by_person(alice.id)] == ["c", "a"]
    assert json_repo.list_by_person(uuid4()) == []


def test_search_matches_title_or_description_ignoring_case(json_repo: JsonTaskRepository) -> None:
    json_repo.restore(
        [],
        [
            make_task(title="Quarterly REPORT", created_at=T0),
            make_task(title="Misc", description="see the report", created_at=T0 + timedelta(hours=1)),
            make_task(title="Other", created_at=T0 + timedelta(hours=2)),
        ],
    )

    assert [t.title for t in json_repo.search("Report")] == ["Misc", "Quarterly REPORT"]
    assert len(json_repo.search("  ")) == 3


def test_people_sorted_by_name(json_repo: JsonTaskRepository) -> None:
    json_repo.add_person(Person(name="Zed"))
    json_repo.add_person(Person(name="Amy"))

    assert [p.name for p in json_repo.list_all_people()] == ["Amy", "Zed"]


def test_duplicate_email_is_rejected(json_repo: JsonTaskRepository) -> None:
    json_repo.add_person(Person(name="One", email="same@example.com"))

    with pytest.raises(StorageError, match="Email already in use"):
        json_repo.add_person(Person(name="Two", email="SAME@example.com"))


def test_people_without_email_may_coexist(json_repo: JsonTaskRepository) -> None:
    json_repo.add_person(Person(name="One"))
    json_repo.add_person(Person(name="Two"))

    assert len(json_repo.list_all_people()) == 2


def test_unknown_assignee_is_rejected(json_repo: JsonTaskRepository) -> None:
    with pytest.raises(StorageError, match="Unknown person"):
        json_repo.add(WorkTask(title="orphan", assigned_to_id=uuid4()))


def test_delete_person_clears_reference_and_keeps_task(
    json_repo: JsonTaskRepository, alice: Person
) -> None:
    json_repo.add_person(alice)
    task = json_repo.add(WorkTask(title="hers", assigned_to_id=alice.id))

    json_repo.delete_person(alice.id)

    assert json_repo.list_all_people() == []
    assert json_repo.get_by_id(task.id).assigned_to_id is None


def test_corrupt_file_raises_storage_error(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(StorageError, match="Invalid JSON"):
        JsonTaskRepository(path).list_all()


def test_invalid_records_raise_storage_error(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps({"tasks": [{"title": "t", "status": "bogus"}]}), encoding="utf-8")

    with pytest.raises(StorageError, match="Invalid task data"):
        JsonTaskRepository(path).list_all()


def test_non_object_file_raises_storage_error(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(StorageError, match="Expected a JSON object"):
        JsonStorage().load_json(path)


def test_service_turns_storage_errors_into_failures(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("{not json", encoding="utf-8")
    service = TaskService(JsonTaskRepository(path))

    outcome = service.get_all()

    assert not outcome.is_success
    assert outcome.message == "Failed to retrieve tasks"
    assert "Invalid JSON" in outcome.errors[0]


def test_service_end_to_end(json_repo: JsonTaskRepository) -> None:
    service = TaskService(json_repo)
    person = service.add_person("Dana", "dana@example.com").value

    created = service.create(WorkTask(title="Ship it", estimated_hours=2)).value
    started = created.model_copy(
        update={"status": TaskStatus.IN_PROGRESS, "assigned_to_id": person.id}
    )

    assert service.update(started).is_success
    assert service.filter(person_id=person.id).value == [started]
    assert service.delete(created.id).is_success
    assert service.get_all().value == []
