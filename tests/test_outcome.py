# tests/test_outcome.py

from __future__ import annotations

import pytest

from tasktrack.domain.shared import DEFAULT_SUCCESS_MESSAGE, Outcome, map_outcome, unwrap_or


def test_success_defaults() -> None:
    outcome = Outcome.success()

    assert outcome.is_success
    assert not outcome.is_failure
    assert outcome.errors == ()
    assert outcome.message == DEFAULT_SUCCESS_MESSAGE == "Operation completed successfully"
    assert outcome.value is None


def test_success_with_payload_and_message() -> None:
    outcome = Outcome.success([1, 2], "Retrieved 2 items")

    assert outcome.is_success
    assert outcome.value == [1, 2]
    assert outcome.message == "Retrieved 2 items"


def test_failure_with_single_error() -> None:
    outcome = Outcome.failure("Operation failed", "Operation failed")

    assert not outcome.is_success
    assert outcome.errors == ("Operation failed",)
    assert outcome.message == "Operation failed"
    assert outcome.value is None


def test_failure_with_multiple_errors_keeps_order() -> None:
    outcome = Outcome.failure("Multiple errors occurred", ["Error 1", "Error 2", "Error 3"])

    assert outcome.errors == ("Error 1", "Error 2", "Error 3")


def test_failure_with_no_errors() -> None:
    outcome = Outcome.failure("Nothing specific")

    assert not outcome.is_success
    assert outcome.errors == ()


def test_outcome_is_immutable() -> None:
    outcome = Outcome.success(1)

    with pytest.raises(AttributeError):
        outcome.is_success = False  # type: ignore[misc]


def test_map_outcome_transforms_success_and_keeps_message() -> None:
    mapped = map_outcome(Outcome.success(3, "three"), lambda v: v * 2)

    assert mapped.is_success
    assert mapped.value == 6
    assert mapped.message == "three"


def test_map_outcome_passes_failure_through() -> None:
    calls: list[int] = []
    mapped = map_outcome(Outcome.failure("boom", ["e1"]), calls.append)

    assert not mapped.is_success
    assert mapped.message == "boom"
    assert mapped.errors == ("e1",)
    assert calls == []


def test_unwrap_or() -> None:
    assert unwrap_or(Outcome.success(5), 0) == 5
    assert unwrap_or(Outcome.failure("nope"), 0) == 0
    assert unwrap_or(Outcome.success(), "default") == "default"
