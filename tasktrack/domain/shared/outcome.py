"""Outcome envelope for explicit error handling in core operations.

Every task service operation returns an Outcome instead of raising for
expected failure modes (validation, missing records, storage problems).
An Outcome is either a success carrying an optional payload, or a failure
carrying a human-readable message and an ordered list of error strings.

Callers branch on ``is_success`` only; ``errors`` is meant for display and
logging.

Example usage:
    >>> def divide(a: int, b: int) -> Outcome[float]:
    ...     if b == 0:
    ...         return Outcome.failure("Cannot divide", "Division by zero")
    ...     return Outcome.success(a / b)
    ...
    >>> outcome = divide(10, 2)
    >>> if outcome.is_success:
    ...     print(f"Result: {outcome.value}")
    Result: 5.0
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_SUCCESS_MESSAGE = "Operation completed successfully"


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Result of a core operation.

    Attributes:
        is_success: True when the operation succeeded.
        message: Short human-readable summary.
        errors: Ordered error strings (always empty on success).
        value: Payload on success, None on failure or for void operations.
    """

    is_success: bool
    message: str
    errors: tuple[str, ...] = ()
    value: T | None = None

    @classmethod
    def success(
        cls,
        value: T | None = None,
        message: str = DEFAULT_SUCCESS_MESSAGE,
    ) -> "Outcome[T]":
        """Create a successful outcome.

        Args:
            value: Optional payload.
            message: Confirmation message.

        Returns:
            Outcome with is_success=True and no errors.
        """
        return cls(is_success=True, message=message, errors=(), value=value)

    @classmethod
    def failure(cls, message: str, errors: str | Iterable[str] = ()) -> "Outcome[T]":
        """Create a failed outcome.

        Args:
            message: Summary of what failed.
            errors: A single error string or an iterable of them (may be empty).

        Returns:
            Outcome with is_success=False and no payload.
        """
        if isinstance(errors, str):
            errors = (errors,)
        return cls(is_success=False, message=message, errors=tuple(errors), value=None)

    @property
    def is_failure(self) -> bool:
        """True when the operation failed."""
        return not self.is_success


def map_outcome(outcome: Outcome[T], fn: Callable[[T], U]) -> Outcome[U]:
    """Apply a function to the payload of a successful outcome.

    Failures are returned unchanged; the message of a success is kept.

    Args:
        outcome: The outcome to transform.
        fn: Function to apply to the payload.

    Returns:
        A new Outcome with the transformed payload, or the original failure.
    """
    if outcome.is_success:
        return Outcome.success(fn(outcome.value), outcome.message)
    return Outcome.failure(outcome.message, outcome.errors)


def unwrap_or(outcome: Outcome[T], default: T) -> T:
    """Extract the payload from an outcome, using a default on failure.

    Args:
        outcome: The outcome to unwrap.
        default: The value to return if the outcome failed or has no payload.

    Returns:
        The payload if successful and present, otherwise the default.
    """
    if outcome.is_success and outcome.value is not None:
        return outcome.value
    return default
