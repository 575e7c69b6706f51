"""Success/failure envelope returned by feature handlers.

An Outcome is either a success carrying a value or a failure carrying a
human-readable error message. Expected failures (bad request, not found,
missing search fields) and exhausted infrastructure failures are both
reported through it; handlers do not raise for them.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of a handler call.

    Use the ``success``/``failure`` constructors; exactly one of ``value``
    and ``error`` is meaningful for any instance.

    Attributes:
        is_success: True when the operation succeeded
        value: the payload on success, None on failure
        error: the failure message, empty string on success
    """

    is_success: bool
    value: Optional[T] = None
    error: str = ""

    def __post_init__(self) -> None:
        if self.is_success and self.value is None:
            raise ValueError("A successful outcome requires a value")
        if not self.is_success and (self.value is not None or not self.error):
            raise ValueError("A failed outcome requires an error and no value")

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(is_success=True, value=value, error="")

    @classmethod
    def failure(cls, error: str) -> "Outcome[T]":
        return cls(is_success=False, value=None, error=error or "Unknown error")

    def match(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[str], R],
    ) -> R:
        """Call one of two functions based on the result state.

        Example:
            text = result.match(
                on_success=lambda receipt: f"sent {receipt.idempotency_key}",
                on_failure=lambda error: f"failed: {error}",
            )
        """
        if self.is_success:
            return on_success(self.value)  # type: ignore[arg-type]
        return on_failure(self.error)
