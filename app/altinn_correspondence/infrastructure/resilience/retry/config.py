"""Retry policy configuration.

Defines which failures are worth another attempt and how long to wait
between attempts.
"""

from dataclasses import dataclass, field
from typing import Tuple, Type

import httpx

from altinn_correspondence.infrastructure.configuration import RetrySettings
from altinn_correspondence.infrastructure.operations import is_retryable_status

DEFAULT_RETRYABLE_EXCEPTIONS: Tuple[Type[Exception], ...] = (
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
)


@dataclass(frozen=True)
class RetryPolicy:
    """Exponential backoff policy for a single HTTP call.

    Attributes:
        max_retries: Retries after the first attempt (total sends = max_retries + 1)
        backoff_base: Delay before retry n is backoff_base ** n seconds
        retryable_exceptions: Transport errors that trigger a retry

    Example:
        # Default policy: 3 retries waiting 2s, 4s and 8s
        policy = RetryPolicy()

        # No waiting at all, useful in tests
        policy = RetryPolicy(max_retries=2, backoff_base=1.0)
    """

    max_retries: int = 3
    backoff_base: float = 2.0
    retryable_exceptions: Tuple[Type[Exception], ...] = field(
        default=DEFAULT_RETRYABLE_EXCEPTIONS
    )

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.max_retries < 0:
            raise ValueError("max_retries must be at least 0")
        if self.backoff_base <= 0:
            raise ValueError("backoff_base must be greater than 0")

    @classmethod
    def from_settings(cls, settings: RetrySettings) -> "RetryPolicy":
        return cls(max_retries=settings.max_retries, backoff_base=settings.backoff_base)

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def delay_for(self, retry_number: int) -> float:
        """Seconds to wait before the given retry (1-based)."""
        return float(self.backoff_base**retry_number)

    def should_retry_response(self, response: httpx.Response) -> bool:
        return is_retryable_status(response.status_code)

    def should_retry_exception(self, exc: BaseException) -> bool:
        return isinstance(exc, self.retryable_exceptions)
