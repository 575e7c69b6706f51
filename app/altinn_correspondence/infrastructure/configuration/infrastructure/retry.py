"""Retry policy infrastructure settings."""

from pydantic import Field

from altinn_correspondence.infrastructure.configuration.base import (
    InfrastructureSettings,
)


class RetrySettings(InfrastructureSettings):
    """Retry configuration for calls to the correspondence backend.

    Environment Variables:
        RETRY_MAX_RETRIES: Retries after the first attempt (default: 3)
        RETRY_BACKOFF_BASE: Base of the exponential backoff (default: 2.0)

    Exponential Backoff:
        Delay before retry n: backoff_base ** n seconds

        Example with defaults:
            Retry 1: 2s
            Retry 2: 4s
            Retry 3: 8s
    """

    max_retries: int = Field(
        default=3,
        alias="RETRY_MAX_RETRIES",
        description="Retries after the initial attempt",
    )
    backoff_base: float = Field(
        default=2.0,
        alias="RETRY_BACKOFF_BASE",
        description="Base of the exponential backoff (seconds)",
    )
