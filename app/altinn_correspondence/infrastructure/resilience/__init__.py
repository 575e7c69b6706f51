"""Resilience infrastructure for outbound calls."""

from altinn_correspondence.infrastructure.resilience.retry import (
    RetryingTransport,
    RetryPolicy,
)

__all__ = ["RetryingTransport", "RetryPolicy"]
