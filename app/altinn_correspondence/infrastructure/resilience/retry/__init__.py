"""Retry policy and retrying transport for backend calls.

Usage:
    from altinn_correspondence.infrastructure.resilience.retry import (
        RetryPolicy,
        RetryingTransport,
    )

    transport = RetryingTransport(inner_transport, RetryPolicy(max_retries=3))
"""

from altinn_correspondence.infrastructure.resilience.retry.config import (
    DEFAULT_RETRYABLE_EXCEPTIONS,
    RetryPolicy,
)
from altinn_correspondence.infrastructure.resilience.retry.transport import (
    RetryingTransport,
)

__all__ = ["DEFAULT_RETRYABLE_EXCEPTIONS", "RetryPolicy", "RetryingTransport"]
