"""Request context binding for structured logging.

Binds operation-scoped context (the correlation id of one send, search or
get) to every log entry emitted while the operation runs.

Usage:
    from altinn_correspondence.infrastructure.logging import bind_request_context

    with bind_request_context(correlation_id=str(details.idempotency_key)):
        logger.info("correspondence_send_started")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    operation: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind operation-scoped context to all logs within the context manager.

    Context variables are task-local, so concurrent sends each keep their
    own correlation id.

    Args:
        correlation_id: Unique operation identifier. Auto-generated if not provided.
        operation: Operation name (e.g., "send", "search").
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is automatically bound to structlog's context vars.
    """
    context: dict[str, Any] = {}
    context["correlation_id"] = correlation_id or str(uuid.uuid4())

    if operation is not None:
        context["operation"] = operation

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context."""
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def clear_request_context() -> None:
    """Clear all operation-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
