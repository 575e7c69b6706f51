"""Structured logging infrastructure built on structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module
    - bind_request_context(): Context manager for operation-scoped logging
    - get_correlation_id(): Get current correlation ID from context
    - clear_request_context(): Clear all operation context
"""

from altinn_correspondence.infrastructure.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
)
from altinn_correspondence.infrastructure.logging.formatters import (
    SENSITIVE_PATTERNS,
    mask_sensitive_data,
    truncate_large_values,
)
from altinn_correspondence.infrastructure.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_module_logger",
    "bind_request_context",
    "get_correlation_id",
    "clear_request_context",
    "mask_sensitive_data",
    "truncate_large_values",
    "SENSITIVE_PATTERNS",
]
