"""Infrastructure-level settings."""

from altinn_correspondence.infrastructure.configuration.infrastructure.logging import (
    LoggingSettings,
)
from altinn_correspondence.infrastructure.configuration.infrastructure.retry import (
    RetrySettings,
)

__all__ = ["LoggingSettings", "RetrySettings"]
