"""Configuration module - public API.

Centralized configuration for the correspondence client using Pydantic
BaseSettings, organized by domain.

Exports:
    get_settings: Cached Settings instance loaded from the environment
    Settings: Main settings class (for testing/overrides)
    ConfigurationError: Raised for missing or malformed configuration
"""

from altinn_correspondence.infrastructure.configuration.base import ConfigurationError
from altinn_correspondence.infrastructure.configuration.integrations import (
    AltinnSettings,
    ApiEnvironment,
    MaskinportenEnvironment,
    MaskinportenSettings,
    RecipientFormat,
)
from altinn_correspondence.infrastructure.configuration.infrastructure import (
    LoggingSettings,
    RetrySettings,
)
from altinn_correspondence.infrastructure.configuration.settings import (
    Settings,
    get_settings,
    validate_settings,
)

__all__ = [
    "ConfigurationError",
    "AltinnSettings",
    "ApiEnvironment",
    "MaskinportenEnvironment",
    "MaskinportenSettings",
    "RecipientFormat",
    "LoggingSettings",
    "RetrySettings",
    "Settings",
    "get_settings",
    "validate_settings",
]
