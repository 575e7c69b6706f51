"""Correspondence client configuration settings - main aggregator."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from altinn_correspondence.infrastructure.configuration.integrations import (
    AltinnSettings,
    MaskinportenSettings,
)
from altinn_correspondence.infrastructure.configuration.infrastructure import (
    LoggingSettings,
    RetrySettings,
)


class Settings(BaseSettings):
    """Correspondence client settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object:

    - **Integrations**: Altinn Correspondence API, Maskinporten
    - **Infrastructure**: retry policy, logging

    Example:
        ```python
        from altinn_correspondence.infrastructure.configuration import get_settings

        settings = get_settings()

        resource_id = settings.altinn.resource_id
        max_retries = settings.retry.max_retries
        ```
    """

    # Integration settings
    altinn: AltinnSettings
    maskinporten: MaskinportenSettings

    # Infrastructure settings
    retry: RetrySettings
    logging: LoggingSettings

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "altinn": AltinnSettings,
            "maskinporten": MaskinportenSettings,
            "retry": RetrySettings,
            "logging": LoggingSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    def validate_required(self, require_maskinporten: bool = True) -> None:
        """Fail fast on missing resource id or authentication material.

        Args:
            require_maskinporten: Also check Maskinporten client id and key.
                Callers supplying their own token provider pass False.

        Raises:
            ConfigurationError: on the first missing value
        """
        self.altinn.validate_required()
        if require_maskinporten:
            self.maskinporten.validate_required()


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings singleton loaded from the environment.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


def validate_settings(
    settings: Optional[Settings] = None, require_maskinporten: bool = True
) -> Settings:
    """Validate settings eagerly at startup.

    Args:
        settings: Settings to check, the cached singleton when omitted
        require_maskinporten: Also check Maskinporten client id and key

    Returns:
        The validated settings

    Raises:
        ConfigurationError: on the first missing value
    """
    settings = settings or get_settings()
    settings.validate_required(require_maskinporten=require_maskinporten)
    return settings
