"""Altinn 3 Correspondence integration settings."""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator, model_validator

from altinn_correspondence.infrastructure.configuration.base import (
    ConfigurationError,
    IntegrationSettings,
)

PLATFORM_TEST = "https://platform.tt02.altinn.no"
PLATFORM_PRODUCTION = "https://platform.altinn.no"
CORRESPONDENCE_API_PATH = "/correspondence/api/v1"


class ApiEnvironment(str, Enum):
    """Deployment target selecting the Altinn platform host."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class RecipientFormat(str, Enum):
    """Addressing scheme used when normalizing bare recipient numbers.

    COUNTRY_CODE: 9-digit organization numbers become "<country code>:<number>"
    URN: 9 digits become an organization URN, 11 digits a person URN
    """

    COUNTRY_CODE = "country_code"
    URN = "urn"


PLATFORM_BY_ENVIRONMENT = {
    # No dedicated development platform exists, TT02 serves both.
    ApiEnvironment.DEVELOPMENT: PLATFORM_TEST,
    ApiEnvironment.STAGING: PLATFORM_TEST,
    ApiEnvironment.PRODUCTION: PLATFORM_PRODUCTION,
}


class AltinnSettings(IntegrationSettings):
    """Altinn 3 Correspondence API configuration.

    Environment Variables:
        ALTINN_RESOURCE_ID: Correspondence resource id (required)
        ALTINN_CORRESPONDENCE_SETTINGS: Legacy "resourceId,sender" pair
        ALTINN_ENVIRONMENT: development, staging or production
        ALTINN_BASE_URL: Explicit platform host, overrides ALTINN_ENVIRONMENT
        ALTINN_COUNTRY_CODE: Prefix for 9-digit organization numbers
        ALTINN_IGNORE_RESERVATION: Default for overriding KRR reservations
        ALTINN_LANGUAGE_CODE: ISO 639-1 language of the content
        ALTINN_SENDERS_REFERENCE_PREFIX: Prefix for derived senders references
        ALTINN_RECIPIENT_FORMAT: country_code or urn
        ALTINN_TIMEOUT_SECONDS: Per-attempt HTTP timeout

    Example:
        ```python
        from altinn_correspondence.infrastructure.configuration import get_settings

        settings = get_settings()

        resource_id = settings.altinn.resource_id
        api_url = settings.altinn.api_base_url
        ```
    """

    resource_id: str = Field(default="", alias="ALTINN_RESOURCE_ID")
    correspondence_settings: Optional[str] = Field(
        default=None, alias="ALTINN_CORRESPONDENCE_SETTINGS"
    )
    sender: Optional[str] = Field(default=None, alias="ALTINN_SENDER")
    environment: ApiEnvironment = Field(
        default=ApiEnvironment.DEVELOPMENT, alias="ALTINN_ENVIRONMENT"
    )
    base_url: Optional[str] = Field(default=None, alias="ALTINN_BASE_URL")
    country_code: str = Field(default="0192", alias="ALTINN_COUNTRY_CODE")
    ignore_reservation: bool = Field(default=True, alias="ALTINN_IGNORE_RESERVATION")
    language_code: str = Field(default="nb", alias="ALTINN_LANGUAGE_CODE")
    senders_reference_prefix: str = Field(
        default="EXT_DD_SHIP_", alias="ALTINN_SENDERS_REFERENCE_PREFIX"
    )
    recipient_format: RecipientFormat = Field(
        default=RecipientFormat.COUNTRY_CODE, alias="ALTINN_RECIPIENT_FORMAT"
    )
    timeout_seconds: float = Field(default=30.0, alias="ALTINN_TIMEOUT_SECONDS")

    @field_validator("country_code")
    @classmethod
    def validate_country_code(cls, v: str) -> str:
        """Country codes are 3-4 characters (0192 for Norway)."""
        if not 3 <= len(v) <= 4:
            raise ValueError("CountryCode must be between 3 and 4 characters")
        return v

    @model_validator(mode="after")
    def apply_correspondence_settings(self) -> "AltinnSettings":
        """Split the legacy "resourceId,sender" pair into its fields."""
        if self.correspondence_settings is None:
            return self
        parts = [part.strip() for part in self.correspondence_settings.split(",")]
        if len(parts) != 2 or not all(parts):
            raise ValueError(
                "CorrespondenceSettings must be in format 'resourceId,sender'"
            )
        if not self.resource_id:
            self.resource_id = parts[0]
        if not self.sender:
            self.sender = parts[1]
        return self

    @property
    def platform_url(self) -> str:
        """Platform host for the configured environment."""
        if self.base_url:
            return self.base_url.rstrip("/")
        return PLATFORM_BY_ENVIRONMENT[self.environment]

    @property
    def api_base_url(self) -> str:
        """Base address of the Correspondence REST API."""
        return f"{self.platform_url}{CORRESPONDENCE_API_PATH}"

    def validate_required(self) -> None:
        """Fail fast when the resource id is missing.

        Raises:
            ConfigurationError: if ALTINN_RESOURCE_ID is empty
        """
        if not self.resource_id or not self.resource_id.strip():
            raise ConfigurationError("resourceId must be provided.")
