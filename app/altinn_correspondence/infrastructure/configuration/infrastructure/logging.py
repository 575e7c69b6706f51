"""Logging infrastructure settings."""

from pydantic import Field

from altinn_correspondence.infrastructure.configuration.base import (
    InfrastructureSettings,
)


class LoggingSettings(InfrastructureSettings):
    """Logging configuration.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        PREFIX: Environment prefix; empty means production (JSON output)
    """

    LOG_LEVEL: str = Field(default="INFO", alias="LOG_LEVEL")
    PREFIX: str = Field(default="", alias="PREFIX")

    @property
    def is_production(self) -> bool:
        """True if PREFIX is empty (production), False otherwise."""
        return not bool(self.PREFIX)
