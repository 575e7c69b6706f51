"""Maskinporten integration settings."""

from enum import Enum
from typing import Optional

from pydantic import Field

from altinn_correspondence.infrastructure.configuration.base import (
    ConfigurationError,
    IntegrationSettings,
)

CORRESPONDENCE_SCOPE = "altinn:serviceowner altinn:correspondence.write"


class MaskinportenEnvironment(str, Enum):
    TEST = "test"
    PROD = "prod"


MASKINPORTEN_ISSUERS = {
    MaskinportenEnvironment.TEST: "https://test.maskinporten.no/",
    MaskinportenEnvironment.PROD: "https://maskinporten.no/",
}


class MaskinportenSettings(IntegrationSettings):
    """Maskinporten client-credentials configuration.

    The scope is fixed for correspondence and set here rather than being
    patched onto a client definition at runtime.

    Environment Variables:
        MASKINPORTEN_CLIENT_ID: Client id registered in Maskinporten
        MASKINPORTEN_ENCODED_JWK: Base64 encoded private JSON Web Key
        MASKINPORTEN_ENVIRONMENT: test or prod
        MASKINPORTEN_SCOPE: Requested scopes (space separated)
        MASKINPORTEN_TOKEN_LIFETIME_SECONDS: Lifetime of the signed grant
    """

    client_id: Optional[str] = Field(default=None, alias="MASKINPORTEN_CLIENT_ID")
    encoded_jwk: Optional[str] = Field(default=None, alias="MASKINPORTEN_ENCODED_JWK")
    environment: MaskinportenEnvironment = Field(
        default=MaskinportenEnvironment.TEST, alias="MASKINPORTEN_ENVIRONMENT"
    )
    scope: str = Field(default=CORRESPONDENCE_SCOPE, alias="MASKINPORTEN_SCOPE")
    token_lifetime_seconds: int = Field(
        default=120, alias="MASKINPORTEN_TOKEN_LIFETIME_SECONDS"
    )

    @property
    def issuer(self) -> str:
        """Maskinporten issuer, used as the grant audience."""
        return MASKINPORTEN_ISSUERS[self.environment]

    @property
    def token_endpoint(self) -> str:
        return f"{self.issuer}token"

    def validate_required(self) -> None:
        """Fail fast when client id or key material is missing.

        Raises:
            ConfigurationError: if MASKINPORTEN_CLIENT_ID or
                MASKINPORTEN_ENCODED_JWK is empty
        """
        if not self.client_id:
            raise ConfigurationError("ClientId must be provided.")
        if not self.encoded_jwk:
            raise ConfigurationError("EncodedJwk must be provided.")
