"""Bearer token providers for the correspondence API.

The transport layer only needs something that can hand out an access
token; acquiring, caching and refreshing that token is the provider's job.

Usage:
    from altinn_correspondence.infrastructure.auth import MaskinportenTokenProvider

    provider = MaskinportenTokenProvider(settings.maskinporten)
    token = await provider.get_access_token()
"""

import asyncio
import base64
import binascii
import json
import time
import uuid
from typing import Any, Callable, Dict, Optional, Protocol, runtime_checkable

import httpx
import jwt

from altinn_correspondence.infrastructure.configuration import (
    ConfigurationError,
    MaskinportenSettings,
)
from altinn_correspondence.infrastructure.logging import get_module_logger

logger = get_module_logger()

JWT_BEARER_GRANT_TYPE = "urn:ietf:params:oauth:grant-type:jwt-bearer"
# Refresh this many seconds before the token actually expires
EXPIRY_MARGIN_SECONDS = 30


class TokenAcquisitionError(Exception):
    """Raised when an access token cannot be obtained.

    Treated as a terminal, non-retryable failure by the send pipeline.
    """


@runtime_checkable
class AccessTokenProvider(Protocol):
    """Source of bearer tokens for outbound API calls."""

    async def get_access_token(self) -> str:
        """Return a valid access token, refreshing it if necessary."""
        ...


def load_encoded_jwk(encoded_jwk: str) -> Dict[str, Any]:
    """Decode a base64 encoded JSON Web Key.

    Raises:
        ConfigurationError: if the value is not base64 encoded JSON
    """
    try:
        padded = encoded_jwk + "=" * (-len(encoded_jwk) % 4)
        jwk_data = json.loads(base64.b64decode(padded))
    except (binascii.Error, ValueError) as e:
        raise ConfigurationError(f"EncodedJwk is not a base64 encoded JWK: {e}") from e
    if not isinstance(jwk_data, dict) or "kty" not in jwk_data:
        raise ConfigurationError("EncodedJwk does not contain a JSON Web Key")
    return jwk_data


class MaskinportenTokenProvider:
    """Obtain access tokens from Maskinporten with a signed JWT grant.

    Tokens are cached until shortly before they expire. Concurrent callers
    share one refresh through an asyncio.Lock.

    Args:
        settings: Maskinporten settings (client id, encoded JWK, environment)
        http_client: Optional client for the token endpoint
        clock: Time source in epoch seconds
    """

    def __init__(
        self,
        settings: MaskinportenSettings,
        http_client: Optional[httpx.AsyncClient] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        settings.validate_required()
        self._settings = settings
        self._jwk_data = load_encoded_jwk(settings.encoded_jwk or "")
        try:
            self._signing_key = jwt.PyJWK(self._jwk_data).key
        except jwt.PyJWTError as e:
            raise ConfigurationError(f"EncodedJwk could not be loaded: {e}") from e
        self._http_client = http_client or httpx.AsyncClient(timeout=30.0)
        self._owns_client = http_client is None
        self._clock = clock
        self._lock = asyncio.Lock()
        self._access_token: Optional[str] = None
        self._expires_at = 0.0
        self._logger = logger.bind(
            client_id=settings.client_id, environment=settings.environment.value
        )

    def create_grant(self) -> str:
        """Build the signed JWT bearer grant sent to the token endpoint."""
        now = int(self._clock())
        claims = {
            "aud": self._settings.issuer,
            "iss": self._settings.client_id,
            "scope": self._settings.scope,
            "iat": now,
            "exp": now + self._settings.token_lifetime_seconds,
            "jti": str(uuid.uuid4()),
        }
        headers = {}
        if self._jwk_data.get("kid"):
            headers["kid"] = self._jwk_data["kid"]
        return jwt.encode(
            payload=claims,
            key=self._signing_key,
            algorithm=self._jwk_data.get("alg", "RS256"),
            headers=headers,
        )

    async def get_access_token(self) -> str:
        async with self._lock:
            if self._access_token and self._clock() < self._expires_at:
                return self._access_token
            await self._refresh()
            return self._access_token  # type: ignore[return-value]

    async def _refresh(self) -> None:
        self._logger.debug("maskinporten_token_requested", scope=self._settings.scope)
        try:
            response = await self._http_client.post(
                self._settings.token_endpoint,
                data={"grant_type": JWT_BEARER_GRANT_TYPE, "assertion": self.create_grant()},
            )
        except httpx.HTTPError as e:
            self._logger.error("maskinporten_token_request_failed", error=str(e))
            raise TokenAcquisitionError(
                f"Failed to obtain access token from Maskinporten: {e}"
            ) from e

        if response.status_code != 200:
            self._logger.error(
                "maskinporten_token_rejected",
                status_code=response.status_code,
                body=response.text[:200],
            )
            raise TokenAcquisitionError(
                "Failed to obtain access token from Maskinporten: "
                f"HTTP {response.status_code}"
            )

        try:
            body = response.json()
            access_token = body["access_token"]
            expires_in = int(body.get("expires_in", 120))
        except (ValueError, KeyError, TypeError) as e:
            raise TokenAcquisitionError(
                f"Maskinporten returned an unreadable token response: {e}"
            ) from e

        self._access_token = access_token
        self._expires_at = self._clock() + max(expires_in - EXPIRY_MARGIN_SECONDS, 0)
        self._logger.info("maskinporten_token_acquired", expires_in=expires_in)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http_client.aclose()
