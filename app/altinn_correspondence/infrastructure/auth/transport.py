"""Transport that attaches a bearer token to every outbound request."""

import httpx

from altinn_correspondence.infrastructure.auth.providers import (
    AccessTokenProvider,
    TokenAcquisitionError,
)
from altinn_correspondence.infrastructure.logging import get_module_logger

logger = get_module_logger()


class AuthenticatingTransport(httpx.AsyncBaseTransport):
    """Ask the token provider for a token on each attempt and send it along.

    No caching or refresh logic lives here. Sitting underneath the retrying
    transport means every retry picks up whatever token the provider
    currently hands out.

    Args:
        token_provider: Source of bearer tokens
        transport: Inner transport performing the actual I/O
    """

    def __init__(
        self,
        token_provider: AccessTokenProvider,
        transport: httpx.AsyncBaseTransport,
    ) -> None:
        if token_provider is None:
            raise ValueError("token_provider is required")
        if transport is None:
            raise ValueError("transport is required")
        self._token_provider = token_provider
        self._transport = transport

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        try:
            access_token = await self._token_provider.get_access_token()
        except TokenAcquisitionError:
            raise
        except Exception as e:
            logger.error("access_token_unavailable", error=str(e))
            raise TokenAcquisitionError(f"Failed to obtain access token: {e}") from e

        request.headers["Authorization"] = f"Bearer {access_token}"
        return await self._transport.handle_async_request(request)

    async def aclose(self) -> None:
        await self._transport.aclose()
