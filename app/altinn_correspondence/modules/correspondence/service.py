"""Correspondence service facade and its wiring.

Usage:
    service = create_correspondence_service()

    async with service:
        result = await service.send(
            CorrespondenceDetails(recipient="123456785", title="Skifteattest")
        )
        if result.is_failure:
            logger.warning("send_failed", error=result.error)
"""

import asyncio
from typing import Any, Awaitable, Callable, Optional

import httpx

from altinn_correspondence.infrastructure.auth import (
    AccessTokenProvider,
    AuthenticatingTransport,
    MaskinportenTokenProvider,
)
from altinn_correspondence.infrastructure.clients.altinn import (
    AltinnCorrespondenceClient,
)
from altinn_correspondence.infrastructure.configuration import (
    Settings,
    validate_settings,
)
from altinn_correspondence.infrastructure.logging import get_module_logger
from altinn_correspondence.infrastructure.resilience import (
    RetryingTransport,
    RetryPolicy,
)
from altinn_correspondence.modules.correspondence.domain import (
    CorrespondenceDetails,
    CorrespondenceResult,
    GetRequest,
    GetResult,
    Receipt,
    SearchQuery,
    SearchResult,
)
from altinn_correspondence.modules.correspondence.exceptions import (
    SEND_FAILURE_PREFIX,
    CorrespondenceServiceException,
    send_failure_message,
)
from altinn_correspondence.modules.correspondence.features import (
    GetHandler,
    SearchHandler,
    SendHandler,
)

logger = get_module_logger()


class CorrespondenceService:
    """Send, search and get correspondences through one backend client."""

    def __init__(
        self,
        client: AltinnCorrespondenceClient,
        send_handler: SendHandler,
        search_handler: SearchHandler,
        get_handler: GetHandler,
        token_provider: Optional[AccessTokenProvider] = None,
    ) -> None:
        self._client = client
        self._send_handler = send_handler
        self._search_handler = search_handler
        self._get_handler = get_handler
        self._token_provider = token_provider

    async def send(self, details: CorrespondenceDetails) -> CorrespondenceResult:
        return await self._send_handler.handle(details)

    async def search(self, query: SearchQuery) -> SearchResult:
        return await self._search_handler.handle(query)

    async def get(self, request: GetRequest) -> GetResult:
        return await self._get_handler.handle(request)

    async def send_or_raise(self, details: CorrespondenceDetails) -> Receipt:
        """Send and raise on failure, for callers of the throw-based interface.

        Raises:
            CorrespondenceServiceException: "Could not send correspondence to
                Altinn 3: <cause>", chained to the underlying exception when
                there is one
        """
        result = await self.send(details)
        if result.is_success:
            return result.receipt  # type: ignore[return-value]

        message = result.error
        if not message.startswith(SEND_FAILURE_PREFIX):
            message = send_failure_message(message)
        raise CorrespondenceServiceException(message) from result.cause

    async def aclose(self) -> None:
        await self._client.aclose()
        if isinstance(self._token_provider, MaskinportenTokenProvider):
            await self._token_provider.aclose()

    async def __aenter__(self) -> "CorrespondenceService":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def create_correspondence_service(
    settings: Optional[Settings] = None,
    token_provider: Optional[AccessTokenProvider] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> CorrespondenceService:
    """Wire the client, transports and handlers from settings.

    Transport stack: RetryingTransport → AuthenticatingTransport → ``transport``
    (an httpx.AsyncHTTPTransport unless one is given).

    Args:
        settings: Settings, loaded from the environment when omitted
        token_provider: Token source, a MaskinportenTokenProvider when omitted
        transport: Innermost transport, replaceable in tests
        sleep: Awaitable used between retries

    Raises:
        ConfigurationError: when the resource id or Maskinporten material is missing
    """
    settings = validate_settings(
        settings, require_maskinporten=token_provider is None
    )

    if token_provider is None:
        token_provider = MaskinportenTokenProvider(settings.maskinporten)

    retrying = RetryingTransport(
        AuthenticatingTransport(token_provider, transport or httpx.AsyncHTTPTransport()),
        policy=RetryPolicy.from_settings(settings.retry),
        sleep=sleep,
    )
    client = AltinnCorrespondenceClient(
        base_url=settings.altinn.api_base_url,
        transport=retrying,
        timeout=settings.altinn.timeout_seconds,
    )

    logger.info(
        "correspondence_service_created",
        api_base_url=settings.altinn.api_base_url,
        resource_id=settings.altinn.resource_id,
        max_retries=retrying.policy.max_retries,
    )
    return CorrespondenceService(
        client=client,
        send_handler=SendHandler(client, settings.altinn),
        search_handler=SearchHandler(client),
        get_handler=GetHandler(client),
        token_provider=token_provider,
    )
