"""HTTP client for the Altinn 3 Correspondence REST API.

Transport stack (outermost first):

    AltinnCorrespondenceClient (httpx.AsyncClient, base address)
        ↓
    RetryingTransport (408/429/5xx and network errors, 2s/4s/8s backoff)
        ↓
    AuthenticatingTransport (Authorization: Bearer <token> per attempt)
        ↓
    httpx.AsyncHTTPTransport (socket I/O, timeouts)

Every call returns an OperationResult; the client does not raise for
HTTP, network or token failures.

Usage:
    client = AltinnCorrespondenceClient(
        base_url="https://platform.tt02.altinn.no/correspondence/api/v1",
        transport=transport,
    )

    result = await client.initialize_correspondence(payload)
    if result.is_success:
        acknowledgment = result.data
"""

from typing import Any, Dict, Optional
from uuid import UUID

import httpx

from altinn_correspondence.infrastructure.auth import TokenAcquisitionError
from altinn_correspondence.infrastructure.logging import get_module_logger
from altinn_correspondence.infrastructure.operations import (
    OperationResult,
    OperationStatus,
    classify_http_response,
    classify_transport_error,
)

logger = get_module_logger()

CORRESPONDENCE_PATH = "/correspondence"


class AltinnCorrespondenceClient:
    """Async client for the correspondence endpoints.

    Attributes:
        base_url: Base address of the Correspondence API
        timeout: Per-attempt timeout in seconds
    """

    def __init__(
        self,
        base_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=base_url,
            transport=transport,
            timeout=timeout,
            headers={
                "User-Agent": "altinn-correspondence-client/1.0",
                "Accept": "application/json",
            },
        )
        self._logger = logger.bind(component="altinn_correspondence_client")

    async def initialize_correspondence(
        self, payload: Dict[str, Any]
    ) -> OperationResult:
        """Create a correspondence (POST /correspondence).

        Args:
            payload: Serialized InitializeCorrespondences request

        Returns:
            OperationResult with the acknowledgment body as data
        """
        return await self._request("POST", CORRESPONDENCE_PATH, json_data=payload)

    async def search_correspondences(
        self, params: Dict[str, Any]
    ) -> OperationResult:
        """Search correspondences (GET /correspondence).

        Args:
            params: Query parameters (resourceId, role, from, to, ...)

        Returns:
            OperationResult with the {"ids": [...]} body as data
        """
        return await self._request("GET", CORRESPONDENCE_PATH, params=params)

    async def get_correspondence_overview(
        self, correspondence_id: UUID
    ) -> OperationResult:
        """Fetch one correspondence (GET /correspondence/{id}).

        Returns:
            OperationResult with the overview body as data
        """
        return await self._request(
            "GET", f"{CORRESPONDENCE_PATH}/{correspondence_id}"
        )

    async def _request(
        self,
        method: str,
        path: str,
        json_data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> OperationResult:
        log = self._logger.bind(method=method, path=path)
        log.debug("altinn_http_request")

        try:
            response = await self._client.request(
                method, path, json=json_data, params=params
            )
        except TokenAcquisitionError as e:
            log.error("altinn_http_token_error", error=str(e))
            return OperationResult.error(
                OperationStatus.UNAUTHORIZED,
                str(e),
                error_code="TOKEN_ERROR",
            )
        except httpx.HTTPError as e:
            result = classify_transport_error(e)
            log.error(
                "altinn_http_transport_error",
                error=result.message,
                error_code=result.error_code,
            )
            return result

        result = classify_http_response(response)
        log = log.bind(status_code=response.status_code)

        if result.is_success:
            log.debug("altinn_http_success")
        elif result.status == OperationStatus.TRANSIENT_ERROR:
            log.error("altinn_http_server_error", error=result.message)
        else:
            log.warning(
                "altinn_http_client_error",
                error=result.message,
                problem_details=result.has_problem_details,
            )
        return result

    async def aclose(self) -> None:
        """Close the HTTP client and its transport stack."""
        await self._client.aclose()
        self._logger.debug("altinn_http_client_closed")

    async def __aenter__(self) -> "AltinnCorrespondenceClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


__all__ = ["AltinnCorrespondenceClient"]
