"""Transport that re-sends a request on transient failures."""

import asyncio
from typing import Awaitable, Callable, Optional

import httpx

from altinn_correspondence.infrastructure.logging import get_module_logger
from altinn_correspondence.infrastructure.resilience.retry.config import RetryPolicy

logger = get_module_logger()

SleepFunc = Callable[[float], Awaitable[None]]


class RetryingTransport(httpx.AsyncBaseTransport):
    """Wrap a transport with the retry policy.

    Attempts run strictly one after another. The identical request,
    idempotency key included, is re-sent on every attempt; the payload is
    never rebuilt. Responses that are not retryable are returned as-is.
    When retries run out, the last response is returned or the last
    transport error is re-raised. Cancellation is never retried.

    Args:
        transport: Inner transport (normally the authenticating transport)
        policy: Retry policy, defaults to 3 retries with 2s/4s/8s backoff
        sleep: Awaitable used to wait between attempts
    """

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport,
        policy: Optional[RetryPolicy] = None,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        self._transport = transport
        self._policy = policy or RetryPolicy()
        self._sleep = sleep

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        # Buffer the body so every attempt sends the same bytes
        await request.aread()
        log = logger.bind(method=request.method, url=str(request.url))

        retry_number = 0
        while True:
            attempt = retry_number + 1
            try:
                response = await self._transport.handle_async_request(request)
            except Exception as exc:
                if not self._policy.should_retry_exception(exc):
                    raise
                if retry_number >= self._policy.max_retries:
                    log.error(
                        "http_retries_exhausted",
                        attempts=attempt,
                        error=f"{type(exc).__name__}: {exc}",
                    )
                    raise
                reason = f"{type(exc).__name__}: {exc}"
            else:
                if not self._policy.should_retry_response(response):
                    return response
                if retry_number >= self._policy.max_retries:
                    log.error(
                        "http_retries_exhausted",
                        attempts=attempt,
                        status_code=response.status_code,
                    )
                    return response
                reason = f"HTTP {response.status_code}"
                await response.aclose()

            retry_number += 1
            delay = self._policy.delay_for(retry_number)
            log.warning(
                "http_retry_scheduled",
                retry=retry_number,
                delay_seconds=delay,
                reason=reason,
            )
            await self._sleep(delay)

    async def aclose(self) -> None:
        await self._transport.aclose()
