"""Fixtures for resilience tests."""

from typing import Any, Callable

import httpx
import pytest

from altinn_correspondence.infrastructure.resilience import (
    RetryingTransport,
    RetryPolicy,
)


@pytest.fixture
def retrying_transport_factory(
    mock_transport, fake_sleep
) -> Callable[..., RetryingTransport]:
    """Factory wrapping the scripted backend in a RetryingTransport."""

    def _factory(**policy_overrides: Any) -> RetryingTransport:
        return RetryingTransport(
            mock_transport, policy=RetryPolicy(**policy_overrides), sleep=fake_sleep
        )

    return _factory


@pytest.fixture
def client_factory(retrying_transport_factory):
    """Factory for an httpx.AsyncClient over the retrying transport."""

    def _factory(**policy_overrides: Any) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url="https://platform.tt02.altinn.no/correspondence/api/v1",
            transport=retrying_transport_factory(**policy_overrides),
        )

    return _factory
