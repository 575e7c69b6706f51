"""Shared fixtures for the correspondence client test suite.

Provides:
- Settings built explicitly (no environment or .env lookups)
- A static token provider and a scripted backend for httpx.MockTransport
- A recorded, non-sleeping replacement for asyncio.sleep
"""

from typing import Any, Callable, List

import httpx
import pytest
import structlog

from altinn_correspondence.infrastructure.configuration import (
    AltinnSettings,
    LoggingSettings,
    MaskinportenSettings,
    RetrySettings,
    Settings,
    get_settings,
)
from altinn_correspondence.infrastructure.logging import configure_logging
from tests.factories.auth import StaticTokenProvider
from tests.factories.backend import ScriptedBackend

TEST_RESOURCE_ID = "test-resource-id"


@pytest.fixture(scope="session", autouse=True)
def _quiet_logging():
    configure_logging()


@pytest.fixture(autouse=True)
def _reset_state():
    """Clear the settings cache and logging context between tests."""
    get_settings.cache_clear()
    structlog.contextvars.clear_contextvars()
    yield
    get_settings.cache_clear()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def altinn_settings_factory() -> Callable[..., AltinnSettings]:
    """Factory for AltinnSettings with test defaults."""

    def _factory(**overrides: Any) -> AltinnSettings:
        values = {"resource_id": TEST_RESOURCE_ID}
        values.update(overrides)
        return AltinnSettings(**values)

    return _factory


@pytest.fixture
def altinn_settings(altinn_settings_factory) -> AltinnSettings:
    return altinn_settings_factory()


@pytest.fixture
def settings_factory(altinn_settings_factory) -> Callable[..., Settings]:
    """Factory for a full Settings aggregate that never reads the environment."""

    def _factory(
        altinn: AltinnSettings | None = None,
        maskinporten: MaskinportenSettings | None = None,
        retry: RetrySettings | None = None,
    ) -> Settings:
        return Settings(
            altinn=altinn or altinn_settings_factory(),
            maskinporten=maskinporten or MaskinportenSettings(),
            retry=retry or RetrySettings(),
            logging=LoggingSettings(),
        )

    return _factory


@pytest.fixture
def settings(settings_factory) -> Settings:
    return settings_factory()


@pytest.fixture
def token_provider() -> StaticTokenProvider:
    return StaticTokenProvider()


@pytest.fixture
def backend() -> ScriptedBackend:
    """Backend answering 200 with an empty JSON object until scripted otherwise."""
    return ScriptedBackend()


@pytest.fixture
def mock_transport(backend) -> httpx.MockTransport:
    return httpx.MockTransport(backend)


@pytest.fixture
def sleeps() -> List[float]:
    return []


@pytest.fixture
def fake_sleep(sleeps):
    """Drop-in for asyncio.sleep that records the requested delays."""

    async def _sleep(delay: float) -> None:
        sleeps.append(delay)

    return _sleep
