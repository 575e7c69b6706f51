"""Fixtures for correspondence module tests."""

import pytest

from altinn_correspondence.infrastructure.clients.altinn import (
    AltinnCorrespondenceClient,
)
from tests.factories.correspondence import FIXED_NOW


@pytest.fixture
def altinn_client(mock_transport):
    """Backend client talking straight to the scripted backend."""
    return AltinnCorrespondenceClient(
        base_url="https://platform.tt02.altinn.no/correspondence/api/v1",
        transport=mock_transport,
    )


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW
