"""Unit tests for AltinnCorrespondenceClient."""

import uuid

import httpx
import pytest

from altinn_correspondence.infrastructure.auth import (
    AuthenticatingTransport,
    TokenAcquisitionError,
)
from altinn_correspondence.infrastructure.clients.altinn import (
    AltinnCorrespondenceClient,
)
from altinn_correspondence.infrastructure.operations import OperationStatus
from tests.factories.auth import StaticTokenProvider
from tests.factories.backend import json_body
from tests.factories.correspondence import make_acknowledgment, make_problem_details

BASE_URL = "https://platform.tt02.altinn.no/correspondence/api/v1"


@pytest.fixture
def client(mock_transport):
    return AltinnCorrespondenceClient(base_url=BASE_URL, transport=mock_transport)


@pytest.mark.unit
@pytest.mark.asyncio
class TestAltinnCorrespondenceClient:
    async def test_initialize_posts_payload(self, client, backend):
        backend.script((200, make_acknowledgment()))

        async with client:
            result = await client.initialize_correspondence({"idempotentKey": "k"})

        request = backend.requests[0]
        assert result.is_success
        assert request.method == "POST"
        assert str(request.url) == f"{BASE_URL}/correspondence"
        assert json_body(request) == {"idempotentKey": "k"}
        assert result.data["correspondences"][0]["recipient"] == "01010112345"

    async def test_search_sends_query_parameters(self, client, backend):
        backend.script((200, {"ids": []}))

        async with client:
            await client.search_correspondences(
                {"resourceId": "oed-resource", "role": "Sender"}
            )

        request = backend.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/correspondence/api/v1/correspondence"
        assert request.url.params["resourceId"] == "oed-resource"
        assert request.url.params["role"] == "Sender"

    async def test_get_overview_path(self, client, backend):
        correspondence_id = uuid.uuid4()

        async with client:
            await client.get_correspondence_overview(correspondence_id)

        assert backend.requests[0].url.path == (
            f"/correspondence/api/v1/correspondence/{correspondence_id}"
        )

    async def test_problem_details_are_attached(self, client, backend):
        backend.script((400, make_problem_details("Recipient is not valid")))

        async with client:
            result = await client.initialize_correspondence({})

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.problem.detail == "Recipient is not valid"

    async def test_transport_errors_become_results(self, client, backend):
        backend.script(httpx.ConnectError("connection refused"))

        async with client:
            result = await client.initialize_correspondence({})

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "CONNECTION_ERROR"

    async def test_token_errors_become_unauthorized(self, mock_transport, backend):
        provider = StaticTokenProvider(error=TokenAcquisitionError("no token"))
        client = AltinnCorrespondenceClient(
            base_url=BASE_URL,
            transport=AuthenticatingTransport(provider, mock_transport),
        )

        async with client:
            result = await client.initialize_correspondence({})

        assert result.status == OperationStatus.UNAUTHORIZED
        assert result.error_code == "TOKEN_ERROR"
        assert result.message == "no token"
        assert backend.call_count == 0

    async def test_sends_json_accept_header(self, client, backend):
        async with client:
            await client.search_correspondences({})

        assert backend.requests[0].headers["Accept"] == "application/json"
