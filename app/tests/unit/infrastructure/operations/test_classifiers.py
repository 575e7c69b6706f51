"""Unit tests for HTTP response and transport error classifiers.

Tests cover:
- Success, unauthorized, not found, retryable and permanent status mapping
- Problem details parsing on error bodies
- Retry-After header extraction
- httpx exception classification
"""

import httpx
import pytest

from altinn_correspondence.infrastructure.operations import (
    OperationStatus,
    classify_http_response,
    classify_transport_error,
    is_retryable_status,
)
from tests.factories.correspondence import make_problem_details


@pytest.mark.unit
class TestIsRetryableStatus:
    @pytest.mark.parametrize("status_code", [408, 429, 500, 502, 503, 504, 599])
    def test_retryable(self, status_code):
        assert is_retryable_status(status_code) is True

    @pytest.mark.parametrize("status_code", [200, 400, 401, 403, 404, 409, 422])
    def test_not_retryable(self, status_code):
        assert is_retryable_status(status_code) is False


@pytest.mark.unit
class TestClassifyHttpResponse:
    def test_success_carries_json_body(self):
        response = httpx.Response(200, json={"ids": []})

        result = classify_http_response(response)

        assert result.is_success
        assert result.data == {"ids": []}

    def test_success_without_body(self):
        result = classify_http_response(httpx.Response(204))

        assert result.is_success
        assert result.data is None

    def test_bad_request_with_problem_details(self):
        response = httpx.Response(400, json=make_problem_details("Resource not found"))

        result = classify_http_response(response)

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "HTTP_400"
        assert result.has_problem_details
        assert result.message == "Resource not found"

    def test_validation_errors_are_flattened(self):
        body = make_problem_details(
            detail=None,
            title="One or more validation errors occurred.",
            errors={"Recipients": ["Recipient must be set"]},
        )

        result = classify_http_response(httpx.Response(400, json=body))

        assert "Recipients: Recipient must be set" in result.message

    def test_unauthorized(self):
        result = classify_http_response(httpx.Response(401))

        assert result.status == OperationStatus.UNAUTHORIZED

    def test_forbidden(self):
        result = classify_http_response(httpx.Response(403, text="Forbidden"))

        assert result.status == OperationStatus.UNAUTHORIZED
        assert result.message == "Forbidden"

    def test_not_found(self):
        result = classify_http_response(
            httpx.Response(404, json=make_problem_details("Not found", status=404))
        )

        assert result.status == OperationStatus.NOT_FOUND
        assert result.message == "Not found"

    def test_rate_limited_with_retry_after(self):
        response = httpx.Response(429, headers={"Retry-After": "120"})

        result = classify_http_response(response)

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.retry_after == 120

    def test_malformed_retry_after_uses_default(self):
        response = httpx.Response(429, headers={"Retry-After": "soon"})

        result = classify_http_response(response)

        assert result.retry_after == 60

    def test_server_error_is_transient(self):
        result = classify_http_response(httpx.Response(503))

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "HTTP_503"
        assert "503" in result.message

    def test_non_json_error_body_uses_text(self):
        result = classify_http_response(httpx.Response(400, text="bad payload"))

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.message == "bad payload"
        assert not result.has_problem_details


@pytest.mark.unit
class TestClassifyTransportError:
    def test_timeout(self):
        result = classify_transport_error(httpx.ReadTimeout("read timed out"))

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "TIMEOUT"

    def test_connection_error(self):
        result = classify_transport_error(httpx.ConnectError("connection refused"))

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "CONNECTION_ERROR"

    def test_remote_protocol_error(self):
        result = classify_transport_error(
            httpx.RemoteProtocolError("server disconnected")
        )

        assert result.error_code == "CONNECTION_ERROR"

    def test_other_httpx_error_is_permanent(self):
        result = classify_transport_error(httpx.UnsupportedProtocol("ftp://"))

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "HTTP_ERROR"

    def test_unexpected_error(self):
        result = classify_transport_error(RuntimeError("boom"))

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "UNEXPECTED_ERROR"
        assert "boom" in result.message
