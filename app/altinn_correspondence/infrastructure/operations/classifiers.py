"""Error classifiers for HTTP responses and transport exceptions.

Converts httpx responses and exceptions into standardized OperationResult
objects. Centralizes the retryable/permanent decision so the retrying
transport and the backend client agree on it.

Key Functions:
- is_retryable_status(): 408, 429 and 5xx are worth another attempt
- classify_http_response(): httpx.Response → OperationResult
- classify_transport_error(): httpx exception → OperationResult

Usage:
    from altinn_correspondence.infrastructure.operations.classifiers import (
        classify_http_response,
        classify_transport_error,
    )

    try:
        response = await client.post("/correspondence", json=payload)
    except httpx.HTTPError as exc:
        return classify_transport_error(exc)
    return classify_http_response(response)
"""

import json
from typing import Any, Optional

import httpx

from altinn_correspondence.infrastructure.operations.problem_details import (
    ProblemDetails,
)
from altinn_correspondence.infrastructure.operations.result import OperationResult
from altinn_correspondence.infrastructure.operations.status import OperationStatus

RETRYABLE_STATUS_CODES = frozenset({408, 429})
DEFAULT_RETRY_AFTER_SECONDS = 60


def is_retryable_status(status_code: int) -> bool:
    """Return True for request timeout, rate limiting and server errors."""
    return status_code in RETRYABLE_STATUS_CODES or 500 <= status_code < 600


def _parse_body(response: httpx.Response) -> Optional[Any]:
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None


def _parse_retry_after(response: httpx.Response) -> Optional[int]:
    header_value = response.headers.get("Retry-After")
    if not header_value:
        return None
    try:
        return int(header_value)
    except ValueError:
        return DEFAULT_RETRY_AFTER_SECONDS


def _error_message(
    problem: Optional[ProblemDetails], body: Optional[Any], response: httpx.Response
) -> str:
    if problem is not None:
        return problem.message
    if isinstance(body, dict):
        for key in ("detail", "error", "message"):
            if key in body:
                return str(body[key])
    text = response.text
    if text:
        return text[:200]
    return f"HTTP {response.status_code} {response.reason_phrase}".strip()


def classify_http_response(response: httpx.Response) -> OperationResult:
    """Classify an HTTP response into an OperationResult.

    Status Code Mapping:
    - 2xx: SUCCESS with the decoded JSON body as data
    - 401/403: UNAUTHORIZED
    - 404: NOT_FOUND
    - 408/429/5xx: TRANSIENT_ERROR (retry_after from Retry-After header)
    - other 4xx: PERMANENT_ERROR
    - anything else: TRANSIENT_ERROR

    Problem details bodies are parsed and attached to error results so
    callers can surface the backend's own explanation.

    Args:
        response: A completed httpx response (body already read)

    Returns:
        OperationResult with status, message, error_code and problem
    """
    status_code = response.status_code
    body = _parse_body(response)

    if 200 <= status_code < 300:
        return OperationResult.success(
            data=body, message=f"HTTP {status_code}"
        )

    problem = ProblemDetails.from_body(body)
    message = _error_message(problem, body, response)
    error_code = f"HTTP_{status_code}"

    if status_code in (401, 403):
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            message,
            error_code=error_code,
            data=body,
            problem=problem,
        )

    if status_code == 404:
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            message,
            error_code=error_code,
            data=body,
            problem=problem,
        )

    if is_retryable_status(status_code):
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            message,
            error_code=error_code,
            retry_after=_parse_retry_after(response),
            data=body,
            problem=problem,
        )

    if 400 <= status_code < 500:
        return OperationResult.error(
            OperationStatus.PERMANENT_ERROR,
            message,
            error_code=error_code,
            data=body,
            problem=problem,
        )

    return OperationResult.transient_error(
        f"Unexpected status code: {status_code}",
        error_code=error_code,
    )


def classify_transport_error(exc: Exception) -> OperationResult:
    """Classify an exception raised while talking to the backend.

    - httpx.TimeoutException: TRANSIENT_ERROR (TIMEOUT)
    - httpx.NetworkError / RemoteProtocolError: TRANSIENT_ERROR (CONNECTION_ERROR)
    - other httpx errors: PERMANENT_ERROR (HTTP_ERROR), e.g. a bad URL
    - anything else: TRANSIENT_ERROR (UNEXPECTED_ERROR)

    Args:
        exc: Exception raised by the httpx stack

    Returns:
        OperationResult describing the failure
    """
    if isinstance(exc, httpx.TimeoutException):
        return OperationResult.transient_error(
            f"Request timeout: {type(exc).__name__}: {exc}",
            error_code="TIMEOUT",
        )

    if isinstance(exc, (httpx.NetworkError, httpx.RemoteProtocolError)):
        return OperationResult.transient_error(
            f"Connection error: {type(exc).__name__}: {exc}",
            error_code="CONNECTION_ERROR",
        )

    if isinstance(exc, httpx.HTTPError):
        return OperationResult.permanent_error(
            f"HTTP error: {type(exc).__name__}: {exc}",
            error_code="HTTP_ERROR",
        )

    return OperationResult.transient_error(
        f"Unexpected error: {type(exc).__name__}: {exc}",
        error_code="UNEXPECTED_ERROR",
    )
