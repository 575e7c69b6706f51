"""Shared handler contract and failure mapping."""

from typing import Protocol, TypeVar

from altinn_correspondence.infrastructure.operations import (
    OperationResult,
    OperationStatus,
)

TRequest = TypeVar("TRequest", contravariant=True)
TResult = TypeVar("TResult", covariant=True)

# Backend answers that describe the request itself rather than the infrastructure.
EXPECTED_FAILURE_STATUSES = frozenset(
    {OperationStatus.PERMANENT_ERROR, OperationStatus.NOT_FOUND}
)


class Handler(Protocol[TRequest, TResult]):
    async def handle(self, request: TRequest) -> TResult: ...


def is_expected_failure(result: OperationResult) -> bool:
    """True when the backend rejected the request itself (4xx other than auth).

    A problem details body alone does not make a failure expected: the
    backend sends one on 401 and 5xx answers too.
    """
    return result.status in EXPECTED_FAILURE_STATUSES


def failure_message(result: OperationResult, infrastructure_prefix: str) -> str:
    """Message for a failed backend call.

    Expected failures carry the backend's own detail. Infrastructure
    failures (exhausted retries, authentication) get ``infrastructure_prefix``
    in front of that detail.
    """
    detail = result.message
    if result.problem is not None and result.problem.message:
        detail = result.problem.message
    if is_expected_failure(result):
        return detail
    return f"{infrastructure_prefix}: {detail}"
