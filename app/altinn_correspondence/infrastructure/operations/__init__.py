"""Operation result types and status enums.

This module contains standardized result types for backend calls and
feature handlers, including status enums, result dataclasses, problem
details and error classifiers for HTTP responses and exceptions.
"""

from altinn_correspondence.infrastructure.operations.classifiers import (
    classify_http_response,
    classify_transport_error,
    is_retryable_status,
)
from altinn_correspondence.infrastructure.operations.outcome import Outcome
from altinn_correspondence.infrastructure.operations.problem_details import (
    ProblemDetails,
)
from altinn_correspondence.infrastructure.operations.result import OperationResult
from altinn_correspondence.infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "Outcome",
    "ProblemDetails",
    "classify_http_response",
    "classify_transport_error",
    "is_retryable_status",
]
