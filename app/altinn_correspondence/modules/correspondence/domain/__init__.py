"""Domain models and result types for correspondence."""

from altinn_correspondence.modules.correspondence.domain.models import (
    CorrespondenceDetails,
    GetRequest,
    NotificationDetails,
    Receipt,
    SearchQuery,
)
from altinn_correspondence.modules.correspondence.domain.results import (
    CorrespondenceResult,
    GetResult,
    SearchResult,
)

__all__ = [
    "CorrespondenceDetails",
    "GetRequest",
    "NotificationDetails",
    "Receipt",
    "SearchQuery",
    "CorrespondenceResult",
    "GetResult",
    "SearchResult",
]
