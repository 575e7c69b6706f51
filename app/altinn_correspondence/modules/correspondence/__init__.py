"""Correspondence module: send, search and get Altinn 3 correspondence.

Exports the caller-facing models, result envelopes, the service facade
and its factory.
"""

from altinn_correspondence.modules.correspondence.compat import (
    LegacyReceipt,
    ReceiptStatus,
    send_legacy,
    to_legacy_receipt,
    with_legacy_senders_reference,
)
from altinn_correspondence.modules.correspondence.domain import (
    CorrespondenceDetails,
    CorrespondenceResult,
    GetRequest,
    GetResult,
    NotificationDetails,
    Receipt,
    SearchQuery,
    SearchResult,
)
from altinn_correspondence.modules.correspondence.exceptions import (
    CorrespondenceServiceException,
)
from altinn_correspondence.modules.correspondence.schemas import (
    CorrespondenceOverview,
    CorrespondenceStatus,
    CorrespondencesRoleType,
    EmailContentType,
    NotificationChannel,
)
from altinn_correspondence.modules.correspondence.service import (
    CorrespondenceService,
    create_correspondence_service,
)

__all__ = [
    "CorrespondenceDetails",
    "CorrespondenceResult",
    "CorrespondenceService",
    "CorrespondenceServiceException",
    "CorrespondenceOverview",
    "CorrespondenceStatus",
    "CorrespondencesRoleType",
    "EmailContentType",
    "GetRequest",
    "GetResult",
    "LegacyReceipt",
    "NotificationChannel",
    "NotificationDetails",
    "Receipt",
    "ReceiptStatus",
    "SearchQuery",
    "SearchResult",
    "create_correspondence_service",
    "to_legacy_receipt",
    "send_legacy",
    "with_legacy_senders_reference",
]
