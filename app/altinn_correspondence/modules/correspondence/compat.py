"""Receipts and references shaped like the older SOAP correspondence interface.

Callers migrating from the Altinn 2 channel expect a status code and a
text rather than a result object, and senders references in the
"EXT_OED_SHIP_<6 digits>" shape.
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from altinn_correspondence.modules.correspondence.domain import (
    CorrespondenceDetails,
    CorrespondenceResult,
)
from altinn_correspondence.modules.correspondence.request_builder import (
    legacy_senders_reference,
)

if TYPE_CHECKING:
    from altinn_correspondence.modules.correspondence.service import (
        CorrespondenceService,
    )

DEFAULT_SUCCESS_TEXT = "Correspondence sent successfully"


class ReceiptStatus(str, Enum):
    OK = "OK"
    ERROR = "Error"


@dataclass(frozen=True)
class LegacyReceipt:
    status: ReceiptStatus
    text: str = ""

    @property
    def is_ok(self) -> bool:
        return self.status == ReceiptStatus.OK

    @classmethod
    def success(cls, text: str = DEFAULT_SUCCESS_TEXT) -> "LegacyReceipt":
        return cls(status=ReceiptStatus.OK, text=text)

    @classmethod
    def error(cls, text: str) -> "LegacyReceipt":
        return cls(status=ReceiptStatus.ERROR, text=text)


def to_legacy_receipt(result: CorrespondenceResult) -> LegacyReceipt:
    """Convert a send result into an OK/Error receipt."""
    if result.is_success:
        return LegacyReceipt.success()
    return LegacyReceipt.error(result.error)


def with_legacy_senders_reference(
    details: CorrespondenceDetails,
) -> CorrespondenceDetails:
    """Copy of ``details`` with a legacy-style senders reference.

    A reference the caller already set is kept. The six digits are derived
    from the idempotency key, so resending the same details reuses them.
    """
    if details.senders_reference:
        return details
    return dataclasses.replace(
        details, senders_reference=legacy_senders_reference(details.idempotency_key)
    )


async def send_legacy(
    service: "CorrespondenceService", details: CorrespondenceDetails
) -> LegacyReceipt:
    """Send the way the older messaging service did and answer with a LegacyReceipt."""
    result = await service.send(with_legacy_senders_reference(details))
    return to_legacy_receipt(result)
