"""Assemble the POST /correspondence payload from caller input.

The builder is pure: the same CorrespondenceDetails always produce the
same idempotency key and senders reference, and the caller's details are
never modified.
"""

import random
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from altinn_correspondence.modules.correspondence.domain.models import (
    CorrespondenceDetails,
)
from altinn_correspondence.modules.correspondence.notifications import (
    build_notification,
)
from altinn_correspondence.modules.correspondence.recipients import (
    CountryCodeRecipientFormatter,
    RecipientFormatter,
)
from altinn_correspondence.modules.correspondence.schemas import (
    BaseCorrespondence,
    InitializeCorrespondenceContent,
    InitializeCorrespondencesRequest,
)

DEFAULT_LANGUAGE_CODE = "nb"
DEFAULT_SENDERS_REFERENCE_PREFIX = "EXT_DD_SHIP_"
LEGACY_SENDERS_REFERENCE_PREFIX = "EXT_OED_SHIP_"


def derive_senders_reference(
    idempotency_key: UUID, prefix: str = DEFAULT_SENDERS_REFERENCE_PREFIX
) -> str:
    """Senders reference used when the caller supplies none."""
    return f"{prefix}{idempotency_key}"


def resolve_senders_reference(
    details: CorrespondenceDetails, prefix: str = DEFAULT_SENDERS_REFERENCE_PREFIX
) -> str:
    if details.senders_reference:
        return details.senders_reference
    return derive_senders_reference(details.idempotency_key, prefix)


def generate_reference_number(seed: UUID) -> int:
    """Six-digit shipment number for legacy-style senders references.

    Seeded from the idempotency key so a retried send reuses its number.
    """
    return random.Random(seed.int).randint(100000, 999999)


def legacy_senders_reference(
    idempotency_key: UUID, prefix: str = LEGACY_SENDERS_REFERENCE_PREFIX
) -> str:
    """Reference in the "<prefix><6 digits>" shape used by the older channel."""
    return f"{prefix}{generate_reference_number(idempotency_key)}"


def build_correspondence_request(
    details: CorrespondenceDetails,
    resource_id: str,
    formatter: Optional[RecipientFormatter] = None,
    language_code: str = DEFAULT_LANGUAGE_CODE,
    senders_reference_prefix: str = DEFAULT_SENDERS_REFERENCE_PREFIX,
    ignore_reservation_default: bool = True,
    default_sender: Optional[str] = None,
    now: Optional[datetime] = None,
) -> InitializeCorrespondencesRequest:
    """Build the wire request for one correspondence to one recipient.

    Args:
        details: Caller input
        resource_id: Correspondence resource id from configuration
        formatter: Recipient formatter, country-code scheme with 0192 by default
        language_code: Content language
        senders_reference_prefix: Prefix for derived senders references
        ignore_reservation_default: Used when details.ignore_reservation is None
        default_sender: Message sender used when details.sender is empty
        now: Current time, defaults to the wall clock in UTC

    Returns:
        InitializeCorrespondencesRequest ready for ``to_payload()``
    """
    formatter = formatter or CountryCodeRecipientFormatter()
    now = now or datetime.now(timezone.utc)

    ignore_reservation = details.ignore_reservation
    if ignore_reservation is None:
        ignore_reservation = ignore_reservation_default

    correspondence = BaseCorrespondence(
        resource_id=resource_id,
        senders_reference=resolve_senders_reference(details, senders_reference_prefix),
        message_sender=details.sender or default_sender,
        content=InitializeCorrespondenceContent(
            language=language_code,
            message_title=details.title,
            message_summary=details.summary,
            message_body=details.body,
            attachments=[],
        ),
        requested_publish_time=details.visible_datetime or now,
        property_list={},
        notification=build_notification(
            details.notification, details.shipment_datetime, now=now
        ),
        ignore_reservation=ignore_reservation,
    )

    return InitializeCorrespondencesRequest(
        correspondence=correspondence,
        recipients=[formatter.format(details.recipient or "")],
        existing_attachments=[],
        idempotent_key=details.idempotency_key,
    )
