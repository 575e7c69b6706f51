"""Caller-facing data models for the correspondence module.

Frozen dataclasses, not Pydantic: they carry caller input into the
pipeline and receipts back out, and are never mutated on the way.

Key distinctions:
  - models.py: caller inputs, query objects and receipts (dataclasses)
  - schemas.py: wire contracts with the backend (Pydantic, camelCase)
  - results.py: success/failure envelopes returned by handlers
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from altinn_correspondence.modules.correspondence.schemas import (
    CorrespondenceStatus,
    CorrespondencesRoleType,
    EmailContentType,
    InitializeCorrespondencesResponse,
)


@dataclass(frozen=True)
class NotificationDetails:
    """Optional email and SMS notification for a correspondence.

    Email is only ordered when both subject and body are set; SMS when
    ``sms_text`` is set. A container with neither orders nothing.
    """

    email_subject: Optional[str] = None
    email_body: Optional[str] = None
    sms_text: Optional[str] = None
    email_content_type: EmailContentType = EmailContentType.PLAIN

    @property
    def has_email(self) -> bool:
        return bool(self.email_subject) and bool(self.email_body)

    @property
    def has_sms(self) -> bool:
        return bool(self.sms_text)


@dataclass(frozen=True)
class CorrespondenceDetails:
    """Everything needed to send one correspondence to one recipient.

    Attributes:
        recipient: Organization number (9 digits), national identity
            number (11 digits) or a pre-formatted identifier/URN
        title: Message title shown in the inbox
        summary: Short summary of the message
        body: Main body of the message
        sender: Display name shown instead of the sending organization
        visible_datetime: When the message becomes visible, defaults to now
        shipment_datetime: When notifications are sent, defaults to now
        notification: Optional email/SMS notification
        allow_forwarding: Whether the recipient may forward the message
        ignore_reservation: Override KRR reservation; None uses the
            configured default
        idempotency_key: Stable key for this logical send, generated when omitted
        senders_reference: Caller reference, derived from the idempotency
            key when omitted
    """

    recipient: Optional[str] = None
    title: Optional[str] = None
    summary: Optional[str] = None
    body: Optional[str] = None
    sender: Optional[str] = None
    visible_datetime: Optional[datetime] = None
    shipment_datetime: Optional[datetime] = None
    notification: Optional[NotificationDetails] = None
    allow_forwarding: bool = False
    ignore_reservation: Optional[bool] = None
    idempotency_key: UUID = field(default_factory=uuid4)
    senders_reference: Optional[str] = None


@dataclass(frozen=True)
class Receipt:
    """Proof of a successful send.

    Attributes:
        idempotency_key: Key the correspondence was sent with
        senders_reference: Reference the correspondence was sent with
        acknowledgment: The backend's acknowledgment, when it returned one
    """

    idempotency_key: UUID
    senders_reference: str
    acknowledgment: Optional[InitializeCorrespondencesResponse] = None

    @property
    def correspondence_ids(self) -> List[UUID]:
        if self.acknowledgment is None:
            return []
        return [c.correspondence_id for c in self.acknowledgment.correspondences]

    @property
    def notification_order_ids(self) -> List[UUID]:
        if self.acknowledgment is None:
            return []
        return [
            n.order_id
            for c in self.acknowledgment.correspondences
            for n in (c.notifications or [])
            if n.order_id is not None
        ]


@dataclass(frozen=True)
class SearchQuery:
    """Filter for GET /correspondence.

    ``role`` and ``resource_id`` are required; the handler rejects the
    query before any network call when either is missing.
    """

    resource_id: Optional[str] = None
    from_time: Optional[datetime] = None
    to_time: Optional[datetime] = None
    status: Optional[CorrespondenceStatus] = None
    role: Optional[CorrespondencesRoleType] = None
    on_behalf_of: Optional[str] = None
    senders_reference: Optional[str] = None
    idempotency_key: Optional[UUID] = None

    def to_query_params(self) -> Dict[str, Any]:
        """Query string parameters, leaving out unset filters."""
        params: Dict[str, Any] = {
            "resourceId": self.resource_id,
            "from": self.from_time.isoformat() if self.from_time else None,
            "to": self.to_time.isoformat() if self.to_time else None,
            "status": self.status.value if self.status else None,
            "role": self.role.value if self.role else None,
            "onBehalfOf": self.on_behalf_of,
            "sendersReference": self.senders_reference,
            "idempotentKey": str(self.idempotency_key)
            if self.idempotency_key
            else None,
        }
        return {key: value for key, value in params.items() if value is not None}


@dataclass(frozen=True)
class GetRequest:
    correspondence_id: UUID
