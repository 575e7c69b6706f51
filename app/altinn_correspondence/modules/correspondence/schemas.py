"""Wire contracts for the Altinn 3 Correspondence REST API.

Pydantic models with camelCase aliases mirroring the JSON the backend
accepts and returns. Requests are serialized with ``to_payload()``;
responses are parsed with ``model_validate``.

Key distinctions:
  - domain/models.py: caller inputs and receipts (dataclasses, no validation)
  - schemas.py: API contracts with Pydantic (full validation)
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional, Type
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _wire_enum(enum_cls: Type[Enum]) -> BeforeValidator:
    """Accept an enum by name (any case) or by its ordinal, as the API may send either."""

    def parse(value: Any) -> Any:
        members = list(enum_cls)
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and 0 <= value < len(members):
            return members[value]
        if isinstance(value, str):
            for member in members:
                if member.value.lower() == value.lower():
                    return member
        return value

    return BeforeValidator(parse)


class CorrespondenceStatus(str, Enum):
    """Lifecycle status of a correspondence."""

    INITIALIZED = "Initialized"
    READY_FOR_PUBLISH = "ReadyForPublish"
    PUBLISHED = "Published"
    FETCHED = "Fetched"
    READ = "Read"
    REPLIED = "Replied"
    CONFIRMED = "Confirmed"
    PURGED_BY_RECIPIENT = "PurgedByRecipient"
    PURGED_BY_ALTINN = "PurgedByAltinn"
    ARCHIVED = "Archived"
    RESERVED = "Reserved"
    FAILED = "Failed"
    ATTACHMENTS_DOWNLOADED = "AttachmentsDownloaded"


class InitializedNotificationStatus(str, Enum):
    """Outcome of ordering one notification."""

    SUCCESS = "Success"
    MISSING_CONTACT = "MissingContact"
    FAILURE = "Failure"


class CorrespondencesRoleType(str, Enum):
    """Perspective used when searching correspondences."""

    RECIPIENT = "Recipient"
    SENDER = "Sender"
    RECIPIENT_AND_SENDER = "RecipientAndSender"


class NotificationTemplate(str, Enum):
    CUSTOM_MESSAGE = "CustomMessage"
    GENERIC_ALTINN_MESSAGE = "GenericAltinnMessage"


class NotificationChannel(str, Enum):
    EMAIL = "Email"
    SMS = "Sms"
    EMAIL_PREFERRED = "EmailPreferred"
    SMS_PREFERRED = "SmsPreferred"
    EMAIL_AND_SMS = "EmailAndSms"


class EmailContentType(str, Enum):
    PLAIN = "Plain"
    HTML = "Html"


WireCorrespondenceStatus = Annotated[
    CorrespondenceStatus, _wire_enum(CorrespondenceStatus)
]
WireNotificationStatus = Annotated[
    InitializedNotificationStatus, _wire_enum(InitializedNotificationStatus)
]
WireNotificationTemplate = Annotated[
    NotificationTemplate, _wire_enum(NotificationTemplate)
]
WireNotificationChannel = Annotated[
    NotificationChannel, _wire_enum(NotificationChannel)
]
WireEmailContentType = Annotated[EmailContentType, _wire_enum(EmailContentType)]


class WireModel(BaseModel):
    """Base for all wire models: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# ---------------------------------------------------------------------------
# POST /correspondence
# ---------------------------------------------------------------------------


class InitializeCorrespondenceContent(WireModel):
    language: str
    message_title: Optional[str] = None
    message_summary: Optional[str] = None
    message_body: Optional[str] = None
    attachments: List[Dict[str, Any]] = Field(default_factory=list)


class InitializeCorrespondenceNotification(WireModel):
    """Notification ordered together with a correspondence."""

    notification_template: WireNotificationTemplate = (
        NotificationTemplate.CUSTOM_MESSAGE
    )
    email_subject: Optional[str] = None
    email_body: Optional[str] = None
    email_content_type: Optional[WireEmailContentType] = None
    sms_body: Optional[str] = None
    notification_channel: Optional[WireNotificationChannel] = None
    requested_send_time: Optional[datetime] = None


class BaseCorrespondence(WireModel):
    resource_id: str
    senders_reference: str
    message_sender: Optional[str] = None
    content: InitializeCorrespondenceContent
    requested_publish_time: Optional[datetime] = None
    property_list: Dict[str, str] = Field(default_factory=dict)
    notification: Optional[InitializeCorrespondenceNotification] = None
    ignore_reservation: Optional[bool] = None


class InitializeCorrespondencesRequest(WireModel):
    """Body of POST /correspondence."""

    correspondence: BaseCorrespondence
    recipients: List[str]
    existing_attachments: List[UUID] = Field(default_factory=list)
    idempotent_key: UUID

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the JSON-ready camelCase dict sent to the backend."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class InitializedNotification(WireModel):
    order_id: Optional[UUID] = None
    is_reminder: Optional[bool] = None
    status: WireNotificationStatus


class InitializedCorrespondence(WireModel):
    correspondence_id: UUID
    status: WireCorrespondenceStatus
    recipient: str
    notifications: Optional[List[InitializedNotification]] = None


class InitializeCorrespondencesResponse(WireModel):
    """Acknowledgment returned by POST /correspondence."""

    correspondences: List[InitializedCorrespondence] = Field(default_factory=list)
    attachment_ids: List[UUID] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# GET /correspondence
# ---------------------------------------------------------------------------


class CorrespondencesSearchResponse(WireModel):
    ids: List[UUID] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# GET /correspondence/{id}
# ---------------------------------------------------------------------------


class CorrespondenceAttachment(WireModel):
    id: Optional[UUID] = None
    file_name: Optional[str] = None
    display_name: Optional[str] = None
    is_encrypted: bool = False
    checksum: Optional[str] = None
    senders_reference: Optional[str] = None
    data_type: Optional[str] = None
    created: Optional[datetime] = None
    status_text: Optional[str] = None
    expiration_time: Optional[datetime] = None


class CorrespondenceContent(WireModel):
    language: Optional[str] = None
    message_title: Optional[str] = None
    message_summary: Optional[str] = None
    message_body: Optional[str] = None
    attachments: Optional[List[CorrespondenceAttachment]] = None


class ExternalReference(WireModel):
    reference_value: Optional[str] = None
    reference_type: Optional[Any] = None


class CorrespondenceReplyOption(WireModel):
    link_url: Optional[str] = Field(default=None, alias="linkURL")
    link_text: Optional[str] = None


class CorrespondenceNotificationOverview(WireModel):
    notification_order_id: Optional[UUID] = None
    is_reminder: bool = False


class CorrespondenceOverview(WireModel):
    """Overview of one correspondence, enough to drive the business process."""

    correspondence_id: UUID
    resource_id: str
    senders_reference: str
    status: WireCorrespondenceStatus
    created: datetime
    status_changed: Optional[datetime] = None
    status_text: Optional[str] = None
    message_sender: Optional[str] = None
    recipient: Optional[str] = None
    content: Optional[CorrespondenceContent] = None
    requested_publish_time: Optional[datetime] = None
    allow_system_delete_after: Optional[datetime] = None
    due_date_time: Optional[datetime] = None
    external_references: Optional[List[ExternalReference]] = None
    property_list: Optional[Dict[str, str]] = None
    reply_options: Optional[List[CorrespondenceReplyOption]] = None
    notification: Optional[InitializeCorrespondenceNotification] = None
    ignore_reservation: Optional[bool] = None
    published: Optional[datetime] = None
    is_confirmation_needed: bool = False
    is_confidential: bool = False
    notifications: Optional[List[CorrespondenceNotificationOverview]] = None
    altinn2_correspondence_id: Optional[int] = None
