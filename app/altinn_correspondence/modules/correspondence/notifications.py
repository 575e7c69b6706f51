"""Notification channel selection.

Email counts as present only when both subject and body are non-empty,
SMS when the SMS text is non-empty. With neither present no notification
block is sent, whether or not a NotificationDetails container was given.
"""

from datetime import datetime, timezone
from typing import Optional

from altinn_correspondence.modules.correspondence.domain.models import (
    NotificationDetails,
)
from altinn_correspondence.modules.correspondence.schemas import (
    InitializeCorrespondenceNotification,
    NotificationChannel,
    NotificationTemplate,
)


def select_channel(has_email: bool, has_sms: bool) -> Optional[NotificationChannel]:
    if has_email and has_sms:
        return NotificationChannel.EMAIL_AND_SMS
    if has_email:
        return NotificationChannel.EMAIL
    if has_sms:
        return NotificationChannel.SMS
    return None


def build_notification(
    details: Optional[NotificationDetails],
    send_time: Optional[datetime] = None,
    now: Optional[datetime] = None,
) -> Optional[InitializeCorrespondenceNotification]:
    """Build the notification block for a correspondence.

    Args:
        details: Caller-supplied notification details, may be None
        send_time: Requested notification time, defaults to ``now``
        now: Current time, defaults to the wall clock in UTC

    Returns:
        The notification block, or None when nothing should be ordered
    """
    if details is None:
        return None

    channel = select_channel(details.has_email, details.has_sms)
    if channel is None:
        return None

    notification = InitializeCorrespondenceNotification(
        notification_template=NotificationTemplate.CUSTOM_MESSAGE,
        notification_channel=channel,
        requested_send_time=send_time or now or datetime.now(timezone.utc),
    )

    if details.has_email:
        notification.email_subject = details.email_subject
        notification.email_body = details.email_body
        notification.email_content_type = details.email_content_type

    if details.has_sms:
        notification.sms_body = details.sms_text

    return notification
