from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.exceptions import ValidationError
from ..students.model import Student

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    channel: str
    recipient: str
    student_name: str
    message: str
    sent_at: datetime


class NotificationService:
    """Simulated parent notifications.

    Nothing is delivered: each notification is logged and returned so the
    caller can show a confirmation.
    """

    CHANNELS = ("email", "sms")

    def notify_parent(self, student: Student, *, channel: str, now: Optional[datetime] = None) -> Notification:
        if channel not in self.CHANNELS:
            raise ValidationError(f"Unknown notification channel: {channel}")

        recipient = student.parent_email if channel == "email" else student.parent_phone

        if not recipient:
            raise ValidationError(f"No parent {channel} contact for {student.name}")

        notification = Notification(
            channel=channel,
            recipient=recipient,
            student_name=student.name,
            message=f"Attendance notification sent to {recipient} for {student.name}",
            sent_at=now or now_local(),
        )
        logger.info("Simulated %s to %s for student %s", channel, recipient, student.id)
        return notification

    def notify_parent_email(self, student: Student, *, now: Optional[datetime] = None) -> Notification:
        return self.notify_parent(student, channel="email", now=now)

    def notify_parent_sms(self, student: Student, *, now: Optional[datetime] = None) -> Notification:
        return self.notify_parent(student, channel="sms", now=now)
