"""Logging notification sink — writes notices to the application log.

The default sink until a mail/chat integration is configured.
"""

from uuid import uuid4

import structlog

from reviews.notification.port import NotificationSink

logger = structlog.get_logger(__name__)


class LoggingNotificationSink(NotificationSink):
    def notify(self, kind: str, payload: dict) -> dict:
        notice_id = f"notice-{uuid4().hex[:12]}"
        logger.info(
            "Notice sent",
            notice_id=notice_id,
            kind=kind,
            to=payload.get("to"),
            subject=payload.get("subject"),
        )
        return {"notice_id": notice_id, "status": "sent"}
