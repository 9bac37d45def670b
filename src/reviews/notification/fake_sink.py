"""Fake notification sink — records notices in memory for testing."""

from uuid import uuid4

from reviews.notification.port import NotificationSink


class FakeNotificationSink(NotificationSink):
    """Sink that records notices in memory for test assertions."""

    def __init__(self):
        self.sent_notices: list[dict] = []
        self.should_succeed = True
        self.should_raise = False
        self.failure_reason = "Notice delivery failed"

    def configure(
        self,
        should_succeed: bool = True,
        should_raise: bool = False,
        failure_reason: str = "Notice delivery failed",
    ):
        """Configure the fake sink behavior for testing."""
        self.should_succeed = should_succeed
        self.should_raise = should_raise
        self.failure_reason = failure_reason

    def notify(self, kind: str, payload: dict) -> dict:
        if self.should_raise:
            raise ConnectionError(self.failure_reason)

        if not self.should_succeed:
            return {
                "notice_id": None,
                "status": "failed",
                "error": self.failure_reason,
            }

        notice_id = f"notice-{uuid4().hex[:12]}"
        self.sent_notices.append({"notice_id": notice_id, "kind": kind, "payload": payload})
        return {"notice_id": notice_id, "status": "sent"}

    def notices_of(self, kind: str) -> list[dict]:
        return [n for n in self.sent_notices if n["kind"] == kind]

    def reset(self):
        """Clear sent notices (useful between tests)."""
        self.sent_notices.clear()
        self.should_succeed = True
        self.should_raise = False
        self.failure_reason = "Notice delivery failed"
