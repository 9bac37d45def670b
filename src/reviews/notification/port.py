"""Notification sink port — abstract interface for fire-and-forget notices."""

from abc import ABC, abstractmethod

ADMIN_NEW_REVIEW = "admin_new_review"
CUSTOMER_REVIEW_DECISION = "customer_review_decision"


class NotificationSink(ABC):
    """Abstract interface for notice dispatch adapters."""

    @abstractmethod
    def notify(self, kind: str, payload: dict) -> dict:
        """Hand a notice over for delivery.

        Returns:
            dict with keys: notice_id, status ("sent" or "failed"), error (optional)
        """
        ...
