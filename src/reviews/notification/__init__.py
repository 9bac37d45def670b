"""Notification sink registry — where review notices are delivered.

Provides singleton access to the configured sink. Uses the logging sink
by default; a mail/chat integration (or the fake sink in tests) can be
installed with `set_sink`.
"""

from reviews.notification.port import (
    ADMIN_NEW_REVIEW,
    CUSTOMER_REVIEW_DECISION,
    NotificationSink,
)

_sink: NotificationSink | None = None


def get_sink() -> NotificationSink:
    """Return the configured sink (singleton)."""
    global _sink
    if _sink is None:
        from reviews.notification.log_sink import LoggingNotificationSink

        _sink = LoggingNotificationSink()
    return _sink


def set_sink(sink: NotificationSink) -> None:
    global _sink
    _sink = sink


def reset_sink() -> None:
    """Reset the sink singleton (useful for testing)."""
    global _sink
    _sink = None


__all__ = [
    "ADMIN_NEW_REVIEW",
    "CUSTOMER_REVIEW_DECISION",
    "NotificationSink",
    "get_sink",
    "reset_sink",
    "set_sink",
]
