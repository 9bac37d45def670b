"""Notice dispatch handler — tells moderators and customers about reviews.

Reacts to ReviewSubmitted (moderators: a review awaits moderation) and
ReviewApproved / ReviewRejected (customer: the decision on their review).
Delivery is best-effort: failures are logged and never reach the command
that raised the event.
"""

import structlog
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.notification import ADMIN_NEW_REVIEW, CUSTOMER_REVIEW_DECISION, get_sink
from reviews.notification.templates import render
from reviews.review.events import ReviewApproved, ReviewRejected, ReviewSubmitted
from reviews.review.exceptions import NotificationDispatchError
from reviews.review.review import Review, ReviewStatus

logger = structlog.get_logger(__name__)


def dispatch_notice(kind: str, context: dict) -> bool:
    """Render and send a notice. Returns whether the sink accepted it."""
    payload = render(kind, context)

    try:
        result = get_sink().notify(kind, payload)
    except Exception as exc:
        failure = NotificationDispatchError(kind, str(exc))
    else:
        if result.get("status") == "sent":
            return True
        failure = NotificationDispatchError(kind, result.get("error", "Unknown dispatch error"))

    logger.warning(
        "Notice dispatch failed",
        kind=kind,
        review_id=context.get("review_id"),
        error=failure.error,
    )
    return False


@reviews.event_handler(part_of=Review)
class ReviewNotificationDispatcher:
    """Sends review notices via the configured notification sink."""

    @handle(ReviewSubmitted)
    def on_review_submitted(self, event: ReviewSubmitted) -> None:
        dispatch_notice(
            ADMIN_NEW_REVIEW,
            {
                "review_id": event.review_id,
                "product_id": event.product_id,
                "customer_name": event.customer_name,
                "rating": event.rating,
                "title": event.title,
                "comment": event.comment,
                "spam_score": event.spam_score,
            },
        )

    @handle(ReviewApproved)
    def on_review_approved(self, event: ReviewApproved) -> None:
        dispatch_notice(
            CUSTOMER_REVIEW_DECISION,
            {
                "review_id": event.review_id,
                "product_id": event.product_id,
                "customer_name": event.customer_name,
                "customer_email": event.customer_email,
                "title": event.title,
                "status": ReviewStatus.APPROVED.value,
            },
        )

    @handle(ReviewRejected)
    def on_review_rejected(self, event: ReviewRejected) -> None:
        dispatch_notice(
            CUSTOMER_REVIEW_DECISION,
            {
                "review_id": event.review_id,
                "product_id": event.product_id,
                "customer_name": event.customer_name,
                "customer_email": event.customer_email,
                "title": event.title,
                "status": ReviewStatus.REJECTED.value,
                "reason": event.reason or "",
            },
        )
