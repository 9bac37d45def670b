"""Notice templates — render the payload handed to the notification sink.

Each template turns event context into an email-shaped payload
(`to`, `subject`, `template`, `data`).
"""

import os

from reviews.notification.port import ADMIN_NEW_REVIEW, CUSTOMER_REVIEW_DECISION


def admin_email() -> str:
    return os.getenv("REVIEWS_ADMIN_EMAIL", "admin@storefront.example")


def admin_base_url() -> str:
    return os.getenv("REVIEWS_ADMIN_BASE_URL", "/admin/reviews").rstrip("/")


class AdminNewReviewTemplate:
    """Sent to moderators when a review enters the queue."""

    kind = ADMIN_NEW_REVIEW

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "to": admin_email(),
            "subject": "New Review Awaiting Moderation",
            "template": "review_moderation",
            "data": {
                "review_id": context["review_id"],
                "product_id": context["product_id"],
                "customer_name": context.get("customer_name") or "Anonymous",
                "rating": context["rating"],
                "title": context["title"],
                "comment": context["comment"],
                "spam_score": context["spam_score"],
                "review_url": f"{admin_base_url()}/{context['review_id']}",
            },
        }


class CustomerReviewDecisionTemplate:
    """Sent to the reviewer once a moderator decided on their review."""

    kind = CUSTOMER_REVIEW_DECISION

    @staticmethod
    def render(context: dict) -> dict:
        approved = context["status"] == "approved"
        return {
            "to": context.get("customer_email") or "",
            "subject": "Review Approved" if approved else "Review Update",
            "template": "review_status_update",
            "data": {
                "review_id": context["review_id"],
                "customer_name": context.get("customer_name") or "Anonymous",
                "product_id": context["product_id"],
                "status": context["status"],
                "title": context["title"],
                "rejection_reason": None if approved else context.get("reason", ""),
            },
        }


TEMPLATE_REGISTRY: dict[str, type] = {
    ADMIN_NEW_REVIEW: AdminNewReviewTemplate,
    CUSTOMER_REVIEW_DECISION: CustomerReviewDecisionTemplate,
}


def render(kind: str, context: dict) -> dict:
    template_cls = TEMPLATE_REGISTRY.get(kind)
    if template_cls is None:
        raise ValueError(f"No template registered for notice kind: {kind}")
    return template_cls.render(context)
