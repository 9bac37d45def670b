"""Cross-domain event contracts for Reviews domain events.

These classes define the event shape for consumption by other domains
(e.g., the Catalogue domain to show product ratings, or a notifications
service to email customers). They are registered as external events via
domain.register_external_event() with matching __type__ strings so
Protean's stream deserialization works correctly.

The source-of-truth events are in src/reviews/review/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Float, Integer, String, Text


class ReviewSubmitted(BaseEvent):
    """A review was submitted and awaits moderation."""

    __version__ = "v1"

    review_id = Integer(required=True)
    product_id = Integer(required=True)
    customer_id = Integer(required=True)
    order_id = Integer(required=True)
    rating = Integer(required=True)
    title = String(required=True)
    spam_score = Float(required=True)
    submitted_at = DateTime(required=True)


class ReviewApproved(BaseEvent):
    """A review was approved for display."""

    __version__ = "v1"

    review_id = Integer(required=True)
    product_id = Integer(required=True)
    customer_id = Integer(required=True)
    rating = Integer(required=True)
    moderator_id = String(required=True)
    approved_at = DateTime(required=True)


class ReviewRejected(BaseEvent):
    """A review was rejected by a moderator."""

    __version__ = "v1"

    review_id = Integer(required=True)
    product_id = Integer(required=True)
    customer_id = Integer(required=True)
    moderator_id = String(required=True)
    reason = Text()
    rejected_at = DateTime(required=True)
