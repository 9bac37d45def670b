"""Domain events for the Review aggregate.

All events are versioned, immutable facts representing state changes.
Events are used for:
- Dispatching moderator and customer notices
- Cross-domain communication (contracts mirrored in shared.events.reviews)
"""

from protean.fields import Boolean, DateTime, Float, Integer, String, Text

from reviews.domain import reviews


@reviews.event(part_of="Review")
class ReviewSubmitted:
    """A customer submitted a review; it now awaits moderation."""

    __version__ = "v1"

    review_id = Integer(required=True)
    product_id = Integer(required=True)
    customer_id = Integer(required=True)
    order_id = Integer(required=True)
    customer_name = String(max_length=255)
    customer_email = String(max_length=255)
    rating = Integer(required=True)
    title = String(required=True, max_length=100)
    comment = Text(required=True)
    spam_score = Float(required=True)
    submitted_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ReviewApproved:
    """A moderator approved the review for display."""

    __version__ = "v1"

    review_id = Integer(required=True)
    product_id = Integer(required=True)
    customer_id = Integer(required=True)
    customer_name = String(max_length=255)
    customer_email = String(max_length=255)
    title = String(required=True, max_length=100)
    rating = Integer(required=True)
    moderator_id = String(required=True)
    approved_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ReviewRejected:
    """A moderator rejected the review."""

    __version__ = "v1"

    review_id = Integer(required=True)
    product_id = Integer(required=True)
    customer_id = Integer(required=True)
    customer_name = String(max_length=255)
    customer_email = String(max_length=255)
    title = String(required=True, max_length=100)
    moderator_id = String(required=True)
    reason = Text()
    rejected_at = DateTime(required=True)


@reviews.event(part_of="Review")
class HelpfulnessVoteRecorded:
    """A shopper marked an approved review as helpful or not helpful."""

    __version__ = "v1"

    review_id = Integer(required=True)
    is_helpful = Boolean(required=True)
    helpful = Integer(required=True)
    not_helpful = Integer(required=True)
    voted_at = DateTime(required=True)
