"""Review aggregate (CQRS) — the core of the Reviews domain.

The Review aggregate manages the lifecycle of a customer's product review:
submission (with spam scoring), moderation and helpfulness voting.

CQRS (not event sourced) — reviews are write-once-mostly with simple state
transitions and no temporal query needs.

State Machine (3 states):
    PENDING → APPROVED | REJECTED
    APPROVED → (terminal)
    REJECTED → (terminal)
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import (
    Boolean,
    DateTime,
    Float,
    Integer,
    String,
    Text,
    ValueObject,
)

from reviews.domain import reviews
from reviews.review.events import (
    HelpfulnessVoteRecorded,
    ReviewApproved,
    ReviewRejected,
    ReviewSubmitted,
)
from reviews.review.exceptions import ReviewAlreadyModerated
from reviews.review.spam import spam_score

TITLE_MAX_LENGTH = 100
COMMENT_MIN_LENGTH = 10
COMMENT_MAX_LENGTH = 1000


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class ReviewStatus(Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


# ---------------------------------------------------------------------------
# State Machine
# ---------------------------------------------------------------------------
_VALID_TRANSITIONS = {
    ReviewStatus.PENDING: {ReviewStatus.APPROVED, ReviewStatus.REJECTED},
    ReviewStatus.APPROVED: set(),  # Terminal state
    ReviewStatus.REJECTED: set(),  # Terminal state
}


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@reviews.value_object(part_of="Review")
class Rating:
    """A star rating from 1 to 5."""

    score = Integer(required=True)

    @invariant.post
    def score_must_be_in_range(self):
        if self.score is not None and (self.score < 1 or self.score > 5):
            raise ValidationError({"rating": ["Rating must be between 1 and 5"]})


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@reviews.aggregate
class Review:
    """A customer's review of a product they received."""

    id = Integer(identifier=True)

    # References
    product_id = Integer(required=True)
    customer_id = Integer(required=True)
    order_id = Integer(required=True)

    # Snapshot of the order's customer info at submission time
    customer_name = String(max_length=255, default="Anonymous")
    customer_email = String(max_length=255, default="")

    # Content
    rating = ValueObject(Rating, required=True)
    title = String(required=True, max_length=TITLE_MAX_LENGTH)
    comment = Text(required=True)

    # Moderation
    status = String(choices=ReviewStatus, default=ReviewStatus.PENDING.value)
    spam_score = Float(default=0.0)
    moderated_by = String(max_length=255)
    moderated_at = DateTime()
    approved_at = DateTime()
    rejected_at = DateTime()
    rejection_reason = Text()

    is_verified_purchase = Boolean(default=True)

    # Helpfulness
    helpful = Integer(default=0)
    not_helpful = Integer(default=0)

    created_at = DateTime()

    # -------------------------------------------------------------------
    # Invariants
    # -------------------------------------------------------------------
    @invariant.post
    def title_must_not_be_empty(self):
        if self.title is not None and len(self.title.strip()) == 0:
            raise ValidationError({"title": ["Review title cannot be empty"]})

    @invariant.post
    def comment_length_within_bounds(self):
        if self.comment is None:
            return
        length = len(self.comment.strip())
        if length < COMMENT_MIN_LENGTH:
            raise ValidationError({"comment": [f"Review comment must be at least {COMMENT_MIN_LENGTH} characters"]})
        if length > COMMENT_MAX_LENGTH:
            raise ValidationError({"comment": [f"Review comment cannot exceed {COMMENT_MAX_LENGTH} characters"]})

    @invariant.post
    def counters_cannot_be_negative(self):
        if (self.helpful or 0) < 0 or (self.not_helpful or 0) < 0:
            raise ValidationError({"helpful": ["Helpfulness counters cannot be negative"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def submit(
        cls,
        review_id,
        product_id,
        customer_id,
        order_id,
        rating,
        title,
        comment,
        customer_name=None,
        customer_email=None,
    ):
        """Submit a new review. Every review starts out pending moderation."""
        now = datetime.now(UTC)

        title = title.strip() if isinstance(title, str) else title
        comment = comment.strip() if isinstance(comment, str) else comment
        score = spam_score(title, comment)

        review = cls(
            id=review_id,
            product_id=product_id,
            customer_id=customer_id,
            order_id=order_id,
            customer_name=customer_name or "Anonymous",
            customer_email=customer_email or "",
            rating=Rating(score=rating),
            title=title,
            comment=comment,
            status=ReviewStatus.PENDING.value,
            spam_score=score,
            is_verified_purchase=True,
            helpful=0,
            not_helpful=0,
            created_at=now,
        )

        review.raise_(
            ReviewSubmitted(
                review_id=review.id,
                product_id=review.product_id,
                customer_id=review.customer_id,
                order_id=review.order_id,
                customer_name=review.customer_name,
                customer_email=review.customer_email,
                rating=review.rating.score,
                title=review.title,
                comment=review.comment,
                spam_score=score,
                submitted_at=now,
            )
        )

        return review

    # -------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status):
        """Moderation decisions are final: only pending reviews can move."""
        current = ReviewStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise ReviewAlreadyModerated(self.id, current.value)

    # -------------------------------------------------------------------
    # Moderation
    # -------------------------------------------------------------------
    def approve(self, moderator_id):
        """Approve the review for display on the product page."""
        self._assert_can_transition(ReviewStatus.APPROVED)

        now = datetime.now(UTC)
        self.status = ReviewStatus.APPROVED.value
        self.moderated_by = str(moderator_id)
        self.moderated_at = now
        self.approved_at = now

        self.raise_(
            ReviewApproved(
                review_id=self.id,
                product_id=self.product_id,
                customer_id=self.customer_id,
                customer_name=self.customer_name,
                customer_email=self.customer_email,
                title=self.title,
                rating=self.rating.score,
                moderator_id=str(moderator_id),
                approved_at=now,
            )
        )

    def reject(self, moderator_id, reason=""):
        """Reject the review. An empty reason is stored as-is."""
        self._assert_can_transition(ReviewStatus.REJECTED)

        now = datetime.now(UTC)
        self.status = ReviewStatus.REJECTED.value
        self.moderated_by = str(moderator_id)
        self.moderated_at = now
        self.rejected_at = now
        self.rejection_reason = reason or ""

        self.raise_(
            ReviewRejected(
                review_id=self.id,
                product_id=self.product_id,
                customer_id=self.customer_id,
                customer_name=self.customer_name,
                customer_email=self.customer_email,
                title=self.title,
                moderator_id=str(moderator_id),
                reason=self.rejection_reason,
                rejected_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Helpfulness
    # -------------------------------------------------------------------
    def record_helpfulness(self, is_helpful):
        """Count a helpful / not helpful vote. Only approved reviews are votable."""
        if ReviewStatus(self.status) != ReviewStatus.APPROVED:
            raise ValidationError({"status": ["Only approved reviews can be voted on"]})

        if is_helpful:
            self.helpful = self.helpful + 1
        else:
            self.not_helpful = self.not_helpful + 1

        self.raise_(
            HelpfulnessVoteRecorded(
                review_id=self.id,
                is_helpful=bool(is_helpful),
                helpful=self.helpful,
                not_helpful=self.not_helpful,
                voted_at=datetime.now(UTC),
            )
        )
