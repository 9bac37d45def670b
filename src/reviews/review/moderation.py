"""ModerateReview — approve or reject a pending review.

Moderators approve pending reviews for display or reject them with a
reason. Decisions are final. `moderate_reviews` applies one decision to a
batch of reviews, each as its own command, and reports the outcome per id.
"""

from dataclasses import dataclass, field

import structlog
from protean.exceptions import InvalidOperationError, ObjectNotFoundError, ProteanException, ValidationError
from protean.fields import Integer, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.review import Review, ReviewStatus

logger = structlog.get_logger(__name__)

DEFAULT_MODERATOR = "admin"

_DECISIONS = (ReviewStatus.APPROVED.value, ReviewStatus.REJECTED.value)


def _validate_decision(status, reason):
    if status not in _DECISIONS:
        raise ValidationError({"status": [f"Moderation status must be one of: {', '.join(_DECISIONS)}"]})
    if status == ReviewStatus.REJECTED.value and not (reason or "").strip():
        raise ValidationError({"reason": ["Reason is required when rejecting a review"]})


@reviews.command(part_of="Review")
class ModerateReview:
    review_id = Integer(required=True)
    status = String(required=True, max_length=20)  # "approved" or "rejected"
    moderator_id = String(max_length=255, default=DEFAULT_MODERATOR)
    reason = Text()  # Required for rejection


@reviews.command_handler(part_of=Review)
class ModerateReviewHandler:
    @handle(ModerateReview)
    def moderate_review(self, command):
        _validate_decision(command.status, command.reason)

        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)

        moderator_id = command.moderator_id or DEFAULT_MODERATOR
        if command.status == ReviewStatus.APPROVED.value:
            review.approve(moderator_id=moderator_id)
        else:
            review.reject(moderator_id=moderator_id, reason=command.reason.strip())

        repo.add(review)

        logger.info(
            "Review moderated",
            review_id=review.id,
            status=review.status,
            moderator_id=moderator_id,
        )
        return review.id


# ---------------------------------------------------------------------------
# Bulk moderation
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ModerationOutcome:
    review_id: int
    succeeded: bool
    error: str | None = None
    error_type: str | None = None


@dataclass(frozen=True)
class BulkModerationResult:
    status: str
    outcomes: list[ModerationOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> list[int]:
        return [o.review_id for o in self.outcomes if o.succeeded]

    @property
    def failed(self) -> dict[int, str]:
        return {o.review_id: o.error for o in self.outcomes if not o.succeeded}


def moderate_reviews(review_ids, status, moderator_id=DEFAULT_MODERATOR, reason=None) -> BulkModerationResult:
    """Apply one moderation decision to many reviews, best-effort.

    The decision itself is validated once, before any review is touched.
    Each review is then moderated in its own unit of work, so one failure
    (unknown id, already moderated, a concurrent write) does not block the
    rest.
    """
    _validate_decision(status, reason)

    outcomes = []
    for review_id in dict.fromkeys(review_ids):
        try:
            current_domain.process(
                ModerateReview(
                    review_id=review_id,
                    status=status,
                    moderator_id=moderator_id,
                    reason=reason,
                ),
                asynchronous=False,
            )
            outcomes.append(ModerationOutcome(review_id=review_id, succeeded=True))
        except (ObjectNotFoundError, ValidationError, InvalidOperationError, ProteanException) as exc:
            logger.warning(
                "Failed to moderate review in batch",
                review_id=review_id,
                status=status,
                error=str(exc),
            )
            outcomes.append(
                ModerationOutcome(
                    review_id=review_id,
                    succeeded=False,
                    error=str(exc),
                    error_type=type(exc).__name__,
                )
            )

    logger.info(
        "Bulk moderation complete",
        status=status,
        succeeded=sum(1 for o in outcomes if o.succeeded),
        failed=sum(1 for o in outcomes if not o.succeeded),
    )
    return BulkModerationResult(status=status, outcomes=outcomes)
