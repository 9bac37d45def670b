"""DeleteReview — physically remove a review (administrative correction).

Not part of the normal lifecycle: moderation decisions are the way to keep
a review off the product page. Deletion is logged for audit.
"""

import structlog
from protean.fields import Integer, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.review import Review

logger = structlog.get_logger(__name__)


@reviews.command(part_of="Review")
class DeleteReview:
    review_id = Integer(required=True)
    deleted_by = String(max_length=255, default="admin")


@reviews.command_handler(part_of=Review)
class DeleteReviewHandler:
    @handle(DeleteReview)
    def delete_review(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)

        repo._dao.delete(review)

        logger.warning(
            "Review deleted",
            review_id=review.id,
            product_id=review.product_id,
            customer_id=review.customer_id,
            status=review.status,
            deleted_by=command.deleted_by,
        )
        return review.id
