"""SubmitReview — submit a new product review.

Re-runs the eligibility check (delivered purchase, one review per customer
per product) before anything is written, snapshots the customer's name and
email from the order, and stores the review as pending moderation.
"""

import structlog
from protean.exceptions import ValidationError
from protean.fields import Integer, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.ordering import get_order_source
from reviews.review.eligibility import check_eligibility
from reviews.review.exceptions import IneligibleToReview
from reviews.review.review import Review
from reviews.review.sequence import next_review_id

logger = structlog.get_logger(__name__)


@reviews.command(part_of="Review")
class SubmitReview:
    product_id = Integer(required=True)
    customer_id = Integer(required=True)
    order_id = Integer()  # Defaults to the first qualifying order
    rating = Integer(required=True)
    title = String(required=True)
    comment = Text(required=True)


@reviews.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        eligibility = check_eligibility(command.customer_id, command.product_id)
        if not eligibility.eligible:
            logger.info(
                "Review submission refused",
                customer_id=command.customer_id,
                product_id=command.product_id,
                reason=eligibility.reason,
            )
            raise IneligibleToReview(
                eligibility.reason,
                eligibility.message,
                existing_review=eligibility.existing_review,
            )

        order_id = command.order_id or eligibility.default_order_id
        if order_id not in eligibility.order_ids:
            raise ValidationError({"order_id": [f"Order {order_id} is not a delivered order containing this product"]})

        order = get_order_source().order_by_id(order_id)

        review = Review.submit(
            review_id=next_review_id(),
            product_id=command.product_id,
            customer_id=command.customer_id,
            order_id=order_id,
            rating=command.rating,
            title=command.title,
            comment=command.comment,
            customer_name=order.customer_name,
            customer_email=order.customer_email,
        )
        current_domain.repository_for(Review).add(review)

        logger.info(
            "Review submitted",
            review_id=review.id,
            product_id=review.product_id,
            spam_score=review.spam_score,
        )
        return review.id
