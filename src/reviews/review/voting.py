"""VoteOnReview — record whether a shopper found a review helpful.

Only approved (displayed) reviews can be voted on. Counters only grow.
"""

from protean.fields import Boolean, Integer
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.review import Review


@reviews.command(part_of="Review")
class VoteOnReview:
    review_id = Integer(required=True)
    is_helpful = Boolean(required=True)


@reviews.command_handler(part_of=Review)
class VoteOnReviewHandler:
    @handle(VoteOnReview)
    def vote_on_review(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)

        review.record_helpfulness(command.is_helpful)

        repo.add(review)
        return review.id
