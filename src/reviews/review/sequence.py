"""ReviewSequence — hands out monotonically increasing review ids.

Ids are never reused, even after a review is deleted, so the counter lives
in its own aggregate instead of being derived from existing reviews.
"""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from reviews.domain import reviews

REVIEW_SEQUENCE = "reviews"


@reviews.aggregate
class ReviewSequence:
    name = String(identifier=True, max_length=50)
    last_value = Integer(default=0)

    def advance(self) -> int:
        self.last_value = (self.last_value or 0) + 1
        return self.last_value


def next_review_id() -> int:
    """Reserve the next review id. Must run inside the submitting unit of work."""
    repo = current_domain.repository_for(ReviewSequence)
    try:
        sequence = repo.get(REVIEW_SEQUENCE)
    except ObjectNotFoundError:
        sequence = ReviewSequence(name=REVIEW_SEQUENCE, last_value=0)

    value = sequence.advance()
    repo.add(sequence)
    return value
