"""Review statistics — counts, average rating and rating distribution.

Derived on read from the Review repository, for one product or the whole
catalogue. Only approved reviews contribute to the average and to the
distribution; helpful votes are summed across all reviews.
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from protean.utils.globals import current_domain

from reviews.review.review import Review, ReviewStatus


def _empty_distribution() -> dict[int, int]:
    return {5: 0, 4: 0, 3: 0, 2: 0, 1: 0}


@dataclass(frozen=True)
class ReviewStats:
    total: int = 0
    approved: int = 0
    pending: int = 0
    rejected: int = 0
    average_rating: float = 0.0
    rating_distribution: dict[int, int] = field(default_factory=_empty_distribution)
    total_helpful: int = 0


def _average(ratings: list[int]) -> float:
    if not ratings:
        return 0.0
    mean = Decimal(sum(ratings)) / Decimal(len(ratings))
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def compute_stats(reviews: list[Review]) -> ReviewStats:
    by_status = {status: 0 for status in ReviewStatus}
    distribution = _empty_distribution()
    approved_ratings = []

    for review in reviews:
        status = ReviewStatus(review.status)
        by_status[status] += 1
        if status == ReviewStatus.APPROVED:
            distribution[review.rating.score] += 1
            approved_ratings.append(review.rating.score)

    return ReviewStats(
        total=len(reviews),
        approved=by_status[ReviewStatus.APPROVED],
        pending=by_status[ReviewStatus.PENDING],
        rejected=by_status[ReviewStatus.REJECTED],
        average_rating=_average(approved_ratings),
        rating_distribution=distribution,
        total_helpful=sum(review.helpful or 0 for review in reviews),
    )


def get_stats(product_id: int | None = None) -> ReviewStats:
    """Statistics for one product, or for every review when product_id is None."""
    return compute_stats(current_domain.repository_for(Review).all_reviews(product_id))
