"""Repository for the Review aggregate.

The base repository provides `add`/`get`; the query methods here back the
product page listing, the moderation queue and the statistics read paths.
Storage is whatever provider the domain is configured with (memory by
default), so tests and production share one contract.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from reviews.domain import reviews
from reviews.review.review import Review, ReviewStatus
from reviews.review.spam import threshold_for

ALL_STATUSES = "all"


def _as_utc(value: datetime) -> datetime:
    # Naive datetimes are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


@dataclass(frozen=True)
class ReviewPage:
    """One page of a product's reviews, newest first."""

    reviews: list = field(default_factory=list)
    total: int = 0
    has_more: bool = False


@reviews.repository(part_of=Review)
class ReviewRepository:
    def all_reviews(self, product_id: int | None = None) -> list[Review]:
        """Every review, optionally scoped to one product."""
        # limit(None) lifts the query set's default page size
        query = self._dao.query.limit(None)
        if product_id is not None:
            query = query.filter(product_id=product_id)
        return query.all().items

    def for_customer_and_product(self, customer_id: int, product_id: int) -> Review | None:
        """The customer's review of the product, if they wrote one."""
        existing = self._dao.query.filter(customer_id=customer_id, product_id=product_id).limit(1).all().items
        return existing[0] if existing else None

    def by_product(
        self,
        product_id: int,
        status: str = ReviewStatus.APPROVED.value,
        limit: int = 10,
        offset: int = 0,
    ) -> ReviewPage:
        """Page through a product's reviews, newest first.

        `status="all"` lists every review regardless of moderation state.
        """
        query = self._dao.query.filter(product_id=product_id)
        if status != ALL_STATUSES:
            query = query.filter(status=ReviewStatus(status).value)

        result = query.order_by("-created_at").offset(offset).limit(limit).all()

        return ReviewPage(
            reviews=result.items,
            total=result.total,
            has_more=offset + limit < result.total,
        )

    def pending(
        self,
        spam_level=None,
        product_id: int | None = None,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
    ) -> list[Review]:
        """The moderation queue: riskiest first, newest first among equal scores."""
        queue = self._dao.query.filter(status=ReviewStatus.PENDING.value).limit(None).all().items

        if spam_level:
            threshold = threshold_for(spam_level)
            queue = [r for r in queue if r.spam_score >= threshold]

        if product_id is not None:
            queue = [r for r in queue if r.product_id == product_id]

        if date_from is not None:
            queue = [r for r in queue if _as_utc(r.created_at) >= _as_utc(date_from)]

        if date_to is not None:
            queue = [r for r in queue if _as_utc(r.created_at) <= _as_utc(date_to)]

        return sorted(queue, key=lambda r: (r.spam_score, r.created_at), reverse=True)
