"""FastAPI routes for the Reviews bounded context.

Each write route translates a Pydantic schema (external contract) into a
Protean command (internal domain concept); read routes go straight to the
Review repository.
"""

from datetime import datetime

from fastapi import APIRouter, Query
from protean.utils.globals import current_domain

from reviews.api.schemas import (
    BulkModerateRequest,
    BulkModerationResponse,
    EligibilityResponse,
    ExistingReviewSummary,
    ModerateReviewRequest,
    ModerationOutcomeResponse,
    ReviewListResponse,
    ReviewResponse,
    ReviewStatsResponse,
    ReviewStatusFilter,
    SpamLevelFilter,
    SubmitReviewRequest,
    VoteOnReviewRequest,
)
from reviews.review.eligibility import check_eligibility
from reviews.review.moderation import ModerateReview, moderate_reviews
from reviews.review.removal import DeleteReview
from reviews.review.review import Review
from reviews.review.statistics import get_stats
from reviews.review.submission import SubmitReview
from reviews.review.voting import VoteOnReview
from reviews.utils.logging import bind_review_context

review_router = APIRouter(prefix="/reviews", tags=["reviews"])


def _to_response(review: Review) -> ReviewResponse:
    return ReviewResponse(
        id=review.id,
        product_id=review.product_id,
        customer_id=review.customer_id,
        order_id=review.order_id,
        customer_name=review.customer_name,
        customer_email=review.customer_email,
        rating=review.rating.score,
        title=review.title,
        comment=review.comment,
        status=review.status,
        spam_score=review.spam_score,
        is_verified_purchase=review.is_verified_purchase,
        helpful=review.helpful,
        not_helpful=review.not_helpful,
        created_at=review.created_at,
        moderated_by=review.moderated_by,
        moderated_at=review.moderated_at,
        approved_at=review.approved_at,
        rejected_at=review.rejected_at,
        rejection_reason=review.rejection_reason,
    )


def _load(review_id: int) -> ReviewResponse:
    return _to_response(current_domain.repository_for(Review).get(review_id))


# ---------------------------------------------------------------------------
# Customer-facing
# ---------------------------------------------------------------------------
@review_router.post("", status_code=201, response_model=ReviewResponse)
async def submit_review(body: SubmitReviewRequest) -> ReviewResponse:
    """Submit a review for a product the customer received."""
    command = SubmitReview(
        product_id=body.product_id,
        customer_id=body.customer_id,
        order_id=body.order_id,
        rating=body.rating,
        title=body.title,
        comment=body.comment,
    )
    review_id = current_domain.process(command, asynchronous=False)
    return _load(review_id)


@review_router.get("/eligibility", response_model=EligibilityResponse)
async def review_eligibility(customer_id: int, product_id: int) -> EligibilityResponse:
    """Tell the storefront whether to show the review form."""
    result = check_eligibility(customer_id, product_id)
    existing = None
    if result.existing_review is not None:
        existing = ExistingReviewSummary(
            id=result.existing_review.id,
            title=result.existing_review.title,
            status=result.existing_review.status,
        )
    return EligibilityResponse(
        eligible=result.eligible,
        reason=result.reason,
        message=result.message,
        existing_review=existing,
        order_ids=result.order_ids,
    )


@review_router.get("/products/{product_id}", response_model=ReviewListResponse)
async def list_product_reviews(
    product_id: int,
    status: ReviewStatusFilter = ReviewStatusFilter.APPROVED,
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
) -> ReviewListResponse:
    """A page of a product's reviews, newest first."""
    page = current_domain.repository_for(Review).by_product(
        product_id,
        status=status.value,
        limit=limit,
        offset=offset,
    )
    return ReviewListResponse(
        reviews=[_to_response(r) for r in page.reviews],
        total=page.total,
        has_more=page.has_more,
    )


@review_router.get("/stats", response_model=ReviewStatsResponse)
async def review_stats(product_id: int | None = None) -> ReviewStatsResponse:
    """Review counts, average rating and rating distribution."""
    stats = get_stats(product_id)
    return ReviewStatsResponse(
        total=stats.total,
        approved=stats.approved,
        pending=stats.pending,
        rejected=stats.rejected,
        average_rating=stats.average_rating,
        rating_distribution=stats.rating_distribution,
        total_helpful=stats.total_helpful,
    )


# ---------------------------------------------------------------------------
# Moderation
# ---------------------------------------------------------------------------
@review_router.get("/pending", response_model=list[ReviewResponse])
async def pending_reviews(
    spam_level: SpamLevelFilter | None = None,
    product_id: int | None = None,
    date_from: datetime | None = None,
    date_to: datetime | None = None,
) -> list[ReviewResponse]:
    """The moderation queue, riskiest reviews first."""
    queue = current_domain.repository_for(Review).pending(
        spam_level=spam_level.value if spam_level else None,
        product_id=product_id,
        date_from=date_from,
        date_to=date_to,
    )
    return [_to_response(r) for r in queue]


@review_router.post("/moderation/bulk", response_model=BulkModerationResponse)
async def bulk_moderate(body: BulkModerateRequest) -> BulkModerationResponse:
    """Approve or reject many reviews; each one succeeds or fails on its own."""
    bind_review_context(moderator_id=body.moderator_id)
    result = moderate_reviews(
        body.review_ids,
        body.status.value,
        moderator_id=body.moderator_id,
        reason=body.reason,
    )
    return BulkModerationResponse(
        status=result.status,
        succeeded=result.succeeded,
        failed=result.failed,
        outcomes=[
            ModerationOutcomeResponse(
                review_id=o.review_id,
                succeeded=o.succeeded,
                error=o.error,
                error_type=o.error_type,
            )
            for o in result.outcomes
        ],
    )


@review_router.get("/{review_id}", response_model=ReviewResponse)
async def get_review(review_id: int) -> ReviewResponse:
    return _load(review_id)


@review_router.put("/{review_id}/moderate", response_model=ReviewResponse)
async def moderate_review(review_id: int, body: ModerateReviewRequest) -> ReviewResponse:
    """Approve or reject a pending review."""
    bind_review_context(moderator_id=body.moderator_id)
    command = ModerateReview(
        review_id=review_id,
        status=body.status.value,
        moderator_id=body.moderator_id,
        reason=body.reason,
    )
    current_domain.process(command, asynchronous=False)
    return _load(review_id)


@review_router.post("/{review_id}/votes", response_model=ReviewResponse)
async def vote_on_review(review_id: int, body: VoteOnReviewRequest) -> ReviewResponse:
    """Mark an approved review as helpful or not helpful."""
    command = VoteOnReview(review_id=review_id, is_helpful=body.is_helpful)
    current_domain.process(command, asynchronous=False)
    return _load(review_id)


@review_router.delete("/{review_id}", response_model=ReviewResponse)
async def delete_review(review_id: int) -> ReviewResponse:
    """Remove a review outright (administrative correction)."""
    deleted = _load(review_id)
    current_domain.process(DeleteReview(review_id=review_id), asynchronous=False)
    return deleted
