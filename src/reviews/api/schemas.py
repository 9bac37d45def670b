"""Pydantic request/response schemas for the Reviews API.

These are separate from Protean commands (anti-corruption pattern).
The API layer is the external contract; commands are internal domain concepts.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class ReviewStatusFilter(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    ALL = "all"


class ModerationDecision(str, Enum):
    APPROVED = "approved"
    REJECTED = "rejected"


class SpamLevelFilter(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class SubmitReviewRequest(BaseModel):
    product_id: int
    customer_id: int
    order_id: int | None = None
    rating: int
    title: str
    comment: str


class ModerateReviewRequest(BaseModel):
    status: ModerationDecision
    moderator_id: str = "admin"
    reason: str | None = None


class BulkModerateRequest(BaseModel):
    review_ids: list[int] = Field(min_length=1)
    status: ModerationDecision
    moderator_id: str = "admin"
    reason: str | None = None


class VoteOnReviewRequest(BaseModel):
    is_helpful: bool


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ReviewResponse(BaseModel):
    id: int
    product_id: int
    customer_id: int
    order_id: int
    customer_name: str | None = None
    customer_email: str | None = None
    rating: int
    title: str
    comment: str
    status: str
    spam_score: float
    is_verified_purchase: bool
    helpful: int
    not_helpful: int
    created_at: datetime | None = None
    moderated_by: str | None = None
    moderated_at: datetime | None = None
    approved_at: datetime | None = None
    rejected_at: datetime | None = None
    rejection_reason: str | None = None


class ReviewListResponse(BaseModel):
    reviews: list[ReviewResponse]
    total: int
    has_more: bool


class ExistingReviewSummary(BaseModel):
    id: int
    title: str
    status: str


class EligibilityResponse(BaseModel):
    eligible: bool
    reason: str | None = None
    message: str | None = None
    existing_review: ExistingReviewSummary | None = None
    order_ids: list[int] = []


class ReviewStatsResponse(BaseModel):
    total: int
    approved: int
    pending: int
    rejected: int
    average_rating: float
    rating_distribution: dict[int, int]
    total_helpful: int


class ModerationOutcomeResponse(BaseModel):
    review_id: int
    succeeded: bool
    error: str | None = None
    error_type: str | None = None


class BulkModerationResponse(BaseModel):
    status: str
    succeeded: list[int]
    failed: dict[int, str]
    outcomes: list[ModerationOutcomeResponse]
