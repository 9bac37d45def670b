"""Review eligibility — may this customer review this product?

A customer may review a product once they have received it (a delivered
order containing the product) and as long as they have not reviewed it
before. The check is never cached: the submit handler runs it again to
close the gap between showing the review form and submitting it.
"""

from dataclasses import dataclass, field

from protean.utils.globals import current_domain

from reviews.ordering import get_order_source
from reviews.review.review import Review

NO_PURCHASE = "no_purchase"
ALREADY_REVIEWED = "already_reviewed"

MESSAGES = {
    NO_PURCHASE: "You must purchase and receive this product before reviewing",
    ALREADY_REVIEWED: "You have already reviewed this product",
}


@dataclass(frozen=True)
class EligibilityResult:
    eligible: bool
    reason: str | None = None
    message: str | None = None
    existing_review: Review | None = None
    order_ids: list[int] = field(default_factory=list)

    @property
    def default_order_id(self) -> int | None:
        return self.order_ids[0] if self.order_ids else None


def _ineligible(reason, existing_review=None) -> EligibilityResult:
    return EligibilityResult(
        eligible=False,
        reason=reason,
        message=MESSAGES[reason],
        existing_review=existing_review,
    )


def check_eligibility(customer_id: int, product_id: int) -> EligibilityResult:
    qualifying = [
        order
        for order in get_order_source().orders_for_customer(customer_id)
        if order.customer_id == customer_id and order.is_delivered and order.contains(product_id)
    ]
    if not qualifying:
        return _ineligible(NO_PURCHASE)

    existing = current_domain.repository_for(Review).for_customer_and_product(customer_id, product_id)
    if existing is not None:
        return _ineligible(ALREADY_REVIEWED, existing_review=existing)

    return EligibilityResult(eligible=True, order_ids=[order.order_id for order in qualifying])
