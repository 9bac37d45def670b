"""Shared BDD fixtures and step definitions for the Reviews domain."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then
from reviews.review.review import Review
from reviews.review.submission import SubmitReview


@pytest.fixture()
def error():
    """Container for captured errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse("customer {customer_id:d} received product {product_id:d} in order {order_id:d}"))
def delivered_purchase(record_order, customer_id, product_id, order_id):
    record_order(order_id, customer_id, [product_id])


@given(
    parsers.cfparse("customer {customer_id:d} already reviewed product {product_id:d}"),
    target_fixture="review_id",
)
def existing_review(customer_id, product_id):
    return current_domain.process(
        SubmitReview(
            product_id=product_id,
            customer_id=customer_id,
            rating=4,
            title="First impressions",
            comment="Does what it says, nothing more and nothing less.",
        ),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
def _review(review_id):
    return current_domain.repository_for(Review).get(review_id)


@then(parsers.re(r"the review is (?P<status>pending|approved|rejected)$"))
def review_has_status(review_id, status):
    assert _review(review_id).status == status
