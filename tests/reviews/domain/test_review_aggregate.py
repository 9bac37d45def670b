"""Tests for Review.submit and the aggregate's invariants."""

import pytest
from protean.exceptions import ValidationError
from reviews.review.review import Review, ReviewStatus


def _make_review(**overrides):
    defaults = {
        "review_id": 1,
        "product_id": 42,
        "customer_id": 7,
        "order_id": 1001,
        "rating": 5,
        "title": "Great",
        "comment": "Absolutely wonderful service!!",
        "customer_name": "Jane Doe",
        "customer_email": "jane@example.com",
    }
    defaults.update(overrides)
    return Review.submit(**defaults)


class TestSubmit:
    def test_starts_pending(self):
        review = _make_review()
        assert review.status == ReviewStatus.PENDING.value

    def test_is_verified_purchase(self):
        assert _make_review().is_verified_purchase is True

    def test_counters_start_at_zero(self):
        review = _make_review()
        assert review.helpful == 0
        assert review.not_helpful == 0

    def test_spam_score_computed(self):
        assert _make_review().spam_score == 0.2

    def test_rating_wrapped_in_value_object(self):
        assert _make_review().rating.score == 5

    def test_customer_snapshot(self):
        review = _make_review()
        assert review.customer_name == "Jane Doe"
        assert review.customer_email == "jane@example.com"

    def test_missing_customer_name_is_anonymous(self):
        review = _make_review(customer_name=None, customer_email=None)
        assert review.customer_name == "Anonymous"
        assert review.customer_email == ""

    def test_text_is_trimmed(self):
        review = _make_review(title="  Great  ", comment="   Absolutely wonderful service!!   ")
        assert review.title == "Great"
        assert review.comment == "Absolutely wonderful service!!"

    def test_created_at_set(self):
        assert _make_review().created_at is not None

    def test_moderation_fields_empty(self):
        review = _make_review()
        assert review.moderated_by is None
        assert review.moderated_at is None
        assert review.approved_at is None
        assert review.rejected_at is None


class TestContentRules:
    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_out_of_range(self, rating):
        with pytest.raises(ValidationError) as exc:
            _make_review(rating=rating)
        assert "Rating must be between 1 and 5" in str(exc.value)

    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError):
            _make_review(title="   ")

    def test_title_at_max_length(self):
        assert len(_make_review(title="t" * 100).title) == 100

    def test_title_too_long(self):
        with pytest.raises(ValidationError) as exc:
            _make_review(title="t" * 101)
        assert "title" in exc.value.messages

    def test_comment_too_short(self):
        with pytest.raises(ValidationError) as exc:
            _make_review(comment="Too short")
        assert "at least 10 characters" in str(exc.value)

    def test_comment_length_measured_after_trim(self):
        with pytest.raises(ValidationError):
            _make_review(comment="    short    ")

    def test_comment_at_min_length(self):
        assert _make_review(comment="a" * 5 + "b" * 5).comment == "aaaaabbbbb"

    def test_comment_at_max_length(self):
        comment = "Good value. " * 83 + "Nice"
        assert len(comment) == 1000
        assert len(_make_review(comment=comment).comment) == 1000

    def test_comment_too_long(self):
        with pytest.raises(ValidationError) as exc:
            _make_review(comment="x" * 1001)
        assert "cannot exceed 1000 characters" in str(exc.value)
