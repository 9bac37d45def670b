"""Integration tests for the Review repository read paths."""

from datetime import UTC, datetime, timedelta

import pytest
from protean import current_domain
from reviews.review.review import Review

T0 = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


def _store(review_id, product_id=42, customer_id=None, status="pending", created_at=T0, spam=0.0, rating=4):
    review = Review.submit(
        review_id=review_id,
        product_id=product_id,
        customer_id=customer_id or review_id,
        order_id=1000 + review_id,
        rating=rating,
        title=f"Review {review_id}",
        comment="Does what it says, nothing more and nothing less.",
    )
    review.created_at = created_at
    review.spam_score = spam
    if status == "approved":
        review.approve(moderator_id="mod-001")
    elif status == "rejected":
        review.reject(moderator_id="mod-001", reason="Off topic")
    current_domain.repository_for(Review).add(review)
    return review


@pytest.fixture()
def repo():
    return current_domain.repository_for(Review)


class TestByProduct:
    def test_approved_only_by_default(self, repo):
        _store(1, status="approved")
        _store(2, status="pending")
        _store(3, status="rejected")
        page = repo.by_product(42)
        assert [r.id for r in page.reviews] == [1]
        assert page.total == 1

    def test_newest_first(self, repo):
        _store(1, status="approved", created_at=T0)
        _store(2, status="approved", created_at=T0 + timedelta(hours=2))
        _store(3, status="approved", created_at=T0 + timedelta(hours=1))
        assert [r.id for r in repo.by_product(42).reviews] == [2, 3, 1]

    def test_other_products_excluded(self, repo):
        _store(1, status="approved")
        _store(2, product_id=43, status="approved")
        assert [r.id for r in repo.by_product(42).reviews] == [1]

    def test_pagination(self, repo):
        for i in range(1, 6):
            _store(i, status="approved", created_at=T0 + timedelta(minutes=i))

        first = repo.by_product(42, limit=2)
        assert [r.id for r in first.reviews] == [5, 4]
        assert first.total == 5
        assert first.has_more is True

        last = repo.by_product(42, limit=2, offset=4)
        assert [r.id for r in last.reviews] == [1]
        assert last.has_more is False

    def test_offset_past_end(self, repo):
        _store(1, status="approved")
        page = repo.by_product(42, offset=10)
        assert page.reviews == []
        assert page.total == 1
        assert page.has_more is False

    def test_status_filter(self, repo):
        _store(1, status="approved")
        _store(2, status="pending")
        assert [r.id for r in repo.by_product(42, status="pending").reviews] == [2]

    def test_all_statuses(self, repo):
        _store(1, status="approved")
        _store(2, status="pending")
        _store(3, status="rejected")
        assert repo.by_product(42, status="all").total == 3


class TestPendingQueue:
    def test_riskiest_first_then_newest(self, repo):
        _store(1, spam=0.9, created_at=T0 + timedelta(hours=1))
        _store(2, spam=0.2, created_at=T0 + timedelta(hours=2))
        _store(3, spam=0.9, created_at=T0 + timedelta(hours=3))
        assert [r.id for r in repo.pending()] == [3, 1, 2]

    def test_only_pending(self, repo):
        _store(1, spam=0.9, status="approved")
        _store(2, spam=0.1)
        assert [r.id for r in repo.pending()] == [2]

    @pytest.mark.parametrize(
        "level, expected",
        [("high", [1]), ("medium", [1, 2]), ("low", [1, 2, 3])],
    )
    def test_spam_level(self, repo, level, expected):
        _store(1, spam=0.7)
        _store(2, spam=0.4)
        _store(3, spam=0.0)
        assert [r.id for r in repo.pending(spam_level=level)] == expected

    def test_product_filter(self, repo):
        _store(1)
        _store(2, product_id=43)
        assert [r.id for r in repo.pending(product_id=43)] == [2]

    def test_date_range_is_inclusive(self, repo):
        _store(1, created_at=T0)
        _store(2, created_at=T0 + timedelta(days=1))
        _store(3, created_at=T0 + timedelta(days=2))
        queue = repo.pending(date_from=T0 + timedelta(days=1), date_to=T0 + timedelta(days=2))
        assert sorted(r.id for r in queue) == [2, 3]

    def test_naive_dates_are_utc(self, repo):
        _store(1, created_at=T0)
        _store(2, created_at=T0 + timedelta(days=2))
        queue = repo.pending(date_from=datetime(2024, 5, 2))
        assert [r.id for r in queue] == [2]


class TestCustomerLookup:
    def test_finds_customers_review(self, repo):
        _store(1, customer_id=7)
        assert repo.for_customer_and_product(7, 42).id == 1

    def test_none_when_absent(self, repo):
        _store(1, customer_id=7)
        assert repo.for_customer_and_product(7, 43) is None
        assert repo.for_customer_and_product(8, 42) is None


class TestLargeCatalogue:
    """Reads cover every stored review, beyond the query set's default page size."""

    @pytest.fixture()
    def many_pending(self):
        for i in range(1, 151):
            _store(i, created_at=T0 + timedelta(minutes=i), spam=0.9 if i == 150 else 0.1)

    def test_all_reviews(self, repo, many_pending):
        assert len(repo.all_reviews()) == 150
        assert len(repo.all_reviews(42)) == 150

    def test_by_product_total(self, repo, many_pending):
        page = repo.by_product(42, status="all")
        assert page.total == 150
        assert page.has_more is True

    def test_by_product_last_page(self, repo, many_pending):
        page = repo.by_product(42, status="pending", limit=20, offset=140)
        assert [r.id for r in page.reviews] == list(range(10, 0, -1))
        assert page.has_more is False

    def test_pending_queue_complete(self, repo, many_pending):
        queue = repo.pending()
        assert len(queue) == 150
        assert queue[0].id == 150
