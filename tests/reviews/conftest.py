import json
from datetime import UTC, datetime

import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture
from reviews.notification import set_sink
from reviews.notification.fake_sink import FakeNotificationSink
from reviews.ordering import OrderStatus
from reviews.projections.purchased_orders import PurchasedOrder


@pytest.fixture(scope="session")
def reviews_bed():
    from reviews.domain import reviews

    bed = DomainFixture(reviews)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(reviews_bed):
    with reviews_bed.domain_context():
        yield


@pytest.fixture()
def fake_sink():
    sink = FakeNotificationSink()
    set_sink(sink)
    return sink


def _record_order(
    order_id,
    customer_id,
    product_ids,
    status=OrderStatus.DELIVERED,
    customer_name="Jane Doe",
    customer_email="jane@example.com",
):
    """Store an order the way the Ordering event handler would."""
    current_domain.repository_for(PurchasedOrder).add(
        PurchasedOrder(
            order_id=order_id,
            customer_id=customer_id,
            customer_name=customer_name,
            customer_email=customer_email,
            status=status,
            items=json.dumps([{"product_id": pid, "quantity": 1} for pid in product_ids]),
            updated_at=datetime.now(UTC),
        )
    )


@pytest.fixture()
def record_order():
    return _record_order


@pytest.fixture()
def delivered_order(record_order):
    """Order 1001: customer 7 received products 42 and 43."""
    record_order(1001, 7, [42, 43])
    return 1001
