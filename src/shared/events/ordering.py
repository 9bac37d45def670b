"""Cross-domain event contracts for Ordering domain events.

These classes define the event shape consumed by the Reviews domain to
learn which customers received which products (review eligibility) and
whose name/email to snapshot onto a review. They are registered as
external events via domain.register_external_event() with matching
__type__ strings so Protean's stream deserialization works correctly.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Float, Integer, String, Text


class OrderCreated(BaseEvent):
    """A customer placed an order at checkout."""

    __version__ = "v1"

    order_id = Integer(required=True)
    customer_id = Integer(required=True)
    customer_name = String(max_length=255)
    customer_email = String(max_length=255)
    items = Text(required=True)  # JSON list of {product_id, quantity}
    grand_total = Float()
    created_at = DateTime(required=True)


class OrderDelivered(BaseEvent):
    """All items of the order reached the customer.

    customer_id and items are repeated so consumers that never saw the
    OrderCreated event can still record the purchase.
    """

    __version__ = "v1"

    order_id = Integer(required=True)
    customer_id = Integer()
    items = Text()  # JSON list of {product_id, quantity}
    delivered_at = DateTime(required=True)


class OrderCancelled(BaseEvent):
    """The order was cancelled before delivery."""

    __version__ = "v1"

    order_id = Integer(required=True)
    reason = String()
    cancelled_at = DateTime(required=True)
