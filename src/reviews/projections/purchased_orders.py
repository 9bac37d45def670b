"""PurchasedOrders — the customer orders the Reviews domain knows about.

Populated by the Ordering cross-domain event handler. Backs the order
source used for review eligibility and customer snapshots.
"""

from protean.fields import DateTime, Integer, String, Text

from reviews.domain import reviews


@reviews.projection
class PurchasedOrder:
    order_id = Integer(identifier=True, required=True)
    customer_id = Integer(required=True)
    customer_name = String(max_length=255)
    customer_email = String(max_length=255)
    status = String(required=True, max_length=20)  # "placed", "delivered", "cancelled"
    items = Text()  # JSON list of {product_id, quantity}
    updated_at = DateTime()
