"""Inbound cross-domain event handler — Reviews reacts to Ordering events.

Keeps the PurchasedOrder projection in step with the Ordering domain so
that eligibility checks can tell whether a customer received a product.

Cross-domain events are imported from shared.events.ordering and registered
as external events via reviews.register_external_event().
"""

import json
from datetime import UTC, datetime

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.events.ordering import OrderCancelled, OrderCreated, OrderDelivered

from reviews.domain import reviews
from reviews.ordering import OrderStatus
from reviews.projections.purchased_orders import PurchasedOrder
from reviews.review.review import Review

logger = structlog.get_logger(__name__)

# Register external events so Protean can deserialize them
reviews.register_external_event(OrderCreated, "Ordering.OrderCreated.v1")
reviews.register_external_event(OrderDelivered, "Ordering.OrderDelivered.v1")
reviews.register_external_event(OrderCancelled, "Ordering.OrderCancelled.v1")


def _parse_items(raw) -> list[dict]:
    """Keep only line items that name a product."""
    try:
        items = json.loads(raw) if isinstance(raw, str) else []
    except ValueError:
        logger.warning("Order items are not valid JSON, ignoring them")
        return []
    return [item for item in items if isinstance(item, dict) and item.get("product_id") is not None]


@reviews.event_handler(part_of=Review, stream_category="ordering::order")
class OrderingEventsHandler:
    """Reacts to Ordering domain events to track purchased orders."""

    @handle(OrderCreated)
    def on_order_created(self, event: OrderCreated) -> None:
        current_domain.repository_for(PurchasedOrder).add(
            PurchasedOrder(
                order_id=event.order_id,
                customer_id=event.customer_id,
                customer_name=event.customer_name,
                customer_email=event.customer_email,
                status=OrderStatus.PLACED,
                items=json.dumps(_parse_items(event.items)),
                updated_at=event.created_at,
            )
        )

    @handle(OrderDelivered)
    def on_order_delivered(self, event: OrderDelivered) -> None:
        """Mark the order delivered, recording it first if it was never seen."""
        repo = current_domain.repository_for(PurchasedOrder)

        try:
            order = repo.get(event.order_id)
        except ObjectNotFoundError:
            if not event.customer_id:
                logger.info(
                    "OrderDelivered for unknown order without customer_id, skipping",
                    order_id=event.order_id,
                )
                return
            order = PurchasedOrder(
                order_id=event.order_id,
                customer_id=event.customer_id,
                status=OrderStatus.PLACED,
                items=json.dumps([]),
            )

        if event.items:
            order.items = json.dumps(_parse_items(event.items))

        order.status = OrderStatus.DELIVERED
        order.updated_at = event.delivered_at or datetime.now(UTC)
        repo.add(order)

    @handle(OrderCancelled)
    def on_order_cancelled(self, event: OrderCancelled) -> None:
        repo = current_domain.repository_for(PurchasedOrder)
        try:
            order = repo.get(event.order_id)
        except ObjectNotFoundError:
            logger.info("OrderCancelled for unknown order, skipping", order_id=event.order_id)
            return

        order.status = OrderStatus.CANCELLED
        order.updated_at = event.cancelled_at
        repo.add(order)
