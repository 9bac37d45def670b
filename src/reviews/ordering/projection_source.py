"""Order source backed by the PurchasedOrder projection."""

import json

from protean.utils.globals import current_domain

from reviews.ordering.port import Order, OrderSource
from reviews.projections.purchased_orders import PurchasedOrder


def _to_order(record: PurchasedOrder) -> Order:
    items = json.loads(record.items) if record.items else []
    return Order(
        order_id=record.order_id,
        customer_id=record.customer_id,
        status=record.status,
        items=items,
        customer_name=record.customer_name,
        customer_email=record.customer_email,
    )


class ProjectionOrderSource(OrderSource):
    def all_orders(self) -> list[Order]:
        repo = current_domain.repository_for(PurchasedOrder)
        return [_to_order(r) for r in repo._dao.query.limit(None).all().items]

    def orders_for_customer(self, customer_id: int) -> list[Order]:
        repo = current_domain.repository_for(PurchasedOrder)
        return [_to_order(r) for r in repo._dao.query.filter(customer_id=customer_id).limit(None).all().items]

    def order_by_id(self, order_id: int) -> Order:
        return _to_order(current_domain.repository_for(PurchasedOrder).get(order_id))
