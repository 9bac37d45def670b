"""Order source port — read-only view of customer orders.

Review eligibility only needs to know which orders a customer has, their
status, and which products they contained; the customer snapshot on a
review comes from the same source.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class OrderStatus:
    PLACED = "placed"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Order:
    order_id: int
    customer_id: int
    status: str
    items: list[dict] = field(default_factory=list)
    customer_name: str | None = None
    customer_email: str | None = None

    @property
    def product_ids(self) -> set[int]:
        return {int(item["product_id"]) for item in self.items if item.get("product_id") is not None}

    def contains(self, product_id: int) -> bool:
        return int(product_id) in self.product_ids

    @property
    def is_delivered(self) -> bool:
        return self.status == OrderStatus.DELIVERED


class OrderSource(ABC):
    """Abstract interface for order lookups."""

    @abstractmethod
    def all_orders(self) -> list[Order]: ...

    def orders_for_customer(self, customer_id: int) -> list[Order]:
        return [order for order in self.all_orders() if order.customer_id == customer_id]

    @abstractmethod
    def order_by_id(self, order_id: int) -> Order:
        """Return the order or raise ObjectNotFoundError."""
        ...
