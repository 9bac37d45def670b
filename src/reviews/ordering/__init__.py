"""Order source registry.

Uses the projection-backed source by default; another source (e.g. an
HTTP client for the Ordering service) can be installed with
`set_order_source`.
"""

from reviews.ordering.port import Order, OrderSource, OrderStatus

_source: OrderSource | None = None


def get_order_source() -> OrderSource:
    global _source
    if _source is None:
        from reviews.ordering.projection_source import ProjectionOrderSource

        _source = ProjectionOrderSource()
    return _source


def set_order_source(source: OrderSource) -> None:
    global _source
    _source = source


def reset_order_source() -> None:
    """Fall back to the default source (useful for testing)."""
    global _source
    _source = None


__all__ = ["Order", "OrderSource", "OrderStatus", "get_order_source", "reset_order_source", "set_order_source"]
