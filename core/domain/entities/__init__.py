"""Domain entities."""

from .order import LineItem, Order

__all__ = ["LineItem", "Order"]
