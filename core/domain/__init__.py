"""Domain layer - pure domain models and interfaces."""

from .entities import LineItem, Order
from .exceptions import (
    DecodingError,
    EncodingError,
    OrderAlreadyExistsError,
    OrderNotFoundError,
    OrderRepositoryError,
    StoreError,
)
from .repositories import FindAllPage, FindResult, OrderRepository

__all__ = [
    "DecodingError",
    "EncodingError",
    "FindAllPage",
    "FindResult",
    "LineItem",
    "Order",
    "OrderAlreadyExistsError",
    "OrderNotFoundError",
    "OrderRepository",
    "OrderRepositoryError",
    "StoreError",
]
