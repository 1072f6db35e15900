"""Application DTOs."""

from .order_dto import LineItemDTO, OrderDTO, OrderPageDTO

__all__ = [
    "LineItemDTO",
    "OrderDTO",
    "OrderPageDTO",
]
