"""Application layer - DTOs exchanged with the HTTP layer."""

from .dtos import LineItemDTO, OrderDTO, OrderPageDTO

__all__ = [
    "LineItemDTO",
    "OrderDTO",
    "OrderPageDTO",
]
