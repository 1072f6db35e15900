"""Data layer - stored document mapping."""

from .mappers import LineItemMapper, OrderMapper, decode_order, encode_order

__all__ = [
    "decode_order",
    "encode_order",
    "LineItemMapper",
    "OrderMapper",
]
