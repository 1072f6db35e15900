"""Persistence adapters for the Order aggregate."""

from .in_memory_order_repository import InMemoryOrderRepository
from .order_index import OrderIndex, RedisSetIndex
from .redis_order_repository import RedisOrderRepository, create_redis_client

__all__ = [
    "create_redis_client",
    "InMemoryOrderRepository",
    "OrderIndex",
    "RedisOrderRepository",
    "RedisSetIndex",
]
