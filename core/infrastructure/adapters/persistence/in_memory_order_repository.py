"""
In-memory Order Repository Implementation.

This is an in-memory implementation for testing and demos. Records are
kept in their encoded form so the same codec runs as with Redis.
"""
import asyncio
from typing import Dict, List
import logging

from core.data.mappers import decode_order, encode_order
from core.domain.entities.order import Order
from core.domain.exceptions import (
    DecodingError,
    EncodingError,
    OrderAlreadyExistsError,
    OrderNotFoundError,
)
from core.domain.repositories.order_repository import FindAllPage, FindResult, OrderRepository


logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Stores encoded orders in a dictionary whose insertion order doubles as
    the index. The page cursor is the decimal offset into that order.
    """

    def __init__(self, key_prefix: str = "order:"):
        """Initialize empty storage."""
        self.key_prefix = key_prefix
        self._storage: Dict[str, bytes] = {}
        self._lock = asyncio.Lock()
        logger.info("InMemoryOrderRepository initialized (in-memory storage)")

    def order_key(self, order_id: int) -> str:
        """Storage key for an order ID."""
        return f"{self.key_prefix}{int(order_id)}"

    def _encode(self, order: Order, operation: str) -> bytes:
        try:
            return encode_order(order)
        except EncodingError as e:
            key = f"{self.key_prefix}{getattr(order, 'order_id', '?')}"
            raise EncodingError(str(e), operation=operation, key=key) from e

    async def insert(self, order: Order) -> None:
        data = self._encode(order, "insert")
        key = self.order_key(order.order_id)

        async with self._lock:
            if key in self._storage:
                raise OrderAlreadyExistsError(operation="insert", key=key)
            self._storage[key] = data

        logger.info(f"✅ Order inserted into memory: {key}")

    async def find_by_id(self, order_id: int) -> Order:
        key = self.order_key(order_id)
        data = self._storage.get(key)

        if data is None:
            raise OrderNotFoundError(operation="find_by_id", key=key)

        try:
            return decode_order(data)
        except DecodingError as e:
            raise DecodingError(str(e), operation="find_by_id", key=key) from e

    async def update(self, order: Order) -> None:
        data = self._encode(order, "update")
        key = self.order_key(order.order_id)

        async with self._lock:
            if key not in self._storage:
                raise OrderNotFoundError(operation="update", key=key)
            self._storage[key] = data

        logger.info(f"✅ Order updated in memory: {key}")

    async def delete_by_id(self, order_id: int) -> None:
        key = self.order_key(order_id)

        async with self._lock:
            if key not in self._storage:
                raise OrderNotFoundError(operation="delete_by_id", key=key)
            del self._storage[key]

        logger.info(f"✅ Order deleted from memory: {key}")

    async def find_all(self, page: FindAllPage) -> FindResult:
        offset = 0
        if page.cursor:
            if not page.cursor.isdigit():
                raise ValueError(f"Invalid page cursor: {page.cursor!r}")
            offset = int(page.cursor)

        keys = list(self._storage)
        selected = keys[offset:offset + page.size]
        next_offset = offset + len(selected)
        cursor = str(next_offset) if next_offset < len(keys) else None

        orders: List[Order] = []
        for key in selected:
            try:
                orders.append(decode_order(self._storage[key]))
            except DecodingError as e:
                raise DecodingError(str(e), operation="find_all", key=key) from e

        logger.debug(f"Found {len(orders)} order(s) in memory (next cursor: {cursor})")
        return FindResult(orders=orders, cursor=cursor)

    async def exists(self, order_id: int) -> bool:
        return self.order_key(order_id) in self._storage
