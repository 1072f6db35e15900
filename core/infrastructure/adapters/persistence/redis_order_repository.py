"""
Redis Order Repository Implementation.

Implements OrderRepository on top of redis.asyncio.

Storage layout:
- order:<order_id>   JSON document of the full Order aggregate
- orders             set of every stored order key (the index)

Record and index mutations are sent in a single MULTI/EXEC so a record
never exists without its index entry and vice versa.
"""
import logging
from typing import List, Optional

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from core.data.mappers import decode_order, encode_order
from core.domain.entities.order import Order
from core.domain.exceptions import (
    DecodingError,
    EncodingError,
    OrderAlreadyExistsError,
    OrderNotFoundError,
    StoreError,
)
from core.domain.repositories.order_repository import FindAllPage, FindResult, OrderRepository
from core.infrastructure.adapters.persistence.order_index import OrderIndex, RedisSetIndex


logger = logging.getLogger(__name__)


def create_redis_client(
    redis_url: str = "redis://localhost:6379/0",
    socket_timeout: Optional[float] = None,
) -> aioredis.Redis:
    """
    Build the shared async Redis client (connection pool).

    Args:
        redis_url: Redis connection URL
        socket_timeout: Per-command timeout in seconds

    Returns:
        Redis client returning raw bytes; connections are opened lazily
    """
    return aioredis.from_url(
        redis_url,
        socket_timeout=socket_timeout,
    )


class RedisOrderRepository(OrderRepository):
    """
    Redis implementation of OrderRepository.

    The client is injected so callers decide on pooling and tests can
    hand in an in-process fake. No retries happen here: store failures
    surface immediately as StoreError.
    """

    def __init__(
        self,
        client: aioredis.Redis,
        index: Optional[OrderIndex] = None,
        key_prefix: str = "order:",
    ):
        """
        Initialize repository.

        Args:
            client: Shared async Redis client
            index: Order key index (defaults to the "orders" Redis set)
            key_prefix: Prefix joined with the decimal order ID to form the key
        """
        self.client = client
        self.index = index if index is not None else RedisSetIndex(client)
        self.key_prefix = key_prefix

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

        try:
            async with self.client.pipeline(transaction=True) as pipe:
                pipe.set(key, data, nx=True)
                # No-op when the key exists: an existing record is already indexed.
                self.index.stage_add(pipe, key)
                created, _ = await pipe.execute()
        except RedisError as e:
            raise StoreError(f"failed to insert order: {e}", operation="insert", key=key) from e

        if not created:
            raise OrderAlreadyExistsError(operation="insert", key=key)

        logger.info(f"✅ Order inserted: {key} ({len(order.line_items)} line item(s))")

    async def find_by_id(self, order_id: int) -> Order:
        key = self.order_key(order_id)

        try:
            value = await self.client.get(key)
        except UnicodeDecodeError as e:
            # client built with decode_responses=True rejected the stored bytes
            raise DecodingError(f"failed to decode order: {e}", operation="find_by_id", key=key) from e
        except RedisError as e:
            raise StoreError(f"failed to find order: {e}", operation="find_by_id", key=key) from e

        if value is None:
            raise OrderNotFoundError(operation="find_by_id", key=key)

        try:
            return decode_order(value)
        except DecodingError as e:
            raise DecodingError(str(e), operation="find_by_id", key=key) from e

    async def update(self, order: Order) -> None:
        data = self._encode(order, "update")
        key = self.order_key(order.order_id)

        try:
            updated = await self.client.set(key, data, xx=True)
        except RedisError as e:
            raise StoreError(f"failed to update order: {e}", operation="update", key=key) from e

        if not updated:
            raise OrderNotFoundError(operation="update", key=key)

        logger.info(f"✅ Order updated: {key}")

    async def delete_by_id(self, order_id: int) -> None:
        key = self.order_key(order_id)

        try:
            async with self.client.pipeline(transaction=True) as pipe:
                pipe.delete(key)
                self.index.stage_remove(pipe, key)
                deleted, _ = await pipe.execute()
        except RedisError as e:
            raise StoreError(f"failed to delete order: {e}", operation="delete_by_id", key=key) from e

        if not deleted:
            raise OrderNotFoundError(operation="delete_by_id", key=key)

        logger.info(f"✅ Order deleted: {key}")

    async def find_all(self, page: FindAllPage) -> FindResult:
        try:
            keys, cursor = await self.index.scan(page.cursor, page.size)
        except RedisError as e:
            raise StoreError(f"failed to scan orders: {e}", operation="find_all") from e

        if not keys:
            return FindResult(orders=[], cursor=cursor)

        try:
            values = await self.client.mget(keys)
        except UnicodeDecodeError as e:
            raise DecodingError(f"failed to decode orders: {e}", operation="find_all") from e
        except RedisError as e:
            raise StoreError(f"failed to fetch orders: {e}", operation="find_all") from e

        orders: List[Order] = []
        for key, value in zip(keys, values):
            if value is None:
                logger.warning(f"⚠️ Indexed order has no record, skipping: {key}")
                continue
            try:
                orders.append(decode_order(value))
            except DecodingError as e:
                raise DecodingError(str(e), operation="find_all", key=key) from e

        logger.debug(f"Found {len(orders)} order(s) (next cursor: {cursor})")
        return FindResult(orders=orders, cursor=cursor)

    async def exists(self, order_id: int) -> bool:
        key = self.order_key(order_id)
        try:
            return bool(await self.client.exists(key))
        except RedisError as e:
            raise StoreError(f"failed to check order: {e}", operation="exists", key=key) from e
