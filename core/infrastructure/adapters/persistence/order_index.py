"""
Order index implementations.

The index holds every stored order key so the repository can enumerate
orders. Mutations are staged onto the caller's transactional pipeline so
they commit in the same MULTI/EXEC as the record write.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

import redis.asyncio as aioredis


def _to_str(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8")
    return str(value)


def parse_scan_cursor(cursor: Optional[str]) -> int:
    """Turn an opaque page cursor back into a Redis scan position.

    Raises:
        ValueError: If the cursor was not produced by `scan`
    """
    if cursor is None or cursor == "":
        return 0
    if not cursor.isdigit():
        raise ValueError(f"Invalid page cursor: {cursor!r}")
    position = int(cursor)
    if position == 0:
        raise ValueError("Invalid page cursor: '0'")
    return position


class OrderIndex(ABC):
    """Set of all stored order keys, scannable in pages."""

    @abstractmethod
    def stage_add(self, pipeline: Any, key: str) -> None:
        """Queue adding `key` onto an open transactional pipeline."""
        pass

    @abstractmethod
    def stage_remove(self, pipeline: Any, key: str) -> None:
        """Queue removing `key` onto an open transactional pipeline."""
        pass

    @abstractmethod
    async def scan(self, cursor: Optional[str], count: int) -> Tuple[List[str], Optional[str]]:
        """Return one page of keys and the cursor for the next page.

        Args:
            cursor: Cursor from the previous page, or None to start
            count: Desired page size (may be treated as a hint)

        Returns:
            (keys, next_cursor); next_cursor is None when the scan is complete
        """
        pass

    @abstractmethod
    async def size(self) -> int:
        """Number of indexed keys."""
        pass


class RedisSetIndex(OrderIndex):
    """
    OrderIndex backed by a Redis set.

    SADD/SREM are staged on the pipeline; SSCAN drives pagination. SSCAN's
    COUNT is a hint, so a page may hold more or fewer keys than requested,
    and a key may reappear on a later page if the set is rehashed mid-scan.
    """

    def __init__(self, client: aioredis.Redis, index_key: str = "orders"):
        """
        Initialize index.

        Args:
            client: Shared async Redis client
            index_key: Name of the Redis set holding the order keys
        """
        self.client = client
        self.index_key = index_key

    def stage_add(self, pipeline: Any, key: str) -> None:
        pipeline.sadd(self.index_key, key)

    def stage_remove(self, pipeline: Any, key: str) -> None:
        pipeline.srem(self.index_key, key)

    async def scan(self, cursor: Optional[str], count: int) -> Tuple[List[str], Optional[str]]:
        position = parse_scan_cursor(cursor)
        next_position, raw_keys = await self.client.sscan(
            self.index_key, cursor=position, count=count
        )

        keys: List[str] = []
        seen = set()
        for raw in raw_keys:
            key = _to_str(raw)
            if key not in seen:
                seen.add(key)
                keys.append(key)

        next_position = int(next_position)
        return keys, (str(next_position) if next_position != 0 else None)

    async def size(self) -> int:
        return int(await self.client.scard(self.index_key))
