"""Shared fixtures: sample orders and repositories over in-process stores."""

from datetime import datetime, timezone
from typing import Callable
from uuid import UUID, uuid4

import fakeredis
import pytest
import pytest_asyncio

from core.domain.entities import LineItem, Order
from core.infrastructure.adapters.persistence import (
    InMemoryOrderRepository,
    RedisOrderRepository,
    RedisSetIndex,
)

CUSTOMER_ID = UUID("6f1c2a8e-3b7d-4e5f-9a0b-1c2d3e4f5a6b")
ITEM_ID = UUID("0a9b8c7d-6e5f-4a3b-2c1d-0e9f8a7b6c5d")


@pytest.fixture
def make_order() -> Callable[..., Order]:
    """Factory for orders with one line item and a creation time."""

    def _make(order_id: int = 1, **overrides) -> Order:
        fields = {
            "order_id": order_id,
            "customer_id": CUSTOMER_ID,
            "line_items": [LineItem(item_id=ITEM_ID, quantity=2, price=500)],
            "created_at": datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc),
        }
        fields.update(overrides)
        return Order(**fields)

    return _make


@pytest.fixture
def full_order() -> Order:
    """Order that has reached every lifecycle stage."""
    return Order(
        order_id=42,
        customer_id=uuid4(),
        line_items=[
            LineItem(item_id=uuid4(), quantity=1, price=1999),
            LineItem(item_id=uuid4(), quantity=3, price=250),
            LineItem(item_id=uuid4(), quantity=0, price=0),
        ],
        created_at=datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc),
        shipped_at=datetime(2024, 3, 2, 15, 45, 10, 123456, tzinfo=timezone.utc),
        completed_at=datetime(2024, 3, 5, 8, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def redis_server() -> fakeredis.FakeServer:
    return fakeredis.FakeServer()


@pytest_asyncio.fixture
async def redis_client(redis_server):
    """In-process async Redis client."""
    client = fakeredis.FakeAsyncRedis(server=redis_server, decode_responses=True)
    yield client
    await client.flushall()
    await client.aclose()


@pytest.fixture
def redis_repository(redis_client) -> RedisOrderRepository:
    return RedisOrderRepository(
        redis_client,
        index=RedisSetIndex(redis_client, index_key="orders"),
        key_prefix="order:",
    )


@pytest.fixture
def memory_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()
