"""
FastAPI Dependencies.

Provides dependency injection for the order repository and its store.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import redis.asyncio as aioredis
from dotenv import load_dotenv

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from core.domain.repositories import OrderRepository
from core.infrastructure.adapters.persistence import (
    InMemoryOrderRepository,
    RedisOrderRepository,
    RedisSetIndex,
    create_redis_client,
)
from core.settings import get_app_settings

logger = logging.getLogger(__name__)


# =============================================================================
# SINGLETON INSTANCES
# =============================================================================

_redis_client: Optional[aioredis.Redis] = None
_order_repository: Optional[OrderRepository] = None


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_redis_client() -> Optional[aioredis.Redis]:
    """Shared Redis client, or None when orders are kept in memory."""
    global _redis_client
    settings = get_app_settings().redis

    if settings.store != "redis":
        return None

    if _redis_client is None:
        _redis_client = create_redis_client(
            settings.url, socket_timeout=settings.socket_timeout
        )
        logger.info(f"Created Redis client for {settings.url}")
    return _redis_client


def get_order_repository() -> OrderRepository:
    global _order_repository
    if _order_repository is None:
        settings = get_app_settings().redis

        if settings.store == "memory":
            _order_repository = InMemoryOrderRepository(key_prefix=settings.key_prefix)
            logger.info("Created InMemoryOrderRepository instance")
        else:
            client = get_redis_client()
            _order_repository = RedisOrderRepository(
                client,
                index=RedisSetIndex(client, index_key=settings.index_key),
                key_prefix=settings.key_prefix,
            )
            logger.info(
                f"Created RedisOrderRepository instance "
                f"(prefix={settings.key_prefix!r}, index={settings.index_key!r})"
            )
    return _order_repository


# =============================================================================
# SHUTDOWN / RESET
# =============================================================================

async def close_dependencies() -> None:
    """Release the Redis connection pool."""
    global _redis_client
    if _redis_client is not None:
        await _redis_client.aclose()
        _redis_client = None
        logger.info("✅ Disconnected from Redis")


def reset_dependencies() -> None:
    global _redis_client, _order_repository

    _redis_client = None
    _order_repository = None

    logger.info("Dependencies reset")
