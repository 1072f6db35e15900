from __future__ import annotations

from typing import Literal

from pydantic import Field

from core.settings.base_settings import OrdersBaseSettings


class RedisSettings(OrdersBaseSettings):
    """
    Order store settings.
    Loaded from .env with exact variable name matching.
    """

    store: Literal["redis", "memory"] = Field("redis", alias="ORDERS_STORE")
    url: str = Field("redis://localhost:6379/0", alias="REDIS_URL")
    key_prefix: str = Field("order:", alias="ORDERS_KEY_PREFIX")
    index_key: str = Field("orders", alias="ORDERS_INDEX_KEY")
    socket_timeout: float = Field(5.0, gt=0, alias="REDIS_SOCKET_TIMEOUT")
