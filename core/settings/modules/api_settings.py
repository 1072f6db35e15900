from __future__ import annotations

from pydantic import Field

from core.settings.base_settings import OrdersBaseSettings


class ApiSettings(OrdersBaseSettings):
    """
    HTTP listener settings.
    Loaded from .env with exact variable name matching.
    """

    host: str = Field("0.0.0.0", alias="API_HOST")
    port: int = Field(8000, ge=1, le=65535, alias="API_PORT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    default_page_size: int = Field(100, ge=1, alias="ORDERS_DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(1000, ge=1, alias="ORDERS_MAX_PAGE_SIZE")
