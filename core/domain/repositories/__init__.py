"""Domain repository interfaces."""

from .order_repository import FindAllPage, FindResult, OrderRepository

__all__ = ["FindAllPage", "FindResult", "OrderRepository"]
