"""
Order repository error kinds.

Every repository failure surfaces as one of these, carrying the
operation name and the storage key it was working on.
"""
from typing import Optional


class OrderRepositoryError(Exception):
    """Base class for all order repository failures."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        key: Optional[str] = None,
    ):
        self.operation = operation
        self.key = key
        prefix = ""
        if operation:
            prefix = f"{operation}"
            if key:
                prefix += f" [{key}]"
            prefix += ": "
        super().__init__(f"{prefix}{message}")


class EncodingError(OrderRepositoryError):
    """Order aggregate could not be serialized."""
    pass


class DecodingError(OrderRepositoryError):
    """Stored bytes could not be reconstructed into an Order."""
    pass


class OrderNotFoundError(OrderRepositoryError):
    """No order is stored under the requested key."""

    def __init__(self, operation: Optional[str] = None, key: Optional[str] = None):
        super().__init__("order does not exist", operation=operation, key=key)


class OrderAlreadyExistsError(OrderRepositoryError):
    """Insert targeted a key that is already stored."""

    def __init__(self, operation: Optional[str] = None, key: Optional[str] = None):
        super().__init__("order already exists", operation=operation, key=key)


class StoreError(OrderRepositoryError):
    """Backend communication or transaction failure."""
    pass
