"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from ..entities.order import Order


@dataclass(frozen=True)
class FindAllPage:
    """Page request for `OrderRepository.find_all`.

    `cursor` is the opaque token returned by the previous page,
    or None to start from the beginning.
    """
    size: int = 100
    cursor: Optional[str] = None

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f"Page size must be positive, got: {self.size}")


@dataclass(frozen=True)
class FindResult:
    """One page of orders plus the cursor for the next page.

    A None cursor means the enumeration is complete.
    """
    orders: List[Order] = field(default_factory=list)
    cursor: Optional[str] = None

    @property
    def has_more(self) -> bool:
        return self.cursor is not None


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def insert(self, order: Order) -> None:
        """Store a new order and index its key atomically.

        Args:
            order: Order aggregate to persist

        Raises:
            EncodingError: If the order cannot be serialized
            OrderAlreadyExistsError: If the order ID is already stored
            StoreError: If the backend write fails
        """
        pass

    @abstractmethod
    async def find_by_id(self, order_id: int) -> Order:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            The reconstructed Order

        Raises:
            OrderNotFoundError: If no order is stored under the ID
            DecodingError: If the stored record is unreadable
            StoreError: If the backend read fails
        """
        pass

    @abstractmethod
    async def update(self, order: Order) -> None:
        """Replace an existing order record.

        Args:
            order: Order aggregate holding the new state

        Raises:
            EncodingError: If the order cannot be serialized
            OrderNotFoundError: If the order ID is not stored
            StoreError: If the backend write fails
        """
        pass

    @abstractmethod
    async def delete_by_id(self, order_id: int) -> None:
        """Remove an order record together with its index entry.

        Args:
            order_id: Order identifier

        Raises:
            OrderNotFoundError: If no order is stored under the ID
            StoreError: If the backend delete fails
        """
        pass

    @abstractmethod
    async def find_all(self, page: FindAllPage) -> FindResult:
        """List orders one page at a time.

        Args:
            page: Page size and continuation cursor

        Returns:
            FindResult with the page's orders and the next cursor

        Raises:
            DecodingError: If any record in the page is unreadable
            StoreError: If the index scan or bulk fetch fails
        """
        pass

    @abstractmethod
    async def exists(self, order_id: int) -> bool:
        """Check if order is stored.

        Args:
            order_id: Order identifier

        Returns:
            True if exists, False otherwise
        """
        pass
