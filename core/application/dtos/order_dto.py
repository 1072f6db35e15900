"""Application DTOs for Order operations."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from core.data.mappers import MAX_ORDER_ID
from core.domain.entities.order import LineItem, Order


class LineItemDTO(BaseModel):
    """DTO for order line item."""

    item_id: UUID = Field(..., description="Purchased item/SKU identifier")
    quantity: int = Field(..., ge=0, description="Quantity ordered")
    price: int = Field(..., ge=0, description="Unit price in minor currency units")

    model_config = {"frozen": True}

    @classmethod
    def from_domain(cls, item: LineItem) -> "LineItemDTO":
        return cls(item_id=item.item_id, quantity=item.quantity, price=item.price)

    def to_domain(self) -> LineItem:
        return LineItem(item_id=self.item_id, quantity=self.quantity, price=self.price)


class OrderDTO(BaseModel):
    """Request and response DTO for a full order aggregate."""

    order_id: int = Field(..., ge=0, le=MAX_ORDER_ID, description="Caller-assigned order ID")
    customer_id: UUID = Field(..., description="Purchasing customer ID")
    line_items: List[LineItemDTO] = Field(default_factory=list, description="Line items in entry order")
    created_at: Optional[datetime] = Field(None, description="Creation time")
    shipped_at: Optional[datetime] = Field(None, description="Shipping time")
    completed_at: Optional[datetime] = Field(None, description="Completion time")

    model_config = {"frozen": True}

    @classmethod
    def from_domain(cls, order: Order) -> "OrderDTO":
        """Build the DTO from a domain aggregate.

        Args:
            order: Order aggregate

        Returns:
            OrderDTO with the same field values
        """
        return cls(
            order_id=order.order_id,
            customer_id=order.customer_id,
            line_items=[LineItemDTO.from_domain(item) for item in order.line_items],
            created_at=order.created_at,
            shipped_at=order.shipped_at,
            completed_at=order.completed_at,
        )

    def to_domain(self) -> Order:
        """Build the domain aggregate from this DTO."""
        return Order(
            order_id=self.order_id,
            customer_id=self.customer_id,
            line_items=[item.to_domain() for item in self.line_items],
            created_at=self.created_at,
            shipped_at=self.shipped_at,
            completed_at=self.completed_at,
        )


class OrderPageDTO(BaseModel):
    """DTO for one page of listed orders."""

    orders: List[OrderDTO] = Field(default_factory=list, description="Orders in this page")
    cursor: Optional[str] = Field(None, description="Cursor for the next page; null when done")

    model_config = {"frozen": True}
