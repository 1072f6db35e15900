"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- redis
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID


@dataclass
class LineItem:
    """Individual line item within an order.

    `price` is the unit price in minor currency units (e.g. cents),
    not the line total.
    """
    item_id: UUID
    quantity: int
    price: int


@dataclass
class Order:
    """
    Order aggregate root.

    The aggregate is always stored and retrieved as one unit together
    with its line items. `order_id` is assigned by the caller and doubles
    as the storage identity.

    Lifecycle timestamps are None until the order reaches that stage.
    """
    order_id: int
    customer_id: UUID
    line_items: List[LineItem] = field(default_factory=list)
    created_at: Optional[datetime] = None
    shipped_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
