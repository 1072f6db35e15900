"""Static mappers for domain entities ↔ stored JSON documents."""

import json
from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from core.domain.entities.order import LineItem, Order
from core.domain.exceptions import DecodingError, EncodingError

MAX_ORDER_ID = 2**64 - 1

# Order in which lifecycle timestamps must be reached.
_LIFECYCLE_FIELDS = ("created_at", "shipped_at", "completed_at")


def _check_non_negative_int(name: str, value: Any, upper: Optional[int] = None) -> int:
    # bool is an int subclass but never a valid count or identifier
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got: {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got: {value}")
    if upper is not None and value > upper:
        raise ValueError(f"{name} exceeds {upper}: {value}")
    return value


def _check_lifecycle(order: Order) -> None:
    previous = None
    for name in _LIFECYCLE_FIELDS:
        current = getattr(order, name)
        if current is None:
            continue
        if previous is not None and current < previous[1]:
            raise ValueError(f"{name} precedes {previous[0]}")
        previous = (name, current)


def _format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"timestamp must be a string, got: {value!r}")
    return datetime.fromisoformat(value)


class LineItemMapper:
    """Static mapper for LineItem ↔ JSON document transformation."""

    @staticmethod
    def to_document(entity: LineItem) -> Dict[str, Any]:
        """Convert domain value object to a JSON-ready dict.

        Args:
            entity: LineItem value object

        Returns:
            Dict with field names preserved
        """
        if not isinstance(entity.item_id, UUID):
            raise ValueError(f"item_id must be a UUID, got: {entity.item_id!r}")
        return {
            "item_id": str(entity.item_id),
            "quantity": _check_non_negative_int("quantity", entity.quantity),
            "price": _check_non_negative_int("price", entity.price),
        }

    @staticmethod
    def to_domain(document: Dict[str, Any]) -> LineItem:
        """Convert stored dict back into a LineItem.

        Args:
            document: Dict produced by `to_document`

        Returns:
            LineItem value object
        """
        return LineItem(
            item_id=UUID(document["item_id"]),
            quantity=_check_non_negative_int("quantity", document["quantity"]),
            price=_check_non_negative_int("price", document["price"]),
        )


class OrderMapper:
    """Static mapper for Order ↔ JSON document transformation with nested items."""

    @staticmethod
    def to_document(entity: Order) -> Dict[str, Any]:
        """Convert domain aggregate to a JSON-ready dict (with nested items).

        Args:
            entity: Order aggregate

        Returns:
            Dict with field names preserved and line items in entry order
        """
        if not isinstance(entity.customer_id, UUID):
            raise ValueError(
                f"customer_id must be a UUID, got: {entity.customer_id!r}"
            )
        _check_lifecycle(entity)

        return {
            "order_id": _check_non_negative_int("order_id", entity.order_id, MAX_ORDER_ID),
            "customer_id": str(entity.customer_id),
            "line_items": [LineItemMapper.to_document(item) for item in entity.line_items],
            "created_at": _format_timestamp(entity.created_at),
            "shipped_at": _format_timestamp(entity.shipped_at),
            "completed_at": _format_timestamp(entity.completed_at),
        }

    @staticmethod
    def to_domain(document: Dict[str, Any]) -> Order:
        """Convert stored dict back into the Order aggregate.

        Args:
            document: Dict produced by `to_document`

        Returns:
            Order aggregate
        """
        line_items = document["line_items"]
        if not isinstance(line_items, list):
            raise ValueError(f"line_items must be a list, got: {line_items!r}")

        order = Order(
            order_id=_check_non_negative_int("order_id", document["order_id"], MAX_ORDER_ID),
            customer_id=UUID(document["customer_id"]),
            line_items=[LineItemMapper.to_domain(item) for item in line_items],
            created_at=_parse_timestamp(document.get("created_at")),
            shipped_at=_parse_timestamp(document.get("shipped_at")),
            completed_at=_parse_timestamp(document.get("completed_at")),
        )
        _check_lifecycle(order)
        return order


def encode_order(order: Order) -> bytes:
    """Serialize an Order aggregate to its stored byte form.

    Raises:
        EncodingError: If the aggregate holds values that cannot be stored
    """
    try:
        document = OrderMapper.to_document(order)
        return json.dumps(document, separators=(",", ":")).encode("utf-8")
    except (AttributeError, TypeError, ValueError) as e:
        raise EncodingError(
            f"failed to encode order: {e}"
        ) from e


def decode_order(data: Any) -> Order:
    """Reconstruct an Order aggregate from its stored byte form.

    Raises:
        DecodingError: If the bytes are not a valid stored order
    """
    try:
        if isinstance(data, (bytes, bytearray)):
            data = data.decode("utf-8")
        document = json.loads(data)
        if not isinstance(document, dict):
            raise ValueError(f"expected a JSON object, got: {type(document).__name__}")
        return OrderMapper.to_domain(document)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        # UnicodeDecodeError and JSONDecodeError are ValueErrors
        raise DecodingError(
            f"failed to decode order: {e}"
        ) from e
