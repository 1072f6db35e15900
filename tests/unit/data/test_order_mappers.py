"""Tests for the stored order document format."""

import json
from datetime import datetime, timedelta, timezone
from uuid import UUID

import pytest

from core.data.mappers import MAX_ORDER_ID, OrderMapper, decode_order, encode_order
from core.domain.entities import LineItem, Order
from core.domain.exceptions import DecodingError, EncodingError


class TestOrderRoundTrip:
    """decode(encode(x)) == x for valid orders."""

    def test_full_order(self, full_order):
        assert decode_order(encode_order(full_order)) == full_order

    def test_empty_line_items_and_no_timestamps(self):
        order = Order(order_id=0, customer_id=UUID(int=7))

        decoded = decode_order(encode_order(order))

        assert decoded == order
        assert decoded.line_items == []
        assert decoded.created_at is None
        assert decoded.shipped_at is None
        assert decoded.completed_at is None

    def test_max_order_id(self, make_order):
        order = make_order(order_id=MAX_ORDER_ID)
        assert decode_order(encode_order(order)).order_id == MAX_ORDER_ID

    def test_line_item_order_is_preserved(self, make_order):
        items = [LineItem(item_id=UUID(int=i), quantity=i, price=10 * i) for i in (3, 1, 2)]
        order = make_order(line_items=items)

        decoded = decode_order(encode_order(order))

        assert [item.item_id for item in decoded.line_items] == [UUID(int=3), UUID(int=1), UUID(int=2)]

    def test_naive_timestamps(self, make_order):
        order = make_order(created_at=datetime(2024, 1, 1, 0, 0, 0, 5))
        assert decode_order(encode_order(order)) == order


class TestOrderDocument:
    """Stored documents are self-describing JSON."""

    def test_field_names_are_preserved(self, make_order):
        document = json.loads(encode_order(make_order()))

        assert set(document) == {
            "order_id", "customer_id", "line_items",
            "created_at", "shipped_at", "completed_at",
        }
        assert document["order_id"] == 1
        assert document["customer_id"] == "6f1c2a8e-3b7d-4e5f-9a0b-1c2d3e4f5a6b"
        assert document["line_items"] == [
            {"item_id": "0a9b8c7d-6e5f-4a3b-2c1d-0e9f8a7b6c5d", "quantity": 2, "price": 500}
        ]
        assert document["created_at"] == "2024-03-01T12:30:00+00:00"
        assert document["shipped_at"] is None

    def test_to_document_matches_encoded_bytes(self, full_order):
        assert json.loads(encode_order(full_order)) == OrderMapper.to_document(full_order)

    def test_decode_accepts_str(self, make_order):
        order = make_order()
        assert decode_order(encode_order(order).decode("utf-8")) == order


class TestEncodingErrors:

    def test_negative_quantity(self, make_order):
        order = make_order(line_items=[LineItem(item_id=UUID(int=1), quantity=-1, price=5)])
        with pytest.raises(EncodingError, match="quantity"):
            encode_order(order)

    def test_negative_price(self, make_order):
        order = make_order(line_items=[LineItem(item_id=UUID(int=1), quantity=1, price=-5)])
        with pytest.raises(EncodingError, match="price"):
            encode_order(order)

    def test_order_id_out_of_range(self, make_order):
        with pytest.raises(EncodingError, match="order_id"):
            encode_order(make_order(order_id=MAX_ORDER_ID + 1))

    def test_customer_id_must_be_uuid(self, make_order):
        with pytest.raises(EncodingError, match="customer_id"):
            encode_order(make_order(customer_id="not-a-uuid"))

    def test_shipped_before_created(self, make_order):
        created = datetime(2024, 3, 1, tzinfo=timezone.utc)
        order = make_order(created_at=created, shipped_at=created - timedelta(days=1))
        with pytest.raises(EncodingError, match="shipped_at"):
            encode_order(order)

    def test_completed_before_shipped_without_created(self, make_order):
        shipped = datetime(2024, 3, 1, tzinfo=timezone.utc)
        order = make_order(
            created_at=None,
            shipped_at=shipped,
            completed_at=shipped - timedelta(seconds=1),
        )
        with pytest.raises(EncodingError, match="completed_at"):
            encode_order(order)

    def test_bool_is_not_a_quantity(self, make_order):
        order = make_order(line_items=[LineItem(item_id=UUID(int=1), quantity=True, price=5)])
        with pytest.raises(EncodingError):
            encode_order(order)


class TestDecodingErrors:

    @pytest.mark.parametrize(
        "data",
        [
            b"not json",
            b"[1, 2, 3]",
            b'{"order_id": 1}',
            b'{"order_id": -1, "customer_id": "6f1c2a8e-3b7d-4e5f-9a0b-1c2d3e4f5a6b", "line_items": []}',
            b'{"order_id": 1, "customer_id": "nope", "line_items": []}',
            b'{"order_id": 1, "customer_id": "6f1c2a8e-3b7d-4e5f-9a0b-1c2d3e4f5a6b", "line_items": {}}',
            b'{"order_id": 1, "customer_id": "6f1c2a8e-3b7d-4e5f-9a0b-1c2d3e4f5a6b", '
            b'"line_items": [], "created_at": "yesterday"}',
            b"\xff\xfe",
        ],
    )
    def test_invalid_documents(self, data):
        with pytest.raises(DecodingError):
            decode_order(data)
