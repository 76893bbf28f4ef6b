"""Tests for the pure Order ↔ row mapping (no database involved)."""

from __future__ import annotations

from decimal import Decimal

import pytest

from ordering.core.errors import InvalidAggregateState
from ordering.domain.order import Order, OrderItem
from ordering.storage.sql.mapping import (
    OrderItemRow,
    OrderRow,
    order_from_row,
    order_to_row,
    record_to_row,
    row_to_record,
)


def _two_item_order() -> Order:
    return Order(
        "o1",
        "c1",
        [
            OrderItem("1", "Product 1", Decimal("10"), "p1", 2),
            OrderItem("2", "Product 2", Decimal("20"), "p2", 1),
        ],
    )


class TestOrderToRow:
    def test_flattens_order(self):
        row = order_to_row(_two_item_order())
        assert row.id == "o1"
        assert row.customer_id == "c1"
        assert row.total == Decimal("40")
        assert row.items[0] == OrderItemRow(
            id="1", name="Product 1", price=Decimal("10"), quantity=2,
            product_id="p1", order_id="o1",
        )
        assert {i.order_id for i in row.items} == {"o1"}

    def test_total_is_snapshot(self):
        order = _two_item_order()
        row = order_to_row(order)
        order.add_item(OrderItem("3", "Product 3", Decimal("5"), "p3", 1))
        assert row.total == Decimal("40")
        assert len(row.items) == 2


class TestOrderFromRow:
    def test_round_trip(self):
        order = _two_item_order()
        assert order_from_row(order_to_row(order)) == order

    def test_stored_total_ignored(self):
        row = order_to_row(_two_item_order())
        stale = OrderRow(id=row.id, customer_id=row.customer_id, total=Decimal("1"), items=row.items)
        assert order_from_row(stale).total() == Decimal("40")

    def test_row_without_items_fails_validation(self):
        with pytest.raises(InvalidAggregateState):
            order_from_row(OrderRow(id="o1", customer_id="c1", total=Decimal("0"), items=()))

    def test_invalid_item_row_fails_validation(self):
        bad = OrderItemRow(
            id="1", name="X", price=Decimal("1"), quantity=0, product_id="p", order_id="o1",
        )
        with pytest.raises(InvalidAggregateState):
            order_from_row(OrderRow(id="o1", customer_id="c1", total=Decimal("0"), items=(bad,)))


class TestRecords:
    def test_row_record_round_trip(self):
        row = order_to_row(_two_item_order())
        record = row_to_record(row)

        assert record.id == "o1"
        assert record.total == Decimal("40")
        assert [i.id for i in record.items] == ["1", "2"]
        assert record_to_row(record) == row
