"""Order aggregate ↔ flat storage rows.

Reconstruction is a two-step pure mapping:

1. ORM records are copied into plain frozen rows (:class:`OrderRow`,
   :class:`OrderItemRow`) while the session is still open.
2. Rows are turned back into an :class:`Order` through the validating
   constructors, so a row set that violates an invariant fails exactly as
   application code would.

None of these functions touch a session or the database.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ordering.domain.order import Order, OrderItem

from .models import OrderItemRecord, OrderRecord


@dataclass(frozen=True)
class OrderItemRow:
    id: str
    name: str
    price: Decimal
    quantity: int
    product_id: str
    order_id: str


@dataclass(frozen=True)
class OrderRow:
    id: str
    customer_id: str
    total: Decimal
    items: tuple[OrderItemRow, ...]


# ---------------------------------------------------------------------------
# Aggregate ↔ rows
# ---------------------------------------------------------------------------

def order_to_row(order: Order) -> OrderRow:
    """Flatten *order*, snapshotting its current total."""
    return OrderRow(
        id=order.id,
        customer_id=order.customer_id,
        total=order.total(),
        items=tuple(
            OrderItemRow(
                id=item.id,
                name=item.name,
                price=item.price,
                quantity=item.quantity,
                product_id=item.product_id,
                order_id=order.id,
            )
            for item in order.items
        ),
    )


def order_from_row(row: OrderRow) -> Order:
    """Rebuild an :class:`Order`.  The stored total is not consulted."""
    items = [
        OrderItem(
            id=item.id,
            name=item.name,
            price=item.price,
            product_id=item.product_id,
            quantity=item.quantity,
        )
        for item in row.items
    ]
    return Order(row.id, row.customer_id, items)


# ---------------------------------------------------------------------------
# Rows ↔ ORM records
# ---------------------------------------------------------------------------

def row_to_record(row: OrderRow) -> OrderRecord:
    """Build a transient :class:`OrderRecord` with its item records."""
    return OrderRecord(
        id=row.id,
        customer_id=row.customer_id,
        total=row.total,
        items=[
            OrderItemRecord(
                id=item.id,
                name=item.name,
                price=item.price,
                quantity=item.quantity,
                product_id=item.product_id,
                order_id=item.order_id,
            )
            for item in row.items
        ],
    )


def record_to_row(record: OrderRecord) -> OrderRow:
    """Copy a loaded :class:`OrderRecord` (items included) into plain rows."""
    return OrderRow(
        id=record.id,
        customer_id=record.customer_id,
        total=record.total,
        items=tuple(
            OrderItemRow(
                id=item.id,
                name=item.name,
                price=item.price,
                quantity=item.quantity,
                product_id=item.product_id,
                order_id=item.order_id,
            )
            for item in record.items
        ),
    )
