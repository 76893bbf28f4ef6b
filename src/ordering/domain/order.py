"""Order aggregate: ``Order`` root and its ``OrderItem`` lines.

The aggregate is the consistency boundary for its items.  Items are
immutable; the only permitted mutation is appending a whole item through
:meth:`Order.add_item`.  The order total is derived on every call and
never stored on the object.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from ordering.core.errors import InvalidAggregateState

from .money import parse_price


@dataclass(frozen=True)
class OrderItem:
    """A single line in an order."""

    id: str
    name: str
    price: Decimal
    product_id: str
    quantity: int

    def __post_init__(self) -> None:
        if not self.id:
            raise InvalidAggregateState("Item id is required")
        if not self.product_id:
            raise InvalidAggregateState(f"Item {self.id}: product id is required")
        # bool is an int subclass
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidAggregateState(
                f"Item {self.id}: quantity must be an integer, got {self.quantity!r}"
            )
        if self.quantity <= 0:
            raise InvalidAggregateState(
                f"Item {self.id}: quantity must be greater than 0"
            )
        object.__setattr__(self, "price", parse_price(self.price, f"Item {self.id}"))

    def total(self) -> Decimal:
        """Line total: ``price * quantity``."""
        return self.price * self.quantity


class Order:
    """Aggregate root owning a non-empty collection of :class:`OrderItem`.

    The customer is referenced by id only and resolved elsewhere.
    """

    def __init__(self, id: str, customer_id: str, items: Iterable[OrderItem]) -> None:
        self._id = id
        self._customer_id = customer_id
        self._items: list[OrderItem] = list(items)
        self._validate()

    def _validate(self) -> None:
        if not self._id:
            raise InvalidAggregateState("Order id is required")
        if not self._customer_id:
            raise InvalidAggregateState(f"Order {self._id}: customer id is required")
        if not self._items:
            raise InvalidAggregateState(f"Order {self._id}: items are required")
        for item in self._items:
            if not isinstance(item, OrderItem):
                raise InvalidAggregateState(
                    f"Order {self._id}: expected OrderItem, got {type(item).__name__}"
                )
        seen: set[str] = set()
        for item in self._items:
            if item.id in seen:
                raise InvalidAggregateState(
                    f"Order {self._id}: duplicate item id {item.id!r}"
                )
            seen.add(item.id)

    @property
    def id(self) -> str:
        return self._id

    @property
    def customer_id(self) -> str:
        return self._customer_id

    @property
    def items(self) -> tuple[OrderItem, ...]:
        """Read-only snapshot of the items, in insertion order."""
        return tuple(self._items)

    def add_item(self, item: OrderItem) -> None:
        """Append a whole item to the order."""
        if not isinstance(item, OrderItem):
            raise InvalidAggregateState(
                f"Order {self._id}: expected OrderItem, got {type(item).__name__}"
            )
        if any(existing.id == item.id for existing in self._items):
            raise InvalidAggregateState(
                f"Order {self._id}: duplicate item id {item.id!r}"
            )
        self._items.append(item)

    def total(self) -> Decimal:
        """Sum of every item's line total."""
        return sum((item.total() for item in self._items), Decimal("0"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return (
            self._id == other._id
            and self._customer_id == other._customer_id
            and sorted(self._items, key=_item_key) == sorted(other._items, key=_item_key)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"<Order(id={self._id!r}, customer_id={self._customer_id!r}, "
            f"items={len(self._items)}, total={self.total()})>"
        )


def _item_key(item: OrderItem) -> str:
    return item.id
