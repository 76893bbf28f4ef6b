"""Product entity."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from ordering.core.errors import InvalidAggregateState

from .events import ProductCreated, ProductPayload
from .money import parse_price

if TYPE_CHECKING:
    from ordering.core.interfaces import EventPublisher


class Product:
    def __init__(self, id: str, name: str, price: Decimal | int | str) -> None:
        self._id = id
        self._name = name
        self._validate_identity()
        self._price = parse_price(price, f"Product {id}")

    @classmethod
    def create(
        cls,
        id: str,
        name: str,
        price: Decimal | int | str,
        *,
        events: EventPublisher | None = None,
    ) -> Product:
        """Build a product and publish ``ProductCreated``."""
        product = cls(id, name, price)
        if events is not None:
            events.notify(
                ProductCreated(
                    event_data=ProductPayload(id=id, name=name, price=product.price),
                )
            )
        return product

    def _validate_identity(self) -> None:
        if not self._id:
            raise InvalidAggregateState("Product id is required")
        if not self._name:
            raise InvalidAggregateState(f"Product {self._id}: name is required")

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> Decimal:
        return self._price

    def change_name(self, name: str) -> None:
        if not name:
            raise InvalidAggregateState(f"Product {self._id}: name is required")
        self._name = name

    def change_price(self, price: Decimal | int | str) -> None:
        self._price = parse_price(price, f"Product {self._id}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return (self._id, self._name, self._price) == (other._id, other._name, other._price)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<Product(id={self._id!r}, name={self._name!r}, price={self._price})>"
