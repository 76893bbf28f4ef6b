"""Price parsing shared by order items and products.

Prices are non-negative finite decimals with at most two fractional
digits, the scale of the ``Numeric(18, 2)`` price columns.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ordering.core.errors import InvalidAggregateState

PRICE_PLACES = 2


def parse_price(value: Decimal | int | float | str, owner: str) -> Decimal:
    """Coerce *value* to a ``Decimal`` price or raise ``InvalidAggregateState``.

    *owner* prefixes the error message, e.g. ``"Item 1"``.
    """
    if isinstance(value, Decimal):
        price = value
    else:
        try:
            price = Decimal(str(value))
        except InvalidOperation as exc:
            raise InvalidAggregateState(f"{owner}: price is not a number: {value!r}") from exc
    if not price.is_finite():
        raise InvalidAggregateState(f"{owner}: price must be a finite number")
    if price < 0:
        raise InvalidAggregateState(f"{owner}: price must be greater than or equal to 0")
    if price != 0 and price.normalize().as_tuple().exponent < -PRICE_PLACES:
        raise InvalidAggregateState(
            f"{owner}: price allows at most {PRICE_PLACES} decimal places, got {price}"
        )
    return price
