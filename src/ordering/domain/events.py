"""Domain events raised by the customer and product entities.

Design invariants
-----------------
1.  Every event is **immutable** (``frozen=True``), payload included.
2.  ``name`` is the routing key the dispatcher uses to find handlers.
    It is never used for type inspection.
3.  ``event_id`` is a UUID4 generated at creation time.
4.  Events are consumed synchronously and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Generic, TypeVar

from ordering.core.ids import new_id, utc_now

from .address import Address

P = TypeVar("P")


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DomainEvent(Generic[P]):
    """Immutable base for every domain event.

    Shared fields
    ~~~~~~~~~~~~~
    event_data   Typed payload delivered to handlers unmodified.
    name         Routing key (event type name).
    event_id     Unique identity (UUID4).
    occurred_at  UTC creation time.
    """

    event_data: P
    name: str = ""
    event_id: str = field(default_factory=new_id)
    occurred_at: datetime = field(default_factory=utc_now)


# =========================================================================
# Payloads
# =========================================================================

@dataclass(frozen=True)
class CustomerAddressPayload:
    id: str
    name: str
    address: Address | str


@dataclass(frozen=True)
class CustomerPayload:
    id: str
    name: str


@dataclass(frozen=True)
class ProductPayload:
    id: str
    name: str
    price: Decimal


# =========================================================================
# Customer events
# =========================================================================

@dataclass(frozen=True)
class CustomerChangeAddress(DomainEvent[CustomerAddressPayload]):
    """A customer's address was replaced."""

    name: str = "CustomerChangeAddress"


@dataclass(frozen=True)
class CustomerCreated(DomainEvent[CustomerPayload]):
    """A new customer was registered."""

    name: str = "CustomerCreated"


# =========================================================================
# Product events
# =========================================================================

@dataclass(frozen=True)
class ProductCreated(DomainEvent[ProductPayload]):
    """A new product was added to the catalogue."""

    name: str = "ProductCreated"


ALL_DOMAIN_EVENTS: tuple[type[DomainEvent[Any]], ...] = (
    CustomerChangeAddress,
    CustomerCreated,
    ProductCreated,
)
