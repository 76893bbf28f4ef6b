"""Protocol interfaces for the ordering domain.

All module boundaries are defined here as Protocol classes.
Implementations can be swapped (SQL store, in-memory fakes) without
changing callers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ordering.domain.customer import Customer
    from ordering.domain.events import DomainEvent
    from ordering.domain.order import Order
    from ordering.domain.product import Product

E = TypeVar("E", contravariant=True)


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

@runtime_checkable
class EventHandler(Protocol[E]):
    """Reacts to one event type.  One-way: returns nothing to the publisher."""

    def handle(self, event: E) -> None: ...


@runtime_checkable
class EventPublisher(Protocol):
    """Anything that can deliver a domain event to its subscribers."""

    def notify(self, event: DomainEvent[Any]) -> None: ...


@runtime_checkable
class IEventDispatcher(EventPublisher, Protocol):
    """Registry of handlers keyed by event name."""

    def register(self, event_name: str, handler: EventHandler[Any]) -> None: ...

    def unregister(self, event_name: str, handler: EventHandler[Any]) -> None: ...

    def unregister_all(self) -> None: ...


# ---------------------------------------------------------------------------
# Repositories
# ---------------------------------------------------------------------------

@runtime_checkable
class IOrderRepository(Protocol):
    """Persists and reconstructs :class:`Order` aggregates."""

    async def create(self, order: Order) -> None: ...

    async def find(self, order_id: str) -> Order: ...

    async def find_all(self) -> list[Order]: ...

    async def update(self, order: Order) -> None: ...


@runtime_checkable
class ICustomerRepository(Protocol):
    async def create(self, customer: Customer) -> None: ...

    async def find(self, customer_id: str) -> Customer: ...

    async def find_all(self) -> list[Customer]: ...

    async def update(self, customer: Customer) -> None: ...


@runtime_checkable
class IProductRepository(Protocol):
    async def create(self, product: Product) -> None: ...

    async def find(self, product_id: str) -> Product: ...

    async def find_all(self) -> list[Product]: ...

    async def update(self, product: Product) -> None: ...
