"""Repository pattern for async database operations.

Each repository encapsulates query logic for a single aggregate root and
is constructed with an :class:`async_sessionmaker` obtained from
:func:`ordering.storage.sql.connection.create_session_factory`.  Every
operation runs in its own session; writes run in one transaction.

Error contract:
    * writes raise :class:`PersistenceError` (the SQLAlchemy error is chained);
    * ``find`` raises the entity's not-found error for *any* read failure;
    * ``find_all`` returns ``[]`` on an empty table and raises
      :class:`PersistenceError` when a stored row cannot be rebuilt.
"""

from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ordering.core.errors import (
    CustomerNotFound,
    DomainError,
    OrderNotFound,
    PersistenceError,
    ProductNotFound,
)
from ordering.core.interfaces import EventPublisher
from ordering.domain.address import Address
from ordering.domain.customer import Customer
from ordering.domain.order import Order
from ordering.domain.product import Product

from .connection import session_scope
from .mapping import order_from_row, order_to_row, record_to_row, row_to_record
from .models import CustomerRecord, OrderRecord, ProductRecord

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Conversion helpers
# ---------------------------------------------------------------------------

def _customer_to_record(customer: Customer) -> CustomerRecord:
    """Convert a :class:`Customer` to an ORM :class:`CustomerRecord`."""
    address = customer.address
    return CustomerRecord(
        id=customer.id,
        name=customer.name,
        street=address.street if address else None,
        number=address.number if address else None,
        zipcode=address.zipcode if address else None,
        city=address.city if address else None,
        active=customer.is_active(),
        reward_points=customer.reward_points,
    )


def _record_to_customer(
    record: CustomerRecord, events: EventPublisher | None = None,
) -> Customer:
    """Convert an ORM :class:`CustomerRecord` back to a :class:`Customer`."""
    address = None
    if record.street is not None:
        address = Address(
            street=record.street,
            number=record.number,
            zipcode=record.zipcode,
            city=record.city,
        )
    return Customer(
        record.id,
        record.name,
        address=address,
        active=record.active,
        reward_points=record.reward_points,
        events=events,
    )


def _product_to_record(product: Product) -> ProductRecord:
    return ProductRecord(id=product.id, name=product.name, price=product.price)


def _record_to_product(record: ProductRecord) -> Product:
    return Product(record.id, record.name, record.price)


# ---------------------------------------------------------------------------
# OrderRepository
# ---------------------------------------------------------------------------

class OrderRepository:
    """Persists :class:`Order` aggregates as one order row plus item rows."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create(self, order: Order) -> None:
        """Insert the order row and all item rows atomically.

        The order row stores ``order.total()`` as of this call.

        Raises:
            PersistenceError: If any row is rejected (e.g. unknown customer
                or product id); nothing is persisted in that case.
        """
        row = order_to_row(order)
        try:
            async with session_scope(self._session_factory) as session:
                session.add(row_to_record(row))
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to create order {order.id}") from exc
        logger.debug("Inserted order %s with %d items", order.id, len(row.items))

    async def find(self, order_id: str) -> Order:
        """Load and rebuild the order with the given id.

        Raises:
            OrderNotFound: If no row matches, or if loading or rebuilding
                fails for any other reason.
        """
        try:
            async with self._session_factory() as session:
                record = await session.get(OrderRecord, order_id)
                if record is None:
                    raise OrderNotFound(order_id)
                row = record_to_row(record)
            return order_from_row(row)
        except OrderNotFound:
            raise
        except Exception as exc:
            # Every read-path failure is reported as not-found
            logger.warning("Could not load order %s: %s", order_id, exc)
            raise OrderNotFound(order_id) from exc

    async def find_all(self) -> list[Order]:
        """Load and rebuild every stored order.

        Raises:
            PersistenceError: If the store cannot be read, or if a stored
                order no longer passes aggregate validation.
        """
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(OrderRecord))
                records: Sequence[OrderRecord] = result.scalars().all()
                rows = [record_to_row(r) for r in records]
        except SQLAlchemyError as exc:
            raise PersistenceError("Failed to load orders") from exc
        try:
            return [order_from_row(r) for r in rows]
        except DomainError as exc:
            raise PersistenceError(f"Stored order is invalid: {exc}") from exc

    async def update(self, order: Order) -> None:
        """Reassign the stored order to ``order.customer_id``.

        Only the customer reference is written.  Item rows and the stored
        total keep the values from :meth:`create`, so items added to the
        aggregate afterwards are not persisted by this call.

        Raises:
            PersistenceError: If the write is rejected.
        """
        stmt = (
            update(OrderRecord)
            .where(OrderRecord.id == order.id)
            .values(customer_id=order.customer_id)
        )
        try:
            async with session_scope(self._session_factory) as session:
                result = await session.execute(stmt)
                updated = result.rowcount
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to update order {order.id}") from exc

        if updated == 0:
            logger.warning("Order %s not found for update.", order.id)
            return
        logger.debug(
            "Updated order %s -> customer_id=%s (items/total unchanged)",
            order.id,
            order.customer_id,
        )


# ---------------------------------------------------------------------------
# CustomerRepository
# ---------------------------------------------------------------------------

class CustomerRepository:
    """Repository for :class:`Customer` persistence and retrieval.

    Customers loaded through this repository publish their events through
    *events*, when given.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        events: EventPublisher | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._events = events

    async def create(self, customer: Customer) -> None:
        try:
            async with session_scope(self._session_factory) as session:
                session.add(_customer_to_record(customer))
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to create customer {customer.id}") from exc
        logger.debug("Inserted customer %s", customer.id)

    async def find(self, customer_id: str) -> Customer:
        try:
            async with self._session_factory() as session:
                record = await session.get(CustomerRecord, customer_id)
            if record is None:
                raise CustomerNotFound(customer_id)
            return _record_to_customer(record, self._events)
        except CustomerNotFound:
            raise
        except Exception as exc:
            logger.warning("Could not load customer %s: %s", customer_id, exc)
            raise CustomerNotFound(customer_id) from exc

    async def find_all(self) -> list[Customer]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(CustomerRecord))
                records: Sequence[CustomerRecord] = result.scalars().all()
        except SQLAlchemyError as exc:
            raise PersistenceError("Failed to load customers") from exc
        try:
            return [_record_to_customer(r, self._events) for r in records]
        except DomainError as exc:
            raise PersistenceError(f"Stored customer is invalid: {exc}") from exc

    async def update(self, customer: Customer) -> None:
        """Overwrite every column of the stored customer."""
        record = _customer_to_record(customer)
        stmt = (
            update(CustomerRecord)
            .where(CustomerRecord.id == customer.id)
            .values(
                name=record.name,
                street=record.street,
                number=record.number,
                zipcode=record.zipcode,
                city=record.city,
                active=record.active,
                reward_points=record.reward_points,
            )
        )
        try:
            async with session_scope(self._session_factory) as session:
                result = await session.execute(stmt)
                updated = result.rowcount
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to update customer {customer.id}") from exc
        if updated == 0:
            logger.warning("Customer %s not found for update.", customer.id)


# ---------------------------------------------------------------------------
# ProductRepository
# ---------------------------------------------------------------------------

class ProductRepository:
    """Repository for :class:`Product` persistence and retrieval."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create(self, product: Product) -> None:
        try:
            async with session_scope(self._session_factory) as session:
                session.add(_product_to_record(product))
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to create product {product.id}") from exc
        logger.debug("Inserted product %s", product.id)

    async def find(self, product_id: str) -> Product:
        try:
            async with self._session_factory() as session:
                record = await session.get(ProductRecord, product_id)
            if record is None:
                raise ProductNotFound(product_id)
            return _record_to_product(record)
        except ProductNotFound:
            raise
        except Exception as exc:
            logger.warning("Could not load product %s: %s", product_id, exc)
            raise ProductNotFound(product_id) from exc

    async def find_all(self) -> list[Product]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(ProductRecord))
                records: Sequence[ProductRecord] = result.scalars().all()
        except SQLAlchemyError as exc:
            raise PersistenceError("Failed to load products") from exc
        try:
            return [_record_to_product(r) for r in records]
        except DomainError as exc:
            raise PersistenceError(f"Stored product is invalid: {exc}") from exc

    async def update(self, product: Product) -> None:
        stmt = (
            update(ProductRecord)
            .where(ProductRecord.id == product.id)
            .values(name=product.name, price=product.price)
        )
        try:
            async with session_scope(self._session_factory) as session:
                result = await session.execute(stmt)
                updated = result.rowcount
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to update product {product.id}") from exc
        if updated == 0:
            logger.warning("Product %s not found for update.", product.id)
