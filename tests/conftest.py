"""Shared fixtures for the ordering test suite."""

from __future__ import annotations

from decimal import Decimal

import pytest
import pytest_asyncio

from ordering.domain.address import Address
from ordering.domain.customer import Customer
from ordering.domain.order import Order, OrderItem
from ordering.domain.product import Product
from ordering.event_bus.dispatcher import EventDispatcher
from ordering.storage.sql.connection import (
    create_all,
    create_engine,
    create_session_factory,
)
from ordering.storage.sql.repos import (
    CustomerRepository,
    OrderRepository,
    ProductRepository,
)


# ---------------------------------------------------------------------------
# Domain objects
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_address() -> Address:
    return Address("Street 1", 1, "Zipcode 1", "City 1")


@pytest.fixture
def sample_item() -> OrderItem:
    """Two units of Product 1 at 10."""
    return OrderItem("1", "Product 1", Decimal("10"), "123", 2)


@pytest.fixture
def sample_order(sample_item: OrderItem) -> Order:
    return Order("123", "123", [sample_item])


# ---------------------------------------------------------------------------
# Event dispatcher
# ---------------------------------------------------------------------------

@pytest.fixture
def dispatcher() -> EventDispatcher:
    """Return a fresh, empty EventDispatcher."""
    d = EventDispatcher()
    yield d
    d.unregister_all()


# ---------------------------------------------------------------------------
# Storage (in-memory SQLite via aiosqlite)
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def engine():
    eng = create_engine("sqlite+aiosqlite://")
    await create_all(eng)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def order_repository(session_factory) -> OrderRepository:
    return OrderRepository(session_factory)


@pytest.fixture
def customer_repository(session_factory) -> CustomerRepository:
    return CustomerRepository(session_factory)


@pytest.fixture
def product_repository(session_factory) -> ProductRepository:
    return ProductRepository(session_factory)


@pytest_asyncio.fixture
async def seeded_catalogue(customer_repository, product_repository, sample_address):
    """Customer "123" plus products "123" (10) and "234" (20)."""
    customer = Customer("123", "Customer 1")
    customer.change_address(sample_address)
    await customer_repository.create(customer)

    products = [Product("123", "Product 1", 10), Product("234", "Product 2", 20)]
    for product in products:
        await product_repository.create(product)
    return customer, products
