"""Integration test: bootstrap wires a working context end to end."""

from __future__ import annotations

from decimal import Decimal

import pytest

from ordering.core.config import Settings
from ordering.core.errors import ConfigError
from ordering.domain.address import Address
from ordering.domain.customer import Customer
from ordering.domain.order import Order, OrderItem
from ordering.domain.product import Product
from ordering.event_bus.handlers import (
    AuditCustomerCreatedHandler,
    CustomerChangeAddressHandler,
    LogCustomerCreatedHandler,
    SendEmailWhenProductIsCreatedHandler,
)
from ordering.main import bootstrap, build_dispatcher, shutdown


def _memory_settings() -> Settings:
    return Settings(database={"url": "sqlite+aiosqlite://"})


def test_build_dispatcher_registers_default_handlers():
    dispatcher = build_dispatcher()

    assert [type(h) for h in dispatcher.get_handlers("CustomerChangeAddress")] == [
        CustomerChangeAddressHandler,
    ]
    assert [type(h) for h in dispatcher.get_handlers("CustomerCreated")] == [
        LogCustomerCreatedHandler,
        AuditCustomerCreatedHandler,
    ]
    assert [type(h) for h in dispatcher.get_handlers("ProductCreated")] == [
        SendEmailWhenProductIsCreatedHandler,
    ]


@pytest.mark.asyncio
async def test_bootstrap_round_trip():
    ctx = await bootstrap(_memory_settings(), configure_logging=False)
    try:
        customer = Customer.create("123", "Customer 1", events=ctx.dispatcher)
        customer.change_address(Address("Street 1", 1, "Zipcode 1", "City 1"))
        await ctx.customers.create(customer)
        await ctx.products.create(
            Product.create("123", "Product 1", 10, events=ctx.dispatcher),
        )

        order = Order("123", "123", [OrderItem("1", "Product 1", Decimal("10"), "123", 2)])
        await ctx.orders.create(order)

        loaded = await ctx.orders.find("123")
        assert loaded.total() == Decimal("20")
        assert ctx.dispatcher.events_dispatched == 3
        assert ctx.dispatcher.dead_letters == []
    finally:
        await shutdown(ctx)


@pytest.mark.asyncio
async def test_bootstrap_rejects_bad_logging_config():
    settings = Settings(
        database={"url": "sqlite+aiosqlite://"},
        observability={"log_format": "xml"},
    )
    with pytest.raises(ConfigError):
        await bootstrap(settings, configure_logging=False)
