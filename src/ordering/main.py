"""Application bootstrap.

Wires settings, logging, the storage engine, the event dispatcher and the
repositories into one :class:`AppContext`.  The dispatcher is created
here once and handed by reference to everything that publishes events.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from .core.config import Settings, load_settings
from .event_bus.dispatcher import EventDispatcher
from .event_bus.handlers import (
    AuditCustomerCreatedHandler,
    CustomerChangeAddressHandler,
    LogCustomerCreatedHandler,
    SendEmailWhenProductIsCreatedHandler,
)
from .observability.logger import setup_logging
from .storage.sql.connection import create_all, create_engine, create_session_factory
from .storage.sql.repos import CustomerRepository, OrderRepository, ProductRepository

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    dispatcher: EventDispatcher
    orders: OrderRepository
    customers: CustomerRepository
    products: ProductRepository


def build_dispatcher() -> EventDispatcher:
    """Create the dispatcher with the default notification handlers."""
    dispatcher = EventDispatcher()
    dispatcher.register("CustomerChangeAddress", CustomerChangeAddressHandler())
    dispatcher.register("CustomerCreated", LogCustomerCreatedHandler())
    dispatcher.register("CustomerCreated", AuditCustomerCreatedHandler())
    dispatcher.register("ProductCreated", SendEmailWhenProductIsCreatedHandler())
    return dispatcher


async def bootstrap(
    settings: Settings | None = None,
    *,
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
    configure_logging: bool = True,
) -> AppContext:
    """Load config, set up logging and storage, wire repositories."""
    if settings is None:
        settings = load_settings(config_path=config_path, overrides=overrides)
    settings.validate_logging()

    if configure_logging:
        setup_logging(
            level=settings.observability.log_level,
            format=settings.observability.log_format,
        )

    db = settings.database
    engine = create_engine(
        db.url,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
        echo=db.echo,
    )
    if db.create_tables:
        await create_all(engine)

    session_factory = create_session_factory(engine)
    dispatcher = build_dispatcher()

    logger.info("Ordering context ready (handlers=%s)", dispatcher.event_names)
    return AppContext(
        settings=settings,
        engine=engine,
        session_factory=session_factory,
        dispatcher=dispatcher,
        orders=OrderRepository(session_factory),
        customers=CustomerRepository(session_factory, events=dispatcher),
        products=ProductRepository(session_factory),
    )


async def shutdown(ctx: AppContext) -> None:
    """Dispose of the engine and release pooled connections."""
    await ctx.engine.dispose()
    logger.info("Engine disposed.")
