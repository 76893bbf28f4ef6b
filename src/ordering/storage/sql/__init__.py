"""SQLAlchemy (asyncio) persistence for orders, customers and products."""

from ordering.storage.sql.connection import (
    create_all,
    create_engine,
    create_session_factory,
    drop_all,
    session_scope,
)
from ordering.storage.sql.repos import CustomerRepository, OrderRepository, ProductRepository

__all__ = [
    "CustomerRepository",
    "OrderRepository",
    "ProductRepository",
    "create_all",
    "create_engine",
    "create_session_factory",
    "drop_all",
    "session_scope",
]
