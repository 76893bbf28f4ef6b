"""SQLAlchemy ORM models for the ordering database.

Relationships:
    CustomerRecord 1--* OrderRecord      (orders.customer_id foreign key)
    OrderRecord    1--* OrderItemRecord  (order_items.order_id foreign key)
    ProductRecord  1--* OrderItemRecord  (order_items.product_id foreign key)

``orders.total`` is a denormalized snapshot written at creation time.
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import (
    Boolean,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    relationship,
)


# ---------------------------------------------------------------------------
# Declarative base
# ---------------------------------------------------------------------------

class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""

    pass


# ---------------------------------------------------------------------------
# CustomerRecord
# ---------------------------------------------------------------------------

class CustomerRecord(Base):
    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    zipcode: Mapped[str | None] = mapped_column(String(32), nullable=True)
    city: Mapped[str | None] = mapped_column(String(128), nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    reward_points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<CustomerRecord(id={self.id!r}, name={self.name!r})>"


# ---------------------------------------------------------------------------
# ProductRecord
# ---------------------------------------------------------------------------

class ProductRecord(Base):
    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)

    def __repr__(self) -> str:
        return f"<ProductRecord(id={self.id!r}, name={self.name!r}, price={self.price})>"


# ---------------------------------------------------------------------------
# OrderRecord
# ---------------------------------------------------------------------------

class OrderRecord(Base):
    """Persisted order row.

    Items are loaded eagerly with every order so that the aggregate can be
    rebuilt from a single query round-trip pair.
    """

    __tablename__ = "orders"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    customer_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("customers.id"), nullable=False,
    )
    total: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)

    # Relationships
    items: Mapped[list[OrderItemRecord]] = relationship(
        "OrderItemRecord",
        back_populates="order",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    __table_args__ = (
        Index("ix_orders_customer_id", "customer_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<OrderRecord(id={self.id!r}, customer_id={self.customer_id!r}, "
            f"total={self.total})>"
        )


# ---------------------------------------------------------------------------
# OrderItemRecord
# ---------------------------------------------------------------------------

class OrderItemRecord(Base):
    """A line of an order.  Item ids are unique within their order."""

    __tablename__ = "order_items"

    order_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("orders.id"), primary_key=True,
    )
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    product_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("products.id"), nullable=False,
    )

    order: Mapped[OrderRecord] = relationship("OrderRecord", back_populates="items")

    __table_args__ = (
        Index("ix_order_items_product_id", "product_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<OrderItemRecord(order_id={self.order_id!r}, id={self.id!r}, "
            f"quantity={self.quantity})>"
        )
