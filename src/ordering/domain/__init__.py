"""Domain layer: the order aggregate, its collaborators and domain events.

Nothing here touches storage; persistence lives in
:mod:`ordering.storage.sql`.
"""

from ordering.domain.address import Address
from ordering.domain.customer import Customer
from ordering.domain.events import (
    CustomerAddressPayload,
    CustomerChangeAddress,
    CustomerCreated,
    CustomerPayload,
    DomainEvent,
    ProductCreated,
    ProductPayload,
)
from ordering.domain.order import Order, OrderItem
from ordering.domain.product import Product

__all__ = [
    "Address",
    "Customer",
    "CustomerAddressPayload",
    "CustomerChangeAddress",
    "CustomerCreated",
    "CustomerPayload",
    "DomainEvent",
    "Order",
    "OrderItem",
    "Product",
    "ProductCreated",
    "ProductPayload",
]
