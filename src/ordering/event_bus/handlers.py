"""Notification handlers reacting to customer and product events.

Each handler formats the event payload into a human-readable message and
hands it to a notifier.  The default notifier writes to a structured
logger; tests and other channels pass their own callable.
"""

from __future__ import annotations

from collections.abc import Callable

from ordering.domain.events import CustomerChangeAddress, CustomerCreated, ProductCreated
from ordering.observability.logger import get_logger

Notifier = Callable[[str], None]


class _NotificationHandler:
    """Base for handlers that emit a single text notification."""

    def __init__(self, notifier: Notifier | None = None) -> None:
        self._notifier = notifier

    def _emit(self, message: str, **context: object) -> None:
        if self._notifier is not None:
            self._notifier(message)
            return
        get_logger(type(self).__module__).info(
            message, handler=type(self).__name__, **context,
        )


# ---------------------------------------------------------------------------
# Customer
# ---------------------------------------------------------------------------

class CustomerChangeAddressHandler(_NotificationHandler):
    def handle(self, event: CustomerChangeAddress) -> None:
        data = event.event_data
        self._emit(
            f"Customer address: {data.id}, {data.name} changed to: {data.address}",
            customer_id=data.id,
        )


class LogCustomerCreatedHandler(_NotificationHandler):
    """First of two independent reactions to ``CustomerCreated``."""

    def handle(self, event: CustomerCreated) -> None:
        self._emit(
            f"This is the first console.log of event: {event.name}",
            customer_id=event.event_data.id,
        )


class AuditCustomerCreatedHandler(_NotificationHandler):
    """Second of two independent reactions to ``CustomerCreated``."""

    def handle(self, event: CustomerCreated) -> None:
        self._emit(
            f"This is the second console.log of event: {event.name}",
            customer_id=event.event_data.id,
        )


# ---------------------------------------------------------------------------
# Product
# ---------------------------------------------------------------------------

class SendEmailWhenProductIsCreatedHandler(_NotificationHandler):
    def handle(self, event: ProductCreated) -> None:
        data = event.event_data
        self._emit(
            f"Sending email to catalogue subscribers: product {data.name} "
            f"created at {data.price}",
            product_id=data.id,
        )
