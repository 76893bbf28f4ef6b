"""Domain-event dispatch: the registry and the notification handlers."""

from ordering.event_bus.dispatcher import DeadLetter, EventDispatcher
from ordering.event_bus.handlers import (
    AuditCustomerCreatedHandler,
    CustomerChangeAddressHandler,
    LogCustomerCreatedHandler,
    SendEmailWhenProductIsCreatedHandler,
)

__all__ = [
    "AuditCustomerCreatedHandler",
    "CustomerChangeAddressHandler",
    "DeadLetter",
    "EventDispatcher",
    "LogCustomerCreatedHandler",
    "SendEmailWhenProductIsCreatedHandler",
]
