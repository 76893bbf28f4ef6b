"""Tests for the notification handlers."""

from __future__ import annotations

from decimal import Decimal

from structlog.testing import capture_logs

from ordering.domain.address import Address
from ordering.domain.customer import Customer
from ordering.domain.events import (
    CustomerAddressPayload,
    CustomerChangeAddress,
    CustomerCreated,
    CustomerPayload,
    ProductCreated,
    ProductPayload,
)
from ordering.event_bus.handlers import (
    AuditCustomerCreatedHandler,
    CustomerChangeAddressHandler,
    LogCustomerCreatedHandler,
    SendEmailWhenProductIsCreatedHandler,
)


class TestCustomerChangeAddressHandler:
    def test_formats_string_address(self):
        sent: list[str] = []
        handler = CustomerChangeAddressHandler(notifier=sent.append)

        handler.handle(
            CustomerChangeAddress(
                event_data=CustomerAddressPayload(
                    id="123", name="Customer 1", address="Street 1",
                ),
            )
        )

        assert sent == ["Customer address: 123, Customer 1 changed to: Street 1"]

    def test_formats_structured_address(self):
        sent: list[str] = []
        handler = CustomerChangeAddressHandler(notifier=sent.append)
        address = Address("Street 1", 1, "Zipcode 1", "City 1")

        handler.handle(
            CustomerChangeAddress(
                event_data=CustomerAddressPayload(id="123", name="Customer 1", address=address),
            )
        )

        assert sent == [
            "Customer address: 123, Customer 1 changed to: Street 1, 1, Zipcode 1 City 1"
        ]

    def test_default_notifier_logs(self):
        handler = CustomerChangeAddressHandler()
        with capture_logs() as logs:
            handler.handle(
                CustomerChangeAddress(
                    event_data=CustomerAddressPayload(
                        id="123", name="Customer 1", address="Street 1",
                    ),
                )
            )
        assert len(logs) == 1
        assert logs[0]["event"].startswith("Customer address: 123")
        assert logs[0]["customer_id"] == "123"
        assert logs[0]["log_level"] == "info"

    def test_end_to_end_through_dispatcher(self, dispatcher, sample_address):
        sent: list[str] = []
        dispatcher.register("CustomerChangeAddress", CustomerChangeAddressHandler(sent.append))

        customer = Customer("123", "Customer 1", events=dispatcher)
        customer.change_address(sample_address)

        assert sent == [
            "Customer address: 123, Customer 1 changed to: Street 1, 1, Zipcode 1 City 1"
        ]


class TestCustomerCreatedHandlers:
    def test_both_handlers_react(self, dispatcher):
        sent: list[str] = []
        dispatcher.register("CustomerCreated", LogCustomerCreatedHandler(sent.append))
        dispatcher.register("CustomerCreated", AuditCustomerCreatedHandler(sent.append))

        dispatcher.notify(CustomerCreated(event_data=CustomerPayload(id="1", name="C")))

        assert sent == [
            "This is the first console.log of event: CustomerCreated",
            "This is the second console.log of event: CustomerCreated",
        ]


class TestProductCreatedHandler:
    def test_sends_email_message(self):
        sent: list[str] = []
        handler = SendEmailWhenProductIsCreatedHandler(sent.append)

        handler.handle(
            ProductCreated(
                event_data=ProductPayload(id="1", name="Product 1", price=Decimal("10")),
            )
        )

        assert len(sent) == 1
        assert "Product 1" in sent[0]
