"""Tests for the exception hierarchy."""

import pytest

from ordering.core.errors import (
    ConfigError,
    CustomerNotFound,
    DomainError,
    InvalidAggregateState,
    NotFoundError,
    OrderingError,
    OrderNotFound,
    PersistenceError,
    ProductNotFound,
)


@pytest.mark.parametrize(
    "exc_cls",
    [ConfigError, DomainError, InvalidAggregateState, PersistenceError],
)
def test_all_derive_from_base(exc_cls):
    assert issubclass(exc_cls, OrderingError)


@pytest.mark.parametrize(
    ("exc_cls", "message"),
    [
        (OrderNotFound, "Order not found"),
        (CustomerNotFound, "Customer not found"),
        (ProductNotFound, "Product not found"),
    ],
)
def test_not_found_message_and_id(exc_cls, message):
    exc = exc_cls("42")
    assert isinstance(exc, NotFoundError)
    assert str(exc) == message
    assert exc.entity_id == "42"


def test_invalid_state_is_domain_error():
    assert issubclass(InvalidAggregateState, DomainError)
