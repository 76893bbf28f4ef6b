"""Customer entity.

Customers are referenced by orders through their id only.  State changes
that other parts of the system react to are published as domain events
through the dispatcher the customer was given; without one the change is
applied silently.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ordering.core.errors import InvalidAggregateState

from .address import Address
from .events import (
    CustomerAddressPayload,
    CustomerChangeAddress,
    CustomerCreated,
    CustomerPayload,
    DomainEvent,
)

if TYPE_CHECKING:
    from ordering.core.interfaces import EventPublisher


class Customer:
    def __init__(
        self,
        id: str,
        name: str,
        *,
        address: Address | None = None,
        active: bool = False,
        reward_points: int = 0,
        events: EventPublisher | None = None,
    ) -> None:
        self._id = id
        self._name = name
        self._address = address
        self._active = active
        self._reward_points = reward_points
        self._events = events
        self._validate()

    @classmethod
    def create(
        cls,
        id: str,
        name: str,
        *,
        events: EventPublisher | None = None,
    ) -> Customer:
        """Register a new customer and publish ``CustomerCreated``."""
        customer = cls(id, name, events=events)
        customer._publish(CustomerCreated(event_data=CustomerPayload(id=id, name=name)))
        return customer

    def _validate(self) -> None:
        if not self._id:
            raise InvalidAggregateState("Customer id is required")
        if not self._name:
            raise InvalidAggregateState(f"Customer {self._id}: name is required")
        if self._active and self._address is None:
            raise InvalidAggregateState(
                f"Customer {self._id}: address is mandatory to activate a customer"
            )

    def _publish(self, event: DomainEvent[Any]) -> None:
        if self._events is not None:
            self._events.notify(event)

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def address(self) -> Address | None:
        return self._address

    @property
    def reward_points(self) -> int:
        return self._reward_points

    def is_active(self) -> bool:
        return self._active

    def change_name(self, name: str) -> None:
        if not name:
            raise InvalidAggregateState(f"Customer {self._id}: name is required")
        self._name = name

    def change_address(self, address: Address) -> None:
        """Replace the address and publish ``CustomerChangeAddress``."""
        self._address = address
        self._publish(
            CustomerChangeAddress(
                event_data=CustomerAddressPayload(
                    id=self._id, name=self._name, address=address,
                ),
            )
        )

    def activate(self) -> None:
        if self._address is None:
            raise InvalidAggregateState(
                f"Customer {self._id}: address is mandatory to activate a customer"
            )
        self._active = True

    def deactivate(self) -> None:
        self._active = False

    def add_reward_points(self, points: int) -> None:
        if points < 0:
            raise InvalidAggregateState("Reward points to add must not be negative")
        self._reward_points += points

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Customer):
            return NotImplemented
        return (
            self._id == other._id
            and self._name == other._name
            and self._address == other._address
            and self._active == other._active
            and self._reward_points == other._reward_points
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<Customer(id={self._id!r}, name={self._name!r}, active={self._active})>"
