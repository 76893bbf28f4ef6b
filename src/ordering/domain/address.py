"""Address value object."""

from __future__ import annotations

from dataclasses import dataclass

from ordering.core.errors import InvalidAggregateState


@dataclass(frozen=True)
class Address:
    street: str
    number: int
    zipcode: str
    city: str

    def __post_init__(self) -> None:
        if not self.street:
            raise InvalidAggregateState("Street is required")
        if self.number <= 0:
            raise InvalidAggregateState("Number must be greater than 0")
        if not self.zipcode:
            raise InvalidAggregateState("Zipcode is required")
        if not self.city:
            raise InvalidAggregateState("City is required")

    def __str__(self) -> str:
        return f"{self.street}, {self.number}, {self.zipcode} {self.city}"
