"""Custom exception hierarchy for the ordering domain."""


class OrderingError(Exception):
    """Base exception for all ordering errors."""


# --- Configuration ---
class ConfigError(OrderingError):
    """Invalid or missing configuration."""


# --- Domain ---
class DomainError(OrderingError):
    """Domain rule violation."""


class InvalidAggregateState(DomainError):
    """An entity or aggregate was constructed in a state its invariants forbid."""


# --- Lookup ---
class NotFoundError(OrderingError):
    """A persisted entity could not be loaded."""

    entity: str = "Entity"

    def __init__(self, entity_id: str):
        self.entity_id = entity_id
        super().__init__(f"{self.entity} not found")


class OrderNotFound(NotFoundError):
    """No order could be loaded for the requested id."""

    entity = "Order"


class CustomerNotFound(NotFoundError):
    """No customer could be loaded for the requested id."""

    entity = "Customer"


class ProductNotFound(NotFoundError):
    """No product could be loaded for the requested id."""

    entity = "Product"


# --- Storage ---
class PersistenceError(OrderingError):
    """A write against the store failed (constraint violation, connectivity)."""
