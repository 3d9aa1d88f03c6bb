"""Domain exceptions.

Raised by the domain and application layers when a business rule is
violated. The API layer translates them into HTTP responses.
"""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors."""


class EntityNotFoundError(DomainError):
    """A referenced aggregate does not exist."""

    entity = "Entity"

    def __init__(self, entity_id: Any) -> None:
        self.entity_id = entity_id
        super().__init__(f"{self.entity} not found: {entity_id}")


class CustomerNotFoundError(EntityNotFoundError):
    """The customer referenced by an order does not exist."""

    entity = "Customer"


class ProductNotFoundError(EntityNotFoundError):
    """A product referenced by an order item does not exist."""

    entity = "Product"


class InvalidEmailError(DomainError, ValueError):
    """Email address is malformed."""

    def __init__(self, address: Any) -> None:
        self.address = address
        super().__init__(f"Invalid email address: {address!r}")


class InvalidQuantityError(DomainError, ValueError):
    """Order item quantity is not a positive integer."""

    def __init__(self, quantity: Any) -> None:
        self.quantity = quantity
        super().__init__(f"Quantity must be a positive integer, got: {quantity!r}")
