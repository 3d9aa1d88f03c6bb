"""Customer aggregate."""
from dataclasses import dataclass

from ..value_objects import CustomerId, Email


@dataclass
class Customer:
    """Registered customer. Orders reference it by id only."""
    id: CustomerId
    name: str
    email: Email

    @classmethod
    def create(cls, name: str, email: Email) -> "Customer":
        """Factory method to register a new customer with a fresh id."""
        return cls(id=CustomerId.generate(), name=name, email=email)
