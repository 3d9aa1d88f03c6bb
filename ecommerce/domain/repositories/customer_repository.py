"""Repository interface for the Customer aggregate."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.customer import Customer
from ..value_objects import CustomerId


class CustomerRepository(ABC):
    """Abstract repository for Customer persistence."""

    @abstractmethod
    async def save(self, customer: Customer) -> None:
        """Persist customer (insert or update)."""
        pass

    @abstractmethod
    async def find_by_id(self, customer_id: CustomerId) -> Optional[Customer]:
        """Retrieve customer by id, None if absent."""
        pass
