"""Repository interface for the Product aggregate."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.product import Product
from ..value_objects import ProductId


class ProductRepository(ABC):
    """Abstract repository for Product persistence."""

    @abstractmethod
    async def save(self, product: Product) -> None:
        """Persist product (insert or update)."""
        pass

    @abstractmethod
    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        """Retrieve product by id, None if absent."""
        pass
