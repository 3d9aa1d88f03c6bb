"""SQLAlchemy implementation of ProductRepository."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ecommerce.domain.entities.product import Product
from ecommerce.domain.repositories.product_repository import ProductRepository
from ecommerce.domain.value_objects import ProductId

from ..mappers import ProductMapper
from ..models.product_model import ProductModel


class SqlAlchemyProductRepository(ProductRepository):
    """Concrete implementation of ProductRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, product: Product) -> None:
        await self._session.merge(ProductMapper.to_persistence(product))
        await self._session.flush()

    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        model = await self._session.get(ProductModel, str(product_id))
        if model is None:
            return None
        return ProductMapper.to_domain(model)
