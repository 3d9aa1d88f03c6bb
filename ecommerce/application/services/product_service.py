"""Application service for the product catalogue."""

import logging
from typing import Optional

from ecommerce.application.dtos.product_dto import CreateProductRequest, ProductDTO
from ecommerce.application.interfaces import IUnitOfWork
from ecommerce.domain.entities.product import Product
from ecommerce.domain.value_objects import Money, ProductId


logger = logging.getLogger(__name__)


class ProductService:
    """
    Application service for catalogue operations.

    Responsibilities:
    - Create products with their initial price
    - Project products into ProductDTO
    """

    def __init__(self, uow: IUnitOfWork) -> None:
        """Initialize product service.

        Args:
            uow: Unit of work used for reads and writes
        """
        self._uow = uow

    async def create_product(self, request: CreateProductRequest) -> ProductId:
        """Catalogue a new product.

        Args:
            request: CreateProductRequest DTO

        Returns:
            Generated ProductId
        """
        product = Product.create(
            name=request.name,
            price=Money(amount=request.price, currency=request.currency),
        )

        async with self._uow:
            await self._uow.products.save(product)
            await self._uow.commit()

        logger.info(f"Product catalogued: {product.id} ({product.price})")
        return product.id

    async def get_product(self, product_id: ProductId) -> Optional[ProductDTO]:
        """Get product by ID.

        Args:
            product_id: ProductId identifier

        Returns:
            ProductDTO if found, None otherwise
        """
        async with self._uow:
            product = await self._uow.products.find_by_id(product_id)

        if product is None:
            return None

        return ProductDTO(
            id=product.id.value,
            name=product.name,
            price=product.price.amount,
            currency=product.price.currency,
        )
