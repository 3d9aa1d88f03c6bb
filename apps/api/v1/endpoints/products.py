"""Product endpoints for REST API."""

from fastapi import APIRouter, Depends, HTTPException

from ecommerce.application.dtos.product_dto import CreateProductRequest, ProductDTO
from ecommerce.application.services.product_service import ProductService
from ecommerce.domain.value_objects import ProductId

from apps.api.deps import get_product_service

router = APIRouter(prefix="/products", tags=["products"])


@router.post("", status_code=201)
async def create_product(
    request: CreateProductRequest,
    service: ProductService = Depends(get_product_service),
) -> dict[str, str]:
    """Add a product to the catalogue."""
    product_id = await service.create_product(request)
    return {"id": str(product_id)}


@router.get("/{product_id}", response_model=ProductDTO)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductDTO:
    """Get product by ID.

    Raises:
        HTTPException: If product not found
    """
    try:
        parsed_id = ProductId.from_string(product_id)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Product {product_id} not found")

    product = await service.get_product(parsed_id)
    if not product:
        raise HTTPException(status_code=404, detail=f"Product {product_id} not found")
    return product
