"""Application DTOs for Product operations."""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field


class CreateProductRequest(BaseModel):
    """Request DTO for cataloguing a product."""

    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    price: Decimal = Field(..., ge=0, description="Unit price")
    currency: str = Field(default="USD", min_length=1, max_length=10, description="Currency code")

    model_config = {"frozen": True}


class ProductDTO(BaseModel):
    """Response DTO for product details."""

    id: UUID = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    price: Decimal = Field(..., description="Current unit price")
    currency: str = Field(..., description="Currency code")

    model_config = {"frozen": True}
