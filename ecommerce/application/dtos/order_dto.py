"""Application DTOs for Order operations."""

from decimal import Decimal
from typing import List
from uuid import UUID

from pydantic import BaseModel, Field


class OrderItemRequest(BaseModel):
    """Requested line: which product and how many."""

    product_id: UUID = Field(..., description="Product ID")
    quantity: int = Field(..., gt=0, description="Quantity ordered")

    model_config = {"frozen": True}


class CreateOrderRequest(BaseModel):
    """Request DTO for creating an order."""

    customer_id: UUID = Field(..., description="Customer placing the order")
    items: List[OrderItemRequest] = Field(
        default_factory=list, description="Requested items, in order"
    )

    model_config = {"frozen": True}


class CreateOrderResponse(BaseModel):
    """Response DTO carrying the new order id."""

    id: UUID = Field(..., description="Order ID")

    model_config = {"frozen": True}


class OrderItemDTO(BaseModel):
    """DTO for order item."""

    product_id: UUID = Field(..., description="Product ID")
    quantity: int = Field(..., description="Quantity ordered")
    unit_price: Decimal = Field(..., description="Unit price captured at order time")

    model_config = {"frozen": True}


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    id: UUID = Field(..., description="Order ID")
    customer_id: UUID = Field(..., description="Customer ID")
    status: str = Field(..., description="Order status")
    items: List[OrderItemDTO] = Field(default_factory=list, description="Order items")

    model_config = {"frozen": True}
