"""Application DTOs."""

from .customer_dto import CreateCustomerRequest, CustomerDTO
from .order_dto import (
    CreateOrderRequest,
    CreateOrderResponse,
    OrderDTO,
    OrderItemDTO,
    OrderItemRequest,
)
from .product_dto import CreateProductRequest, ProductDTO

__all__ = [
    "CreateCustomerRequest",
    "CreateOrderRequest",
    "CreateOrderResponse",
    "CreateProductRequest",
    "CustomerDTO",
    "OrderDTO",
    "OrderItemDTO",
    "OrderItemRequest",
    "ProductDTO",
]
