"""Application layer - services, use cases, interfaces, and DTOs."""

from .dtos import (
    CreateCustomerRequest,
    CreateOrderRequest,
    CreateOrderResponse,
    CreateProductRequest,
    CustomerDTO,
    OrderDTO,
    OrderItemDTO,
    OrderItemRequest,
    ProductDTO,
)
from .interfaces import IUnitOfWork
from .services import CustomerService, OrderApplicationService, ProductService
from .use_cases import CreateCustomerUseCase, CreateOrderUseCase

__all__ = [
    # DTOs
    "CreateCustomerRequest",
    "CreateOrderRequest",
    "CreateOrderResponse",
    "CreateProductRequest",
    "CustomerDTO",
    "OrderDTO",
    "OrderItemDTO",
    "OrderItemRequest",
    "ProductDTO",
    # Services
    "CustomerService",
    "OrderApplicationService",
    "ProductService",
    # Use Cases
    "CreateCustomerUseCase",
    "CreateOrderUseCase",
    # Interfaces
    "IUnitOfWork",
]
