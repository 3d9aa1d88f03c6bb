"""Application use cases."""
from .create_customer import CreateCustomerUseCase
from .create_order import CreateOrderUseCase

__all__ = [
    "CreateCustomerUseCase",
    "CreateOrderUseCase",
]
