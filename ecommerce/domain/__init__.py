"""Domain layer - pure domain models and interfaces."""

from .entities import Customer, Order, OrderItem, Product
from .enums import OrderStatus
from .event_bus import EventPublisher
from .events import DomainEvent, OrderCreatedEvent
from .exceptions import (
    CustomerNotFoundError,
    DomainError,
    EntityNotFoundError,
    InvalidEmailError,
    InvalidQuantityError,
    ProductNotFoundError,
)
from .repositories import CustomerRepository, OrderRepository, ProductRepository
from .value_objects import CustomerId, Email, Money, OrderId, ProductId

__all__ = [
    "Customer",
    "CustomerId",
    "CustomerNotFoundError",
    "CustomerRepository",
    "DomainError",
    "DomainEvent",
    "Email",
    "EntityNotFoundError",
    "EventPublisher",
    "InvalidEmailError",
    "InvalidQuantityError",
    "Money",
    "Order",
    "OrderCreatedEvent",
    "OrderId",
    "OrderItem",
    "OrderRepository",
    "OrderStatus",
    "Product",
    "ProductId",
    "ProductNotFoundError",
    "ProductRepository",
]
