"""Domain entities and aggregate roots."""
from .customer import Customer
from .order import Order, OrderItem
from .product import Product

__all__ = ["Customer", "Order", "OrderItem", "Product"]
