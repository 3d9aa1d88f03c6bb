"""Database models."""

from .base import Base
from .customer_model import CustomerModel
from .order_model import OrderItemModel, OrderModel
from .product_model import ProductModel
from .types import ExactDecimal

__all__ = [
    "Base",
    "CustomerModel",
    "ExactDecimal",
    "OrderItemModel",
    "OrderModel",
    "ProductModel",
]
