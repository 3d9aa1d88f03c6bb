"""Domain value objects."""

from .identifiers import CustomerId, OrderId, ProductId
from .value_objects import Email, Money

__all__ = [
    "CustomerId",
    "Email",
    "Money",
    "OrderId",
    "ProductId",
]
