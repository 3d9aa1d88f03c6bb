"""SQLAlchemy repository implementations."""

from .customer_repository_impl import SqlAlchemyCustomerRepository
from .order_repository_impl import SqlAlchemyOrderRepository
from .product_repository_impl import SqlAlchemyProductRepository

__all__ = [
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyProductRepository",
]
