"""Application services."""
from .customer_service import CustomerService
from .order_service import OrderApplicationService
from .product_service import ProductService

__all__ = ["CustomerService", "OrderApplicationService", "ProductService"]
