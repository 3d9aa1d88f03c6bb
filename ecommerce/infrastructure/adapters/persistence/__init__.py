"""In-memory persistence adapters."""
from .in_memory_repositories import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
    InMemoryStore,
)
from .in_memory_uow import InMemoryUnitOfWork

__all__ = [
    "InMemoryCustomerRepository",
    "InMemoryOrderRepository",
    "InMemoryProductRepository",
    "InMemoryStore",
    "InMemoryUnitOfWork",
]
