"""
In-memory Unit of Work.

Simulates atomicity without a database: repository writes are staged
and copied into the shared InMemoryStore only by commit().
"""
import logging
from typing import Optional

from ecommerce.application.interfaces import IUnitOfWork

from .in_memory_repositories import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
    InMemoryStore,
    StagedTable,
)


logger = logging.getLogger(__name__)


class InMemoryUnitOfWork(IUnitOfWork):
    """In-memory implementation of IUnitOfWork."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self.store = store if store is not None else InMemoryStore()
        self._tables: Optional[tuple] = None

    async def __aenter__(self) -> "InMemoryUnitOfWork":
        """Start transaction scope with empty staging tables."""
        self._tables = (
            StagedTable(self.store.customers),
            StagedTable(self.store.products),
            StagedTable(self.store.orders),
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Discard anything not committed."""
        if exc_type is not None:
            logger.warning(f"Transaction failed, rolling back: {exc_val}")
        await self.rollback()
        self._tables = None

    def _require_tables(self) -> tuple:
        if self._tables is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._tables

    @property
    def customers(self) -> InMemoryCustomerRepository:
        return InMemoryCustomerRepository(self._require_tables()[0])

    @property
    def products(self) -> InMemoryProductRepository:
        return InMemoryProductRepository(self._require_tables()[1])

    @property
    def orders(self) -> InMemoryOrderRepository:
        return InMemoryOrderRepository(self._require_tables()[2])

    async def commit(self) -> None:
        """Apply all staged writes to the store."""
        for table in self._require_tables():
            table.apply()

    async def rollback(self) -> None:
        """Drop all staged writes."""
        for table in self._require_tables():
            table.discard()
