"""Application layer interfaces."""
from abc import ABC, abstractmethod

from ecommerce.domain.repositories import (
    CustomerRepository,
    OrderRepository,
    ProductRepository,
)


class IUnitOfWork(ABC):
    """
    Interface for a unit of work (one transaction boundary).

    Use cases receive an instance explicitly and open it with
    ``async with``. Every ``async with`` starts a fresh transaction, so
    one instance can be reused for consecutive requests.

    Usage:
        async with uow:
            customer = await uow.customers.find_by_id(customer_id)
            await uow.orders.save(order)
            await uow.commit()

    Writes that were not committed when the block exits are discarded.
    An exception raised inside the block rolls the transaction back and
    propagates.
    """

    @property
    @abstractmethod
    def customers(self) -> CustomerRepository:
        """Customer repository bound to the current transaction."""

    @property
    @abstractmethod
    def products(self) -> ProductRepository:
        """Product repository bound to the current transaction."""

    @property
    @abstractmethod
    def orders(self) -> OrderRepository:
        """Order repository bound to the current transaction."""

    @abstractmethod
    async def __aenter__(self) -> "IUnitOfWork":
        """Start transaction scope."""

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception and release resources."""

    @abstractmethod
    async def commit(self) -> None:
        """Make all pending writes durable together."""

    @abstractmethod
    async def rollback(self) -> None:
        """Discard all pending writes."""


__all__ = ["IUnitOfWork"]
