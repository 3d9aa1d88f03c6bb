"""
In-memory repository implementations.

Used for testing, demos and the no-database mode. Writes go to a staging
area owned by InMemoryUnitOfWork and reach the shared store only on
commit.
"""
import dataclasses
import logging
from typing import Dict, Generic, Optional, TypeVar

from ecommerce.domain.entities.customer import Customer
from ecommerce.domain.entities.order import Order
from ecommerce.domain.entities.product import Product
from ecommerce.domain.repositories import (
    CustomerRepository,
    OrderRepository,
    ProductRepository,
)
from ecommerce.domain.value_objects import CustomerId, OrderId, ProductId


logger = logging.getLogger(__name__)

_K = TypeVar("_K")
_V = TypeVar("_V")


class InMemoryStore:
    """Committed state shared by every InMemoryUnitOfWork built on it."""

    def __init__(self) -> None:
        self.customers: Dict[CustomerId, Customer] = {}
        self.products: Dict[ProductId, Product] = {}
        self.orders: Dict[OrderId, Order] = {}


class StagedTable(Generic[_K, _V]):
    """One table: committed rows plus the writes of the open transaction."""

    def __init__(self, committed: Dict[_K, _V]) -> None:
        self.committed = committed
        self.pending: Dict[_K, _V] = {}

    def get(self, key: _K) -> Optional[_V]:
        if key in self.pending:
            return self.pending[key]
        return self.committed.get(key)

    def put(self, key: _K, value: _V) -> None:
        self.pending[key] = value

    def apply(self) -> None:
        self.committed.update(self.pending)
        self.pending.clear()

    def discard(self) -> None:
        self.pending.clear()


def _copy_order(order: Order) -> Order:
    return Order.rehydrate(
        id=order.id,
        customer_id=order.customer_id,
        status=order.status,
        items=order.items,
    )


class InMemoryCustomerRepository(CustomerRepository):
    """In-memory implementation of CustomerRepository."""

    def __init__(self, table: StagedTable[CustomerId, Customer]) -> None:
        self._table = table

    async def save(self, customer: Customer) -> None:
        self._table.put(customer.id, dataclasses.replace(customer))

    async def find_by_id(self, customer_id: CustomerId) -> Optional[Customer]:
        customer = self._table.get(customer_id)
        return dataclasses.replace(customer) if customer else None


class InMemoryProductRepository(ProductRepository):
    """In-memory implementation of ProductRepository."""

    def __init__(self, table: StagedTable[ProductId, Product]) -> None:
        self._table = table

    async def save(self, product: Product) -> None:
        self._table.put(product.id, dataclasses.replace(product))

    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        product = self._table.get(product_id)
        return dataclasses.replace(product) if product else None


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Stores a copy of the aggregate, so later changes to the caller's
    instance are not visible until saved again.
    """

    def __init__(self, table: StagedTable[OrderId, Order]) -> None:
        self._table = table

    async def save(self, order: Order) -> None:
        self._table.put(order.id, _copy_order(order))
        logger.debug(f"Order staged: {order.id} ({len(order.items)} item(s))")

    async def find_by_id(self, order_id: OrderId) -> Optional[Order]:
        order = self._table.get(order_id)
        return _copy_order(order) if order else None

    async def exists(self, order_id: OrderId) -> bool:
        return self._table.get(order_id) is not None
