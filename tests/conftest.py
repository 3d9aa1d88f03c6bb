"""Shared pytest fixtures."""

from decimal import Decimal
from typing import List

import pytest

from ecommerce.domain.entities.customer import Customer
from ecommerce.domain.entities.product import Product
from ecommerce.domain.events.base import DomainEvent
from ecommerce.domain.value_objects import Email, Money
from ecommerce.infrastructure.adapters.persistence import InMemoryStore, InMemoryUnitOfWork
from ecommerce.infrastructure.event_bus import InMemoryEventBus


@pytest.fixture
def store() -> InMemoryStore:
    """Fresh committed state for each test."""
    return InMemoryStore()


@pytest.fixture
def uow(store: InMemoryStore) -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(store)


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest.fixture
def published_events(event_bus: InMemoryEventBus) -> List[DomainEvent]:
    """Every event that reaches the bus."""
    events: List[DomainEvent] = []
    event_bus.subscribe(events.append)
    return events


@pytest.fixture
def customer(store: InMemoryStore) -> Customer:
    """Customer C1, already committed."""
    c1 = Customer.create(name="Ada Lovelace", email=Email("ada@example.com"))
    store.customers[c1.id] = c1
    return c1


@pytest.fixture
def product_p1(store: InMemoryStore) -> Product:
    """Product P1 at 9.99 USD, already committed."""
    p1 = Product.create(name="Notebook", price=Money(Decimal("9.99"), "USD"))
    store.products[p1.id] = p1
    return p1


@pytest.fixture
def product_p2(store: InMemoryStore) -> Product:
    """Product P2 at 3.50 USD, already committed."""
    p2 = Product.create(name="Pencil", price=Money(Decimal("3.50"), "USD"))
    store.products[p2.id] = p2
    return p2
