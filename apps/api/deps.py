"""FastAPI dependencies for dependency injection.

This module is the composition root: it picks the persistence backend
from settings and wires the shared event bus into the use cases.
"""

from pathlib import Path

from dotenv import load_dotenv
from fastapi import Depends

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from ecommerce.application.interfaces import IUnitOfWork
from ecommerce.application.services import (
    CustomerService,
    OrderApplicationService,
    ProductService,
)
from ecommerce.application.use_cases import CreateCustomerUseCase, CreateOrderUseCase
from ecommerce.data.uow import create_uow
from ecommerce.domain.event_bus import EventPublisher
from ecommerce.infrastructure.adapters.persistence import InMemoryStore, InMemoryUnitOfWork
from ecommerce.infrastructure.database.config import get_session_factory
from ecommerce.infrastructure.event_bus import get_event_bus
from ecommerce.settings import get_app_settings

# Shared committed state for the "memory" backend
_memory_store = InMemoryStore()


def get_uow() -> IUnitOfWork:
    """Get Unit of Work instance for the configured backend.

    Returns:
        IUnitOfWork instance
    """
    if get_app_settings().persistence == "sqlalchemy":
        return create_uow(get_session_factory())
    return InMemoryUnitOfWork(_memory_store)


def get_event_publisher() -> EventPublisher:
    """Get the shared event publisher.

    Returns:
        Process-wide InMemoryEventBus
    """
    return get_event_bus()


def get_create_order_use_case(
    uow: IUnitOfWork = Depends(get_uow),
    publisher: EventPublisher = Depends(get_event_publisher),
) -> CreateOrderUseCase:
    return CreateOrderUseCase(uow=uow, event_publisher=publisher)


def get_order_service(uow: IUnitOfWork = Depends(get_uow)) -> OrderApplicationService:
    return OrderApplicationService(uow)


def get_create_customer_use_case(uow: IUnitOfWork = Depends(get_uow)) -> CreateCustomerUseCase:
    return CreateCustomerUseCase(uow)


def get_customer_service(uow: IUnitOfWork = Depends(get_uow)) -> CustomerService:
    return CustomerService(uow)


def get_product_service(uow: IUnitOfWork = Depends(get_uow)) -> ProductService:
    return ProductService(uow)
