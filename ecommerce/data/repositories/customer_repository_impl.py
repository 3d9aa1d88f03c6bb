"""SQLAlchemy implementation of CustomerRepository."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ecommerce.domain.entities.customer import Customer
from ecommerce.domain.repositories.customer_repository import CustomerRepository
from ecommerce.domain.value_objects import CustomerId

from ..mappers import CustomerMapper
from ..models.customer_model import CustomerModel


class SqlAlchemyCustomerRepository(CustomerRepository):
    """Concrete implementation of CustomerRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, customer: Customer) -> None:
        await self._session.merge(CustomerMapper.to_persistence(customer))
        await self._session.flush()

    async def find_by_id(self, customer_id: CustomerId) -> Optional[Customer]:
        model = await self._session.get(CustomerModel, str(customer_id))
        if model is None:
            return None
        return CustomerMapper.to_domain(model)
