"""Application service for Customer lookups."""

from typing import Optional

from ecommerce.application.dtos.customer_dto import CustomerDTO
from ecommerce.application.interfaces import IUnitOfWork
from ecommerce.domain.value_objects import CustomerId


class CustomerService:
    """Read access to registered customers."""

    def __init__(self, uow: IUnitOfWork) -> None:
        self._uow = uow

    async def get_customer(self, customer_id: CustomerId) -> Optional[CustomerDTO]:
        async with self._uow:
            customer = await self._uow.customers.find_by_id(customer_id)

        if customer is None:
            return None

        return CustomerDTO(
            id=customer.id.value,
            name=customer.name,
            email=customer.email.address,
        )
