"""Create Customer Use Case."""
import logging

from ecommerce.application.dtos.customer_dto import CreateCustomerRequest
from ecommerce.application.interfaces import IUnitOfWork
from ecommerce.domain.entities.customer import Customer
from ecommerce.domain.value_objects import CustomerId, Email


logger = logging.getLogger(__name__)


class CreateCustomerUseCase:
    """Register a customer and return its id."""

    def __init__(self, uow: IUnitOfWork) -> None:
        self.uow = uow

    async def execute(self, request: CreateCustomerRequest) -> CustomerId:
        """
        Raises:
            InvalidEmailError: If the email has no '@' (nothing persisted)
        """
        customer = Customer.create(name=request.name, email=Email(request.email))

        async with self.uow:
            await self.uow.customers.save(customer)
            await self.uow.commit()

        logger.info(f"Customer registered: {customer.id}")
        return customer.id
