"""Application service for Order queries."""

from typing import Optional

from ecommerce.application.dtos.order_dto import OrderDTO, OrderItemDTO
from ecommerce.application.interfaces import IUnitOfWork
from ecommerce.domain.entities.order import Order
from ecommerce.domain.value_objects import OrderId


class OrderApplicationService:
    """
    Application service for the order read path.

    Responsibilities:
    - Load the Order aggregate inside a unit of work (read-only)
    - Project it into the flat OrderDTO response shape
    """

    def __init__(self, uow: IUnitOfWork) -> None:
        """Initialize order application service.

        Args:
            uow: Unit of work used for reads
        """
        self._uow = uow

    async def get_order(self, order_id: OrderId) -> Optional[OrderDTO]:
        """Get order by ID.

        Args:
            order_id: OrderId identifier

        Returns:
            OrderDTO if found, None otherwise
        """
        async with self._uow:
            order = await self._uow.orders.find_by_id(order_id)

            if not order:
                return None

            return self._order_to_dto(order)

    @staticmethod
    def _order_to_dto(order: Order) -> OrderDTO:
        """Transform Order domain entity to OrderDTO.

        Args:
            order: Order domain entity

        Returns:
            OrderDTO instance
        """
        items = [
            OrderItemDTO(
                product_id=item.product_id.value,
                quantity=item.quantity,
                unit_price=item.unit_price,
            )
            for item in order.items
        ]

        return OrderDTO(
            id=order.id.value,
            customer_id=order.customer_id.value,
            status=order.status.name,
            items=items,
        )
