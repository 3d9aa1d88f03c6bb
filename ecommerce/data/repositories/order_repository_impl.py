"""SQLAlchemy implementation of OrderRepository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ecommerce.domain.entities.order import Order
from ecommerce.domain.repositories.order_repository import OrderRepository
from ecommerce.domain.value_objects import OrderId

from ..mappers import OrderMapper
from ..models.order_model import OrderModel


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def save(self, order: Order) -> None:
        """Persist order aggregate (header + items) in the current transaction.

        Args:
            order: Order domain aggregate
        """
        # Check if exists (upsert logic)
        existing = await self._session.get(OrderModel, str(order.id))

        if existing:
            # Update existing
            OrderMapper.update_persistence(order, existing)
            self._session.add(existing)
        else:
            # Insert new
            order_model = OrderMapper.to_persistence(order)
            self._session.add(order_model)

        await self._session.flush()  # Propagate to DB without committing

    async def find_by_id(self, order_id: OrderId) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: OrderId identifier

        Returns:
            Order if found, None otherwise
        """
        result = await self._session.execute(
            select(OrderModel).where(OrderModel.id == str(order_id))
        )
        model = result.scalar_one_or_none()

        if not model:
            return None

        return OrderMapper.to_domain(model)

    async def exists(self, order_id: OrderId) -> bool:
        """Check if order exists.

        Args:
            order_id: OrderId identifier

        Returns:
            True if order exists, False otherwise
        """
        result = await self._session.execute(
            select(OrderModel.id).where(OrderModel.id == str(order_id))
        )
        return result.scalar_one_or_none() is not None
