"""
Create Order Use Case.

The only workflow in the system that coordinates several aggregates.

Flow:
1. Validate the customer exists
2. Create the Order aggregate (PENDING)
3. Resolve every product and capture its current price
4. Save order + items and commit (single unit of work)
5. Publish OrderCreatedEvent (after commit)
6. Return the new order id

All-or-nothing: a missing customer or product aborts before anything is
written.
"""
import logging

from ecommerce.application.dtos.order_dto import CreateOrderRequest
from ecommerce.application.interfaces import IUnitOfWork
from ecommerce.domain.entities.order import Order, OrderItem
from ecommerce.domain.event_bus import EventPublisher
from ecommerce.domain.exceptions import CustomerNotFoundError, ProductNotFoundError
from ecommerce.domain.value_objects import CustomerId, OrderId, ProductId


logger = logging.getLogger(__name__)


class CreateOrderUseCase:
    """
    Use case for placing a new order.

    Both collaborators are passed in explicitly: the unit of work is the
    transaction boundary, the publisher announces committed orders.
    """

    def __init__(self, uow: IUnitOfWork, event_publisher: EventPublisher) -> None:
        """
        Initialize use case with dependencies.

        Args:
            uow: Unit of work spanning customer, product and order repositories
            event_publisher: Publisher for domain events
        """
        self.uow = uow
        self.event_publisher = event_publisher

    async def execute(self, request: CreateOrderRequest) -> OrderId:
        """
        Execute the order creation workflow.

        Args:
            request: Customer id and ordered (product_id, quantity) pairs

        Returns:
            Id of the newly created order

        Raises:
            CustomerNotFoundError: Customer does not exist (nothing persisted)
            ProductNotFoundError: A product does not exist (nothing persisted)
        """
        customer_id = CustomerId(value=request.customer_id)

        async with self.uow:
            # ================================================================
            # STEP 1: Validate Customer
            # ================================================================
            customer = await self.uow.customers.find_by_id(customer_id)
            if customer is None:
                logger.warning(f"Order rejected: customer {customer_id} not found")
                raise CustomerNotFoundError(customer_id)

            # ================================================================
            # STEP 2: Create Order Aggregate
            # ================================================================
            order = Order.create(customer_id=customer_id)
            logger.info(
                f"[{order.id}] Creating order for customer {customer_id} "
                f"({len(request.items)} item(s))"
            )

            # ================================================================
            # STEP 3: Resolve Products and Capture Prices
            # ================================================================
            for item_request in request.items:
                product_id = ProductId(value=item_request.product_id)
                product = await self.uow.products.find_by_id(product_id)
                if product is None:
                    logger.warning(
                        f"[{order.id}] Order rejected: product {product_id} not found"
                    )
                    raise ProductNotFoundError(product_id)

                order.add_item(
                    OrderItem.create(
                        product_id=product_id,
                        quantity=item_request.quantity,
                        unit_price=product.price.amount,
                    )
                )

            # ================================================================
            # STEP 4: Persist (atomic)
            # ================================================================
            await self.uow.orders.save(order)
            await self.uow.commit()
            logger.info(f"[{order.id}] ✅ Order committed with {len(order.items)} item(s)")

        # ================================================================
        # STEP 5: Publish Events (post-commit)
        # ================================================================
        await self._publish_events(order)

        return order.id

    async def _publish_events(self, order: Order) -> None:
        """Publish collected events. The order is already committed, so a
        delivery failure is logged and not raised."""
        events = order.get_domain_events()
        if not events:
            return

        try:
            await self.event_publisher.publish_all(events)
            order.clear_domain_events()
            logger.info(f"[{order.id}] Published {len(events)} event(s)")
        except Exception as e:
            logger.error(
                f"[{order.id}] Failed to publish events after commit: {e}",
                exc_info=True,
            )
