"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Tuple
from uuid import UUID, uuid4

from ..enums import OrderStatus
from ..events.base import DomainEvent
from ..exceptions import InvalidQuantityError
from ..value_objects import CustomerId, OrderId, ProductId


@dataclass(frozen=True)
class OrderItem:
    """
    Individual line item within an order.

    unit_price is the product price captured when the order was placed,
    so later catalogue price changes do not touch existing orders.
    """
    id: UUID
    product_id: ProductId
    quantity: int
    unit_price: Decimal

    def __post_init__(self):
        if (
            isinstance(self.quantity, bool)
            or not isinstance(self.quantity, int)
            or self.quantity <= 0
        ):
            raise InvalidQuantityError(self.quantity)
        if not isinstance(self.unit_price, Decimal):
            object.__setattr__(self, 'unit_price', Decimal(str(self.unit_price)))

    @classmethod
    def create(cls, product_id: ProductId, quantity: int, unit_price: Decimal) -> "OrderItem":
        """Factory for a new line item with a fresh id."""
        return cls(id=uuid4(), product_id=product_id, quantity=quantity, unit_price=unit_price)


class Order:
    """
    Order aggregate root.

    Invariants:
    - id and customer_id never change after construction
    - items keep insertion order and only grow through add_item()
    - status is PENDING for every order built here
    - item quantities are positive (checked by OrderItem)
    - currencies of line items are not compared
    """

    def __init__(self, id: OrderId, customer_id: CustomerId) -> None:
        self._id = id
        self._customer_id = customer_id
        self._items: List[OrderItem] = []
        self._status = OrderStatus.PENDING
        self._domain_events: List[DomainEvent] = []

    @classmethod
    def create(cls, customer_id: CustomerId) -> "Order":
        """
        Factory method to create a new Order.

        Records OrderCreatedEvent; it is published by the caller once the
        order has been committed.

        Args:
            customer_id: Customer placing the order (already validated)

        Returns:
            New PENDING Order with a freshly generated id
        """
        from ..events.order_events import OrderCreatedEvent

        order = cls(id=OrderId.generate(), customer_id=customer_id)
        order._record_event(OrderCreatedEvent(order_id=order.id))
        return order

    @classmethod
    def rehydrate(
        cls,
        id: OrderId,
        customer_id: CustomerId,
        status: OrderStatus,
        items: Iterable[OrderItem],
    ) -> "Order":
        """
        Rebuild an Order from storage.

        Reserved for persistence adapters. Records no events.
        """
        order = cls(id=id, customer_id=customer_id)
        order._status = OrderStatus(status)
        order._items.extend(items)
        return order

    @property
    def id(self) -> OrderId:
        return self._id

    @property
    def customer_id(self) -> CustomerId:
        return self._customer_id

    @property
    def items(self) -> Tuple[OrderItem, ...]:
        return tuple(self._items)

    @property
    def status(self) -> OrderStatus:
        return self._status

    def add_item(self, item: OrderItem) -> None:
        """Append a line item."""
        self._items.append(item)

    # =========================================================================
    # EVENT COLLECTION
    # =========================================================================

    def get_domain_events(self) -> List[DomainEvent]:
        """
        Get all domain events collected by this aggregate.

        Returns:
            List of domain events (will be published to Event Bus)
        """
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        """Clear all collected domain events (after publishing)."""
        self._domain_events.clear()

    def _record_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Order(id={self._id}, customer_id={self._customer_id}, "
            f"status={self._status.value}, items={len(self._items)})"
        )
