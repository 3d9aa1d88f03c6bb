"""
Order Domain Events.
"""
from dataclasses import dataclass, field
from datetime import datetime

from ..value_objects import OrderId
from .base import DomainEvent, new_event_id, utcnow


@dataclass(frozen=True)
class OrderCreatedEvent(DomainEvent):
    """
    Order was created and committed.

    Carries only the order id: consumers re-fetch the order if they need
    its contents.
    """

    order_id: OrderId
    occurred_on: datetime = field(default_factory=utcnow)
    event_id: str = field(default_factory=new_event_id)

    @property
    def aggregate_id(self) -> str:
        return str(self.order_id)
