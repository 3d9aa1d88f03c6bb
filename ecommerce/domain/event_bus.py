"""
Event Publisher Interface (Domain Layer).

Pure interface definition - no implementation details.
"""
from abc import ABC, abstractmethod
from typing import List

from .events.base import DomainEvent


class EventPublisher(ABC):
    """
    Event Publisher Interface.

    Injected into use cases explicitly; implemented in the infrastructure
    layer. Delivery guarantees (sync/async, at-most-once/at-least-once)
    belong to the implementation.
    """

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a single domain event.

        Args:
            event: Domain event to publish
        """
        pass

    async def publish_all(self, events: List[DomainEvent]) -> None:
        """
        Publish multiple domain events in order.

        Args:
            events: List of domain events to publish
        """
        for event in events:
            await self.publish(event)
