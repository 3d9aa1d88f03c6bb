"""
Event Bus Implementation (Infrastructure Layer).

In-process fan-out of domain events to registered subscribers.
"""
import asyncio
import logging
from typing import Awaitable, Callable, Dict, List, Optional, Type, Union

from ecommerce.domain.event_bus import EventPublisher
from ecommerce.domain.events.base import DomainEvent


logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], Union[None, Awaitable[None]]]


class InMemoryEventBus(EventPublisher):
    """
    In-Memory Event Bus Implementation.

    Features:
    - Dispatches each event to handlers subscribed to its type (or any
      of its base classes, so DomainEvent handlers see everything)
    - Supports sync and async handlers
    - A failing handler is logged and does not affect the publisher or
      the other handlers

    Architecture:
    - Infrastructure layer
    - Can be replaced with message broker (RabbitMQ, Kafka)
    - Preserves publish order
    """

    def __init__(self) -> None:
        """Initialize event bus with no subscribers."""
        self._subscribers: Dict[Type[DomainEvent], List[EventHandler]] = {}

    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a single domain event.

        Args:
            event: Domain event to publish
        """
        logger.info(f"Publishing event: {event.event_type} (aggregate: {event.aggregate_id})")
        await self._notify_subscribers(event)

    async def publish_all(self, events: List[DomainEvent]) -> None:
        """
        Publish multiple domain events in order.

        Args:
            events: List of domain events to publish
        """
        if not events:
            return

        logger.info(f"Publishing {len(events)} events")
        for event in events:
            await self.publish(event)

    def subscribe(
        self,
        handler: EventHandler,
        event_type: Type[DomainEvent] = DomainEvent,
    ) -> None:
        """
        Subscribe to domain events.

        Args:
            handler: Callback function that receives events
            event_type: Event class to listen for (default: all events)
        """
        handlers = self._subscribers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)
        logger.info(f"Registered event subscriber: {_handler_name(handler)} -> {event_type.__name__}")

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: Type[DomainEvent] = DomainEvent,
    ) -> None:
        """
        Unsubscribe from domain events.

        Args:
            handler: Callback function to remove
            event_type: Event class it was registered for
        """
        handlers = self._subscribers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
        logger.info(f"Unregistered event subscriber: {_handler_name(handler)}")

    def _handlers_for(self, event: DomainEvent) -> List[EventHandler]:
        handlers: List[EventHandler] = []
        for event_class in type(event).__mro__:
            for handler in self._subscribers.get(event_class, []):
                if handler not in handlers:
                    handlers.append(handler)
        return handlers

    async def _notify_subscribers(self, event: DomainEvent) -> None:
        """Notify all subscribers about an event."""
        handlers = self._handlers_for(event)
        if not handlers:
            return

        logger.debug(f"Notifying {len(handlers)} subscribers about {event.event_type}")

        for handler in handlers:
            try:
                result = handler(event)
                if asyncio.iscoroutine(result):
                    await result
            except Exception as e:
                logger.error(f"Subscriber {_handler_name(handler)} failed: {e}", exc_info=True)


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__name__", repr(handler))


# Global event bus instance
_event_bus_instance: Optional[InMemoryEventBus] = None


def get_event_bus() -> InMemoryEventBus:
    """
    Get or create the process-wide event bus instance.

    Only the composition root (apps/api/deps.py) should call this; use
    cases receive the bus as a constructor argument.

    Returns:
        Global event bus instance
    """
    global _event_bus_instance

    if _event_bus_instance is None:
        _event_bus_instance = InMemoryEventBus()

    return _event_bus_instance
