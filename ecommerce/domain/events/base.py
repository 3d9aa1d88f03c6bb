"""
Base Domain Event.

All domain events inherit from this base class.
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict
import dataclasses
import uuid


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_event_id() -> str:
    return str(uuid.uuid4())


class DomainEvent:
    """
    Base class for all domain events.

    Events are immutable records of things that have happened. Concrete
    events are frozen dataclasses that declare their own fields; this
    base only provides naming and serialization.
    """

    @property
    def event_type(self) -> str:
        return self.__class__.__name__

    @property
    def aggregate_type(self) -> str:
        """
        Extract aggregate type from event type.

        Example: OrderCreatedEvent -> Order
        """
        event_name = self.event_type

        # Remove 'Event' suffix
        if event_name.endswith('Event'):
            event_name = event_name[:-5]

        # Extract aggregate name (first word before action)
        for i, char in enumerate(event_name):
            if i > 0 and char.isupper():
                return event_name[:i]

        return event_name

    @property
    def aggregate_id(self) -> str:
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert event to dictionary for serialization.

        Returns:
            Dictionary representation of event
        """
        data = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            # Serialize value
            if isinstance(value, datetime):
                data[f.name] = value.isoformat()
            elif isinstance(value, (Decimal, uuid.UUID)):
                data[f.name] = str(value)
            elif hasattr(value, 'value'):
                data[f.name] = str(value)
            else:
                data[f.name] = value

        return {
            "event_type": self.event_type,
            "aggregate_type": self.aggregate_type,
            "aggregate_id": self.aggregate_id,
            "data": data,
        }
