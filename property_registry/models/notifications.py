"""Notifications emitted after successful state changes."""

import uuid
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import ClassVar

from property_registry.models.base import Event

EVENT_SOURCE = "property-registry"


@dataclass(frozen=True)
class Notification:
    """Base for registry notifications."""

    event_type: ClassVar[str] = ""

    property_id: int

    def to_event(self, event_time: datetime) -> Event:
        """Wrap this notification in the standard event envelope."""
        return Event(
            event_id=str(uuid.uuid4()),
            event_type=self.event_type,
            event_time=event_time,
            source=EVENT_SOURCE,
            subject=str(self.property_id),
            data=asdict(self),
        )


@dataclass(frozen=True)
class PropertyRegistered(Notification):
    """A new property was registered."""

    event_type: ClassVar[str] = "property.registered"

    owner: str
    property_address: str


@dataclass(frozen=True)
class PropertyTransferred(Notification):
    """Ownership of a property changed hands."""

    event_type: ClassVar[str] = "property.transferred"

    previous_owner: str
    new_owner: str
    transaction_value: int


@dataclass(frozen=True)
class PropertyValueUpdated(Notification):
    """The owner changed a property's recorded value."""

    event_type: ClassVar[str] = "property.value_updated"

    old_value: int
    new_value: int
