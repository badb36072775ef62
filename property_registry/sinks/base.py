"""Notification sink protocol."""

from typing import Protocol

from property_registry.models import Event


class NotificationSink(Protocol):
    """Destination for registry notifications."""

    def publish(self, event: Event) -> None:
        """Deliver a single event. Raise ``SinkError`` on failure."""
        ...

    def close(self) -> None:
        """Flush and release resources."""
        ...
