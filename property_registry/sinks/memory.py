"""In-memory sink collecting events for tests and simulations."""

from property_registry.models import Event


class MemorySink:
    """Keep published events in a list."""

    def __init__(self) -> None:
        self.events: list[Event] = []
        self.closed = False

    def publish(self, event: Event) -> None:
        self.events.append(event)

    def of_type(self, event_type: str) -> list[Event]:
        """Return the collected events with the given type."""
        return [event for event in self.events if event.event_type == event_type]

    def close(self) -> None:
        self.closed = True
