"""Console sink for debugging and development."""

import json

from property_registry.exceptions import SinkError
from property_registry.models import Event
from property_registry.sinks.serialization import to_dict


class ConsoleSink:
    """Output notifications to console (stdout) for debugging."""

    def __init__(self, pretty: bool = True) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        """
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def publish(self, event: Event) -> None:
        """Print a single event as JSON."""
        data = to_dict(event)
        line = json.dumps(data, indent=2 if self.pretty else None, ensure_ascii=False, default=str)
        try:
            print(line)
        except (OSError, ValueError) as e:
            raise SinkError(f"Failed to print {event.event_type} event: {e}") from e

        self._counts[event.event_type] = self._counts.get(event.event_type, 0) + 1

    def close(self) -> None:
        """Print summary and close."""
        lines = [f"\n{'='*60}", "Console Sink Summary", "=" * 60]
        lines += [f"  {event_type}: {count} events" for event_type, count in self._counts.items()]
        try:
            print("\n".join(lines))
        except (OSError, ValueError) as e:
            raise SinkError(f"Failed to print console summary: {e}") from e
