"""JSON Lines file sink for notifications."""

import json
from pathlib import Path

from property_registry.exceptions import SinkError
from property_registry.models import Event
from property_registry.sinks.serialization import to_dict


class JsonFileSink:
    """Append notifications to one JSON Lines file per event type."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON Lines files.
        pretty : bool
            Indent each record. Records then span several lines, so the
            output is no longer strict JSON Lines.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def path_for(self, event_type: str) -> Path:
        """Return the file an event type is written to."""
        # property.transferred -> property_transferred.jsonl
        return self.output_dir / (event_type.replace(".", "_") + ".jsonl")

    def publish(self, event: Event) -> None:
        """Append one event to its file."""
        data = to_dict(event)
        line = json.dumps(data, indent=2 if self.pretty else None, ensure_ascii=False, default=str)
        try:
            with open(self.path_for(event.event_type), "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            raise SinkError(f"Failed to write {event.event_type} event: {e}") from e

        self._counts[event.event_type] = self._counts.get(event.event_type, 0) + 1

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for event_type, count in self._counts.items():
            print(f"  {event_type}: {count} events")
