"""Base models shared across the registry."""

from dataclasses import dataclass, field
from datetime import datetime

NULL_IDENTITY = "0x0000000000000000000000000000000000000000"


def is_null_identity(identity: str | None) -> bool:
    """Return True for the zero address, an empty string or None."""
    return not identity or identity == NULL_IDENTITY


@dataclass
class Event:
    """Standard event envelope for notifications."""

    event_id: str
    event_type: str  # entity.action (e.g., property.transferred)
    event_time: datetime
    source: str  # Service/system that generated
    subject: str  # Entity ID affected
    data: dict
    metadata: dict = field(default_factory=dict)
