"""Property record model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Property:
    """A registered property and its current ownership state.

    ``property_address``, ``description`` and ``registration_date`` are set
    once at registration. ``current_owner`` changes only on transfer;
    ``current_value`` on transfer and on explicit value updates.
    """

    property_id: int
    property_address: str
    description: str
    current_owner: str
    current_value: int  # smallest monetary unit
    registration_date: datetime
    is_active: bool = True
