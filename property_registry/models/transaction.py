"""Transaction log entry model."""

from dataclasses import dataclass
from datetime import datetime

from property_registry.models.enums import TransactionType


@dataclass(frozen=True)
class Transaction:
    """Immutable entry in a property's ownership history."""

    transaction_id: int  # unique across all properties
    property_id: int
    previous_owner: str | None  # None for the registration entry
    new_owner: str
    transaction_value: int
    timestamp: datetime
    transaction_type: TransactionType
