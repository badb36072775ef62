"""Domain models for the property registry."""

from property_registry.models.base import NULL_IDENTITY, Event, is_null_identity
from property_registry.models.enums import TransactionType
from property_registry.models.notifications import (
    Notification,
    PropertyRegistered,
    PropertyTransferred,
    PropertyValueUpdated,
)
from property_registry.models.property import Property
from property_registry.models.transaction import Transaction

__all__ = [
    "Event",
    "NULL_IDENTITY",
    "Notification",
    "Property",
    "PropertyRegistered",
    "PropertyTransferred",
    "PropertyValueUpdated",
    "Transaction",
    "TransactionType",
    "is_null_identity",
]
