"""Enumeration types for registry entities."""

from enum import Enum


class TransactionType(str, Enum):
    REGISTRATION = "registration"
    TRANSFER = "transfer"
    SALE = "sale"  # reserved, no operation produces it
