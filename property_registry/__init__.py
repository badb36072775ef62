"""Property registry: ownership records and transaction histories."""

from property_registry.registry import PropertyRegistry

__all__ = ["PropertyRegistry"]

__version__ = "0.1.0"
