"""In-memory state for the property registry."""

from property_registry.store.registry import RegistryStore

__all__ = ["RegistryStore"]
