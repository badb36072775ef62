"""Authorization and validation guards.

Each guard returns the failure it detected as an exception instance, or
``None`` when the check passes. Guards never raise; the registry raises the
first failure returned by :func:`first_failure` before touching any state.
"""

from typing import Callable

from property_registry.exceptions import (
    InvalidArgumentError,
    PropertyNotFoundError,
    RegistryError,
    UnauthorizedError,
)
from property_registry.models import is_null_identity
from property_registry.store import RegistryStore

Check = Callable[[], RegistryError | None]


def property_exists(store: RegistryStore, property_id: int) -> RegistryError | None:
    """Fail with ``PropertyNotFoundError`` if the property is missing or inactive."""
    if store.get_property(property_id) is None:
        return PropertyNotFoundError(f"Property {property_id} not found")
    return None


def is_property_owner(store: RegistryStore, property_id: int, caller: str) -> RegistryError | None:
    """Fail with ``UnauthorizedError`` unless ``caller`` owns the property."""
    prop = store.get_property(property_id)
    if prop is None or prop.current_owner != caller:
        return UnauthorizedError(f"{caller} is not the owner of property {property_id}")
    return None


def is_contract_owner(store: RegistryStore, caller: str) -> RegistryError | None:
    """Fail with ``UnauthorizedError`` unless ``caller`` created the registry."""
    if caller != store.contract_owner:
        return UnauthorizedError(f"{caller} is not the contract owner")
    return None


def is_identity(name: str, identity: str | None) -> RegistryError | None:
    """Fail with ``InvalidArgumentError`` if ``identity`` is the null identity."""
    if is_null_identity(identity):
        return InvalidArgumentError(f"{name} must not be the null identity")
    return None


def valid_new_owner(new_owner: str | None, caller: str) -> RegistryError | None:
    """Reject a null recipient and transfers to oneself."""
    if is_null_identity(new_owner):
        return InvalidArgumentError("New owner must not be the null identity")
    if new_owner == caller:
        return InvalidArgumentError("Cannot transfer a property to its current owner")
    return None


def non_negative(name: str, value: int) -> RegistryError | None:
    """Fail with ``InvalidArgumentError`` for negative or non-integer values."""
    if isinstance(value, bool) or not isinstance(value, int):
        return InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        return InvalidArgumentError(f"{name} must not be negative, got {value}")
    return None


def first_failure(*checks: Check) -> RegistryError | None:
    """Run checks in order and return the first failure, skipping the rest."""
    for check in checks:
        failure = check()
        if failure is not None:
            return failure
    return None
