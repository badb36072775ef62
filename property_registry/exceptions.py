"""Custom exception hierarchy for the property registry."""


class RegistryError(Exception):
    """Base exception for all property registry errors."""


class PropertyNotFoundError(RegistryError):
    """Raised when a property does not exist or is inactive."""


class UnauthorizedError(RegistryError):
    """Raised when the caller is not allowed to perform the operation."""


class InvalidArgumentError(RegistryError):
    """Raised when an argument is invalid (null owner, self-transfer, negative value)."""


class InvariantViolationError(RegistryError):
    """Raised when the store's internal indexes are inconsistent."""


class ConfigurationError(RegistryError):
    """Raised when configuration is invalid or missing."""


class SinkError(RegistryError):
    """Raised when a notification sink fails to deliver."""
