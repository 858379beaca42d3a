"""Binding registry specific exceptions."""


class RegistryError(Exception):
    """Base class for device registry errors."""


class SchemaError(RegistryError):
    """Raised when the binding table could not be created."""


class BindingConflictError(RegistryError):
    """Raised when a write would bind two devices to the same port path."""


class BindingNotFoundError(RegistryError):
    """Raised when no binding matches a lookup."""


class SerializationError(RegistryError):
    """Raised when binding properties cannot be encoded or decoded."""


class StorageError(RegistryError):
    """Raised when the underlying store is unavailable or a query fails."""
