"""Persistence layer tracking USB modem dongles and their serial ports."""

__version__ = "0.1.0"

from dongle_registry.core.container import open_registry  # noqa: E402
from dongle_registry.domain.bindings import (  # noqa: E402
    Binding,
    BindingConflictError,
    BindingNotFoundError,
    PortNaming,
    RegistryError,
    SchemaError,
    SerializationError,
    StorageError,
)
from dongle_registry.registry import DongleRegistry  # noqa: E402

__all__ = [
    "__version__",
    "open_registry",
    "DongleRegistry",
    "Binding",
    "PortNaming",
    "RegistryError",
    "SchemaError",
    "BindingConflictError",
    "BindingNotFoundError",
    "SerializationError",
    "StorageError",
]
