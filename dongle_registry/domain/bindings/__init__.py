"""Domain layer utilities for device-port bindings."""

from .codec import decode_properties, encode_properties
from .exceptions import (
    BindingConflictError,
    BindingNotFoundError,
    RegistryError,
    SchemaError,
    SerializationError,
    StorageError,
)
from .guard import ExistenceGuard
from .models import Binding, sort_by_port_index
from .naming import PortNaming
from .repository import BindingRepository
from .service import CanonicalizationService, select_canonical

__all__ = [
    "Binding",
    "BindingRepository",
    "PortNaming",
    "CanonicalizationService",
    "ExistenceGuard",
    "select_canonical",
    "sort_by_port_index",
    "encode_properties",
    "decode_properties",
    "RegistryError",
    "SchemaError",
    "BindingConflictError",
    "BindingNotFoundError",
    "SerializationError",
    "StorageError",
]
