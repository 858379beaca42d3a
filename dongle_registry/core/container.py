"""Wiring of the registry from settings."""

from __future__ import annotations

from typing import Optional

from dongle_registry.core.config import Settings, get_settings
from dongle_registry.domain.bindings import PortNaming
from dongle_registry.infrastructure.database import Database
from dongle_registry.registry import DongleRegistry


def open_registry(settings: Optional[Settings] = None) -> DongleRegistry:
    """Open the store, ensure the schema exists and return a ready registry.

    Schema failures raise :class:`~dongle_registry.domain.bindings.SchemaError`
    and leave nothing open behind.
    """
    settings = settings or get_settings()
    database = Database(settings.database, echo=settings.sql_echo)
    registry = DongleRegistry.with_database(
        database,
        port_path_for=PortNaming(settings.port_prefix).path_for,
        treat_storage_error_as_absent=settings.registry.treat_storage_error_as_absent,
    )
    try:
        registry.ensure_schema()
    except Exception:
        database.dispose()
        raise
    return registry


__all__ = ["open_registry"]
