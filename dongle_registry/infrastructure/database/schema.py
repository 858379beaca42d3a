"""Idempotent creation of the binding table and its unique index."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from dongle_registry.domain.bindings.exceptions import SchemaError

from .base import Base
from .session import Database

logger = logging.getLogger(__name__)


def ensure_schema(database: Database) -> None:
    """Create the binding table if absent, all inside one transaction."""
    # Register the ORM tables on the metadata before creating them.
    from . import models  # noqa: F401

    try:
        with database.engine.begin() as conn:
            Base.metadata.create_all(conn, checkfirst=True)
    except SQLAlchemyError as exc:
        logger.error("Binding schema creation failed: %s", exc)
        raise SchemaError(str(exc)) from exc
    logger.info("Binding schema ready")
