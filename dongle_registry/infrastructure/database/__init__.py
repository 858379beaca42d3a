"""Database infrastructure helpers (engine, transactions, schema)."""

from .base import Base
from .schema import ensure_schema
from .session import Database

__all__ = ["Base", "Database", "ensure_schema"]
