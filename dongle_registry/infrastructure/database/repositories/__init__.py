"""SQLAlchemy-backed repository implementations."""

from .binding_repository import SqlBindingRepository

__all__ = ["SqlBindingRepository"]
