"""Advisory duplicate check performed before inserting an observation."""

from __future__ import annotations

import logging

from .exceptions import StorageError
from .models import Binding
from .repository import BindingRepository

logger = logging.getLogger(__name__)


class ExistenceGuard:
    """Lets enumeration skip redundant inserts.

    The unique index on the port path remains the integrity backstop; this
    check only avoids provoking it.  With ``treat_storage_error_as_absent``
    enabled, a failing store answers "not recorded" so callers lean towards
    re-inserting instead of crashing.
    """

    def __init__(
        self,
        repository: BindingRepository,
        *,
        treat_storage_error_as_absent: bool = True,
    ) -> None:
        self._repository = repository
        self.treat_storage_error_as_absent = treat_storage_error_as_absent

    def exists(self, binding: Binding) -> bool:
        try:
            return self._repository.exists(binding)
        except StorageError as exc:
            if not self.treat_storage_error_as_absent:
                raise
            logger.error("Existence check for %s at %s failed: %s", binding.physical_id, binding.port_path, exc)
            return False

    def register(self, binding: Binding) -> bool:
        """Insert ``binding`` unless the same observation is already stored.

        Returns ``True`` when a row was written.
        """
        if self.exists(binding):
            logger.debug("Binding %s at %s already recorded", binding.physical_id, binding.port_path)
            return False
        self._repository.insert(binding)
        return True
