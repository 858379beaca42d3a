"""Canonical port selection across duplicated device-port bindings."""

from __future__ import annotations

import logging
from typing import Callable

from .exceptions import BindingNotFoundError
from .models import Binding, canonical_key
from .repository import BindingRepository

logger = logging.getLogger(__name__)


def select_canonical(bindings: list[Binding]) -> Binding:
    """Pick the binding with the lowest port index."""
    if not bindings:
        raise ValueError("cannot select a canonical binding from an empty group")
    return min(bindings, key=canonical_key)


class CanonicalizationService:
    """Answers which single binding represents each physical device.

    ``port_path_for`` maps a port index back to a port path using the host's
    naming convention.  Canonical selection is a snapshot: when a binding is
    removed between the aggregate lookup and the fetch, the fetch fails with
    :class:`BindingNotFoundError` and callers re-invoke for a fresh answer.
    """

    def __init__(self, repository: BindingRepository, port_path_for: Callable[[int], str]) -> None:
        self._repository = repository
        self._port_path_for = port_path_for

    def get_distinct_devices(self) -> list[Binding]:
        groups: dict[str, list[Binding]] = {}
        for binding in self._repository.get_all():
            groups.setdefault(binding.physical_id, []).append(binding)
        return [select_canonical(group) for group in groups.values()]

    def get_canonical_port(self, physical_id: str) -> Binding:
        port_index = self._repository.min_port_index(physical_id)
        if port_index is None:
            raise BindingNotFoundError(f"no bindings for device {physical_id}")
        port_path = self._port_path_for(port_index)
        logger.debug("Canonical port for %s is %s", physical_id, port_path)
        return self._repository.get_by_path(port_path)
