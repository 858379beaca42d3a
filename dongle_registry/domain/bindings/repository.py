"""Repository protocol for binding persistence operations."""

from __future__ import annotations

from typing import Protocol

from .models import Binding


class BindingRepository(Protocol):
    def insert(self, binding: Binding) -> Binding:
        ...

    def update(self, binding: Binding) -> Binding:
        ...

    def delete(self, physical_id: str) -> int:
        ...

    def get_by_path(self, port_path: str) -> Binding:
        ...

    def get_by_physical_id(self, physical_id: str) -> Binding:
        ...

    def get_all(self) -> list[Binding]:
        ...

    def exists(self, binding: Binding) -> bool:
        ...

    def min_port_index(self, physical_id: str) -> int | None:
        ...
