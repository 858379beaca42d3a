"""Collaborator-facing registry combining store, canonicalization and guard."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from dongle_registry.domain.bindings import (
    Binding,
    BindingRepository,
    CanonicalizationService,
    ExistenceGuard,
    PortNaming,
)
from dongle_registry.infrastructure.database import Database, ensure_schema
from dongle_registry.infrastructure.database.repositories import SqlBindingRepository


@dataclass(slots=True)
class DongleRegistry:
    database: Database
    repository: BindingRepository
    canonicalization: CanonicalizationService
    guard: ExistenceGuard

    @classmethod
    def with_database(
        cls,
        database: Database,
        *,
        port_path_for: Optional[Callable[[int], str]] = None,
        treat_storage_error_as_absent: bool = True,
    ) -> "DongleRegistry":
        repository = SqlBindingRepository(database)
        return cls(
            database=database,
            repository=repository,
            canonicalization=CanonicalizationService(
                repository, port_path_for or PortNaming().path_for
            ),
            guard=ExistenceGuard(
                repository,
                treat_storage_error_as_absent=treat_storage_error_as_absent,
            ),
        )

    def ensure_schema(self) -> None:
        ensure_schema(self.database)

    def insert(self, binding: Binding) -> Binding:
        return self.repository.insert(binding)

    def update(self, binding: Binding) -> Binding:
        return self.repository.update(binding)

    def delete(self, physical_id: str) -> int:
        return self.repository.delete(physical_id)

    def get_by_path(self, port_path: str) -> Binding:
        return self.repository.get_by_path(port_path)

    def get_by_physical_id(self, physical_id: str) -> Binding:
        return self.repository.get_by_physical_id(physical_id)

    def get_all(self) -> list[Binding]:
        return self.repository.get_all()

    def exists(self, binding: Binding) -> bool:
        return self.guard.exists(binding)

    def register(self, binding: Binding) -> bool:
        return self.guard.register(binding)

    def get_distinct_devices(self) -> list[Binding]:
        return self.canonicalization.get_distinct_devices()

    def get_canonical_port(self, physical_id: str) -> Binding:
        return self.canonicalization.get_canonical_port(physical_id)

    def close(self) -> None:
        self.database.dispose()

    def __enter__(self) -> "DongleRegistry":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
