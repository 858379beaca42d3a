"""Binding domain models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Optional

from .naming import PortNaming


@dataclass(slots=True)
class Binding:
    """One observation of a physical device (IMEI) at one serial port path."""

    physical_id: str
    subscriber_id: str
    port_path: str
    port_index: int
    is_symlinked: bool = False
    identity: str = ""
    properties: Optional[dict[str, str]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_port(
        cls,
        *,
        physical_id: str,
        subscriber_id: str,
        port_path: str,
        naming: PortNaming,
        is_symlinked: bool = False,
        identity: str = "",
        properties: Optional[dict[str, str]] = None,
    ) -> "Binding":
        return cls(
            physical_id=physical_id,
            subscriber_id=subscriber_id,
            port_path=port_path,
            port_index=naming.index_for(port_path),
            is_symlinked=is_symlinked,
            identity=identity,
            properties=properties,
        )

    def to_dict(self) -> dict[str, Any]:
        """Public JSON view; port index and timestamps are internal."""
        return {
            "imei": self.physical_id,
            "imsi": self.subscriber_id,
            "path": self.port_path,
            "symlink": self.is_symlinked,
            "ati": self.identity,
            "properties": dict(self.properties) if self.properties is not None else None,
        }


def canonical_key(binding: Binding) -> tuple[int, str]:
    return binding.port_index, binding.port_path


def sort_by_port_index(bindings: Iterable[Binding]) -> list[Binding]:
    return sorted(bindings, key=canonical_key)
