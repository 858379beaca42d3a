"""Host port naming convention: a path prefix followed by the port index."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PortNaming:
    prefix: str = "/dev/ttyUSB"

    def path_for(self, index: int) -> str:
        if index < 0:
            raise ValueError(f"port index must be non-negative: {index}")
        return f"{self.prefix}{index}"

    def index_for(self, path: str) -> int:
        """Extract the numeric suffix of ``path``."""
        if not path.startswith(self.prefix):
            raise ValueError(f"{path!r} does not start with {self.prefix!r}")
        suffix = path[len(self.prefix) :]
        if not (suffix.isascii() and suffix.isdigit()):
            raise ValueError(f"{path!r} has no numeric port suffix")
        return int(suffix)
