from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Service:
    id: str
    name: str
    description: str | None = None
    duration: int | float = 0

    @property
    def label(self) -> str:
        if self.description:
            return f"{self.name} ({self.description})"
        return self.name


@dataclass(frozen=True)
class Slot:
    id: str
    datetime: str = ""  # raw value from the backend, "" when unknown
    capacity: int | float = 0
