from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Reservation:
    id: str
    slot_id: str | None = None  # weak reference, may be missing from the catalog
    created_at: str | None = None
