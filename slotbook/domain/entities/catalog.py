from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from slotbook.domain.entities.service import Service


@dataclass(frozen=True)
class CatalogEntry:
    service_label: str
    datetime: str
    service_id: str = ""
    capacity: int | float = 0


Catalog = Mapping[str, CatalogEntry]

EMPTY_CATALOG: Catalog = MappingProxyType({})


@dataclass(frozen=True)
class CatalogSnapshot:
    """Services and the slot catalog built from them, published together."""

    services: tuple[Service, ...]
    catalog: Catalog
