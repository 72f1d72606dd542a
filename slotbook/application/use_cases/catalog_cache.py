from __future__ import annotations

import logging
from enum import Enum

from slotbook.application.use_cases.build_catalog import SlotCatalogBuilder
from slotbook.domain.entities.catalog import EMPTY_CATALOG, Catalog, CatalogSnapshot
from slotbook.domain.entities.fetch_result import FetchStatus


class CacheState(str, Enum):
    EMPTY = "empty"
    POPULATED = "populated"


class CatalogCache:
    """Holds the last successfully built catalog until an explicit reload.

    Overlapping calls while EMPTY each run their own build; in-flight builds
    are not shared.
    """

    def __init__(self, builder: SlotCatalogBuilder) -> None:
        self._builder = builder
        self._snapshot: CatalogSnapshot | None = None
        self._last_outcome = FetchStatus.NOT_FETCHED
        self._logger = logging.getLogger(__name__)

    @property
    def state(self) -> CacheState:
        return CacheState.POPULATED if self._snapshot is not None else CacheState.EMPTY

    @property
    def last_outcome(self) -> FetchStatus:
        return self._last_outcome

    async def ensure_snapshot(self) -> CatalogSnapshot | None:
        if self._snapshot is not None:
            return self._snapshot

        snapshot = await self._builder.build_snapshot()
        if snapshot is None:
            self._last_outcome = FetchStatus.FAILED
            self._logger.warning("Catalog build failed, cache left empty")
            return None

        self._last_outcome = FetchStatus.SUCCEEDED
        self._snapshot = snapshot
        return snapshot

    async def ensure_catalog(self) -> Catalog:
        snapshot = await self.ensure_snapshot()
        if snapshot is None:
            return EMPTY_CATALOG
        return snapshot.catalog

    def invalidate(self) -> None:
        self._snapshot = None

    async def reload(self) -> CatalogSnapshot | None:
        self.invalidate()
        return await self.ensure_snapshot()
