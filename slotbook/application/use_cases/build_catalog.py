from __future__ import annotations

import asyncio
import logging
from types import MappingProxyType
from typing import Sequence

from slotbook.application.ports.booking_api import BookingApiPort
from slotbook.domain.entities.catalog import Catalog, CatalogEntry, CatalogSnapshot
from slotbook.domain.entities.fetch_result import FetchResult
from slotbook.domain.entities.service import Service, Slot


class SlotCatalogBuilder:
    """Fans out slot reads across services and indexes the result by slot id."""

    def __init__(self, api: BookingApiPort) -> None:
        self._api = api
        self._logger = logging.getLogger(__name__)

    async def build_snapshot(self) -> CatalogSnapshot | None:
        """Fetch services then their slots. Returns None when the services read fails."""
        services_result = await self._api.list_services()
        if not services_result.ok or services_result.data is None:
            self._logger.warning("Service list unavailable", extra={"reason": services_result.reason})
            return None

        services = tuple(services_result.data)
        catalog = await self.build(services)
        return CatalogSnapshot(services=services, catalog=catalog)

    async def build(self, services: Sequence[Service]) -> Catalog:
        slots_by_service = await self.collect_slots(services)
        return self.project(services, slots_by_service)

    async def collect_slots(self, services: Sequence[Service]) -> dict[str, list[Slot]]:
        # Every request settles before we return; one failure never cancels the others.
        results = await asyncio.gather(*(self._fetch_slots(service.id) for service in services))

        slots_by_service: dict[str, list[Slot]] = {}
        for service, result in zip(services, results):
            if result.ok and result.data is not None:
                slots_by_service[service.id] = list(result.data)
            else:
                self._logger.warning(
                    "Slot fetch failed, service shown without slots",
                    extra={"service_id": service.id, "reason": result.reason},
                )
                slots_by_service[service.id] = []
        return slots_by_service

    def project(self, services: Sequence[Service], slots_by_service: dict[str, list[Slot]]) -> Catalog:
        entries: dict[str, CatalogEntry] = {}
        for service in services:
            for slot in slots_by_service.get(service.id, []):
                entries[slot.id] = CatalogEntry(
                    service_label=service.label,
                    datetime=slot.datetime or "",
                    service_id=service.id,
                    capacity=slot.capacity,
                )
        self._logger.info("Slot catalog built", extra={"slot_count": len(entries)})
        return MappingProxyType(entries)

    async def _fetch_slots(self, service_id: str) -> FetchResult[list[Slot]]:
        try:
            return await self._api.list_slots(service_id)
        except Exception as e:
            return FetchResult.failed(f"unexpected_error: {e}")
