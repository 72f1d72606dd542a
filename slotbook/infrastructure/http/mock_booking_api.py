from __future__ import annotations

import logging
from datetime import datetime, timezone

from slotbook.application.ports.booking_api import BookingApiPort
from slotbook.core.config import settings
from slotbook.domain.entities.fetch_result import ApiResponse, FetchResult
from slotbook.domain.entities.reservation import Reservation
from slotbook.domain.entities.service import Service, Slot


class MockBookingApi(BookingApiPort):
    """In-memory stand-in for the booking backend, used in dev and tests.

    ``failing_services`` makes ``list_slots`` fail for those ids and
    ``services_available = False`` makes ``list_services`` fail.
    ``calls`` records every read so callers can assert on fan-out.
    """

    def __init__(self, admin_email: str | None = None) -> None:
        self._admin_email = admin_email or settings.ADMIN_EMAIL
        self._services: dict[str, Service] = {}
        self._slots: dict[str, list[Slot]] = {}
        self._reservations: dict[str, tuple[str, Reservation]] = {}
        self._counter = 0
        self.failing_services: set[str] = set()
        self.services_available = True
        self.calls: list[str] = []
        self._logger = logging.getLogger(__name__)

    def add_service(self, service: Service, slots: list[Slot] | None = None) -> None:
        self._services[service.id] = service
        self._slots[service.id] = list(slots or [])

    async def list_services(self) -> FetchResult[list[Service]]:
        self.calls.append("/services")
        if not self.services_available:
            return FetchResult.failed("status_503")
        return FetchResult.succeeded(list(self._services.values()))

    async def list_slots(self, service_id: str) -> FetchResult[list[Slot]]:
        self.calls.append(f"/services/{service_id}/slots")
        if service_id in self.failing_services:
            return FetchResult.failed("status_500")
        if service_id not in self._slots:
            return FetchResult.failed("status_404")
        return FetchResult.succeeded(list(self._slots[service_id]))

    async def list_my_reservations(self, email: str) -> FetchResult[list[Reservation]]:
        self.calls.append("/reservations/me")
        if not email:
            return FetchResult.failed("status_401")
        return FetchResult.succeeded([r for owner, r in self._reservations.values() if owner == email])

    async def login(self, email: str) -> ApiResponse:
        if not email:
            return ApiResponse(ok=False, status=400, body={"error": "email required"})
        return ApiResponse(ok=True, status=200, body={"email": email})

    async def create_reservation(self, email: str, slot_id: str) -> ApiResponse:
        slot = self._find_slot(slot_id)
        if slot is None:
            return ApiResponse(ok=False, status=400, body={"error": "slot not found"})
        taken = sum(1 for _, r in self._reservations.values() if r.slot_id == slot_id)
        if taken >= slot.capacity:
            return ApiResponse(ok=False, status=400, body={"error": "slot full"})
        reservation = Reservation(id=self._next_id("r"), slot_id=slot_id, created_at=_now())
        self._reservations[reservation.id] = (email, reservation)
        self._logger.info("Mock reservation created", extra={"reservation_id": reservation.id})
        return ApiResponse(ok=True, status=201, body={"id": reservation.id})

    async def cancel_reservation(self, email: str, reservation_id: str) -> ApiResponse:
        owned = self._reservations.get(reservation_id)
        if owned is None or owned[0] != email:
            return ApiResponse(ok=False, status=400, body={"error": "reservation not found"})
        del self._reservations[reservation_id]
        return ApiResponse(ok=True, status=204, body=None)

    async def create_service(self, email: str, name: str, description: str, duration: int | float) -> ApiResponse:
        if email != self._admin_email:
            return ApiResponse(ok=False, status=403, body={"error": "admin only"})
        service = Service(id=self._next_id("s"), name=name, description=description or None, duration=duration)
        self.add_service(service)
        return ApiResponse(ok=True, status=201, body={"id": service.id})

    async def create_slot(self, email: str, service_id: str, datetime: str, capacity: int | float) -> ApiResponse:
        if email != self._admin_email:
            return ApiResponse(ok=False, status=403, body={"error": "admin only"})
        if service_id not in self._services:
            return ApiResponse(ok=False, status=400, body={"error": "service not found"})
        slot = Slot(id=self._next_id("sl"), datetime=datetime, capacity=capacity)
        self._slots[service_id].append(slot)
        return ApiResponse(ok=True, status=201, body={"id": slot.id})

    def _find_slot(self, slot_id: str) -> Slot | None:
        for slots in self._slots.values():
            for slot in slots:
                if slot.id == slot_id:
                    return slot
        return None

    def _next_id(self, prefix: str) -> str:
        # Seeded data may already use prefix+N ids.
        while True:
            self._counter += 1
            candidate = f"{prefix}{self._counter}"
            if not self._id_taken(candidate):
                return candidate

    def _id_taken(self, candidate: str) -> bool:
        return (
            candidate in self._services
            or candidate in self._reservations
            or self._find_slot(candidate) is not None
        )


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()
