from __future__ import annotations

from abc import ABC, abstractmethod

from slotbook.domain.entities.fetch_result import ApiResponse, FetchResult
from slotbook.domain.entities.reservation import Reservation
from slotbook.domain.entities.service import Service, Slot


class BookingApiPort(ABC):
    async def aclose(self) -> None:
        """Release transport resources. Adapters without any keep this no-op."""
        return None

    @abstractmethod
    async def list_services(self) -> FetchResult[list[Service]]:
        """GET /services."""
        raise NotImplementedError

    @abstractmethod
    async def list_slots(self, service_id: str) -> FetchResult[list[Slot]]:
        """GET /services/{id}/slots."""
        raise NotImplementedError

    @abstractmethod
    async def list_my_reservations(self, email: str) -> FetchResult[list[Reservation]]:
        """GET /reservations/me for the given identity."""
        raise NotImplementedError

    @abstractmethod
    async def login(self, email: str) -> ApiResponse:
        raise NotImplementedError

    @abstractmethod
    async def create_reservation(self, email: str, slot_id: str) -> ApiResponse:
        raise NotImplementedError

    @abstractmethod
    async def cancel_reservation(self, email: str, reservation_id: str) -> ApiResponse:
        raise NotImplementedError

    @abstractmethod
    async def create_service(self, email: str, name: str, description: str, duration: int | float) -> ApiResponse:
        raise NotImplementedError

    @abstractmethod
    async def create_slot(self, email: str, service_id: str, datetime: str, capacity: int | float) -> ApiResponse:
        raise NotImplementedError
