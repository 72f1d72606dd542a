"""HTTP adapter for the booking backend REST API."""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar
from urllib.parse import quote

import httpx

from slotbook.application.dto.api_payloads import (
    MalformedCollectionError,
    parse_reservations,
    parse_services,
    parse_slots,
)
from slotbook.application.ports.booking_api import BookingApiPort
from slotbook.core.config import settings
from slotbook.domain.entities.fetch_result import ApiResponse, FetchResult
from slotbook.domain.entities.reservation import Reservation
from slotbook.domain.entities.service import Service, Slot

T = TypeVar("T")

EMAIL_HEADER = "X-User-Email"

logger = logging.getLogger(__name__)


class HttpBookingApi(BookingApiPort):
    """Gateway to the booking backend.

    Reads never raise: transport errors, non-2xx statuses and undecodable
    bodies all come back as ``FetchResult.failed``. Mutations return an
    ``ApiResponse`` so callers can surface the server's ``{"error": ...}``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url if base_url is not None else settings.API_BASE_URL
        self.http = http or httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout if timeout is not None else settings.HTTP_TIMEOUT_SECONDS,
        )

    async def aclose(self) -> None:
        await self.http.aclose()

    async def fetch_resource(self, path: str, email: str | None = None) -> FetchResult[Any]:
        try:
            response = await self.http.get(path, headers=_identity_headers(email))
        except httpx.HTTPError as exc:
            logger.warning("Backend request failed", extra={"path": path, "error": str(exc)})
            return FetchResult.failed(f"transport_error: {exc}")

        if not response.is_success:
            logger.warning("Backend returned error status", extra={"path": path, "status": response.status_code})
            return FetchResult.failed(f"status_{response.status_code}")

        try:
            return FetchResult.succeeded(response.json())
        except ValueError:
            logger.warning("Backend returned undecodable body", extra={"path": path, "status": response.status_code})
            return FetchResult.failed("decode_error")

    async def send(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
        email: str | None = None,
    ) -> ApiResponse:
        try:
            response = await self.http.request(method, path, json=payload, headers=_identity_headers(email))
        except httpx.HTTPError as exc:
            logger.warning("Backend request failed", extra={"path": path, "error": str(exc)})
            return ApiResponse(ok=False, status=0, body=None)

        try:
            body = response.json()
        except ValueError:
            body = None

        if not response.is_success:
            logger.info("Backend rejected request", extra={"path": path, "status": response.status_code})
        return ApiResponse(ok=response.is_success, status=response.status_code, body=body)

    async def list_services(self) -> FetchResult[list[Service]]:
        return _decode(await self.fetch_resource("/services"), parse_services, "/services")

    async def list_slots(self, service_id: str) -> FetchResult[list[Slot]]:
        path = f"/services/{_segment(service_id)}/slots"
        return _decode(await self.fetch_resource(path), parse_slots, path)

    async def list_my_reservations(self, email: str) -> FetchResult[list[Reservation]]:
        path = "/reservations/me"
        return _decode(await self.fetch_resource(path, email=email), parse_reservations, path)

    async def login(self, email: str) -> ApiResponse:
        return await self.send("POST", "/auth/login", {"email": email})

    async def create_reservation(self, email: str, slot_id: str) -> ApiResponse:
        return await self.send("POST", "/reservations", {"slotId": slot_id}, email=email)

    async def cancel_reservation(self, email: str, reservation_id: str) -> ApiResponse:
        return await self.send("DELETE", f"/reservations/{_segment(reservation_id)}", email=email)

    async def create_service(self, email: str, name: str, description: str, duration: int | float) -> ApiResponse:
        payload = {"name": name, "description": description, "duration": duration}
        return await self.send("POST", "/admin/services", payload, email=email)

    async def create_slot(self, email: str, service_id: str, datetime: str, capacity: int | float) -> ApiResponse:
        payload = {"datetime": datetime, "capacity": capacity}
        return await self.send("POST", f"/admin/services/{_segment(service_id)}/slots", payload, email=email)


def _identity_headers(email: str | None) -> dict[str, str]:
    if email:
        return {EMAIL_HEADER: email}
    return {}


def _segment(value: str) -> str:
    return quote(value, safe="")


def _decode(result: FetchResult[Any], parse: Callable[[Any], T], path: str) -> FetchResult[T]:
    if not result.ok:
        return result
    try:
        return FetchResult.succeeded(parse(result.data))
    except MalformedCollectionError as exc:
        logger.warning("Backend returned malformed collection", extra={"path": path, "error": str(exc)})
        return FetchResult.failed("malformed_collection")
