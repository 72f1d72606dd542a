from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from slotbook.application.ports.booking_api import BookingApiPort
from slotbook.application.ports.session_store import SessionStorePort
from slotbook.application.use_cases.catalog_cache import CatalogCache
from slotbook.application.use_cases.render_reservations import ReservationRenderer
from slotbook.domain.entities.catalog import CatalogSnapshot
from slotbook.domain.entities.display_record import DisplayRecord
from slotbook.domain.entities.fetch_result import FetchStatus

LOGIN_REQUIRED = "Connecte-toi"


@dataclass(frozen=True)
class ActionResult:
    ok: bool
    message: str
    error: str | None = None  # "validation", "forbidden" or "backend"

    @classmethod
    def success(cls, message: str) -> ActionResult:
        return cls(ok=True, message=message)

    @classmethod
    def invalid(cls, message: str) -> ActionResult:
        return cls(ok=False, message=message, error="validation")

    @classmethod
    def forbidden(cls, message: str) -> ActionResult:
        return cls(ok=False, message=message, error="forbidden")

    @classmethod
    def backend_failure(cls, message: str) -> ActionResult:
        return cls(ok=False, message=message, error="backend")


@dataclass(frozen=True)
class ReservationsView:
    status: FetchStatus
    records: list[DisplayRecord] = field(default_factory=list)
    message: str | None = None


class BookingUseCase:
    def __init__(
        self,
        api: BookingApiPort,
        sessions: SessionStorePort,
        cache: CatalogCache,
        renderer: ReservationRenderer | None = None,
    ) -> None:
        self._api = api
        self._sessions = sessions
        self._cache = cache
        self._renderer = renderer or ReservationRenderer()
        self._logger = logging.getLogger(__name__)

    def current_email(self, session_id: str | None) -> str:
        return self._sessions.get_email(session_id)

    async def login(self, session_id: str, email: str) -> ActionResult:
        email = (email or "").strip()
        if not email:
            return ActionResult.invalid("Entre un email")

        response = await self._api.login(email)
        if not response.ok:
            # Session keeps the email even when the backend rejects the login.
            self._logger.warning("Login call rejected", extra={"status": response.status})
        self._sessions.set_email(session_id, email)
        return ActionResult.success(email)

    async def book(self, session_id: str | None, slot_id: str) -> ActionResult:
        email = self.current_email(session_id)
        if not email:
            return ActionResult.invalid(LOGIN_REQUIRED)
        slot_id = (slot_id or "").strip()
        if not slot_id:
            return ActionResult.invalid("Slot ID requis")

        response = await self._api.create_reservation(email, slot_id)
        if not response.ok:
            return ActionResult.backend_failure(response.error_message("Erreur réservation"))
        return ActionResult.success(f"Réservation OK: {response.body_id()}")

    async def cancel(self, session_id: str | None, reservation_id: str) -> ActionResult:
        email = self.current_email(session_id)
        if not email:
            return ActionResult.invalid(LOGIN_REQUIRED)
        reservation_id = (reservation_id or "").strip()
        if not reservation_id:
            return ActionResult.invalid("Reservation ID requis")

        response = await self._api.cancel_reservation(email, reservation_id)
        if not response.ok:
            return ActionResult.backend_failure(response.error_message("Erreur annulation"))
        return ActionResult.success("Annulée")

    async def my_reservations(self, session_id: str | None) -> ReservationsView:
        email = self.current_email(session_id)
        if not email:
            return ReservationsView(status=FetchStatus.NOT_FETCHED, message=LOGIN_REQUIRED)

        result, catalog = await asyncio.gather(
            self._api.list_my_reservations(email),
            self._cache.ensure_catalog(),
        )
        if not result.ok:
            return ReservationsView(status=FetchStatus.FAILED, message=result.reason)
        return ReservationsView(status=FetchStatus.SUCCEEDED, records=self._renderer.render(result.data, catalog))

    async def services(self) -> CatalogSnapshot | None:
        return await self._cache.ensure_snapshot()

    async def reload_services(self) -> CatalogSnapshot | None:
        return await self._cache.reload()
