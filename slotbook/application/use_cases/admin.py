from __future__ import annotations

import logging

from slotbook.application.ports.booking_api import BookingApiPort
from slotbook.application.ports.session_store import SessionStorePort
from slotbook.application.use_cases.booking import ActionResult


class AdminUseCase:
    """Service and slot management, gated client-side on the admin email."""

    def __init__(self, api: BookingApiPort, sessions: SessionStorePort, admin_email: str) -> None:
        self._api = api
        self._sessions = sessions
        self._admin_email = admin_email
        self._logger = logging.getLogger(__name__)

    def _admin_identity(self, session_id: str | None) -> str | None:
        email = self._sessions.get_email(session_id)
        return email if email == self._admin_email else None

    def _forbidden(self) -> ActionResult:
        return ActionResult.forbidden(f"Action admin: connecte-toi en {self._admin_email}")

    async def create_service(
        self,
        session_id: str | None,
        name: str,
        description: str | None = None,
        duration: int | float | None = None,
    ) -> ActionResult:
        email = self._admin_identity(session_id)
        if email is None:
            return self._forbidden()
        name = (name or "").strip()
        if not name:
            return ActionResult.invalid("Nom requis")

        response = await self._api.create_service(
            email,
            name=name,
            description=(description or "").strip(),
            duration=duration if duration and duration > 0 else 0,
        )
        if not response.ok:
            return ActionResult.backend_failure(response.error_message("Erreur"))
        self._logger.info("Service created", extra={"service_id": response.body_id()})
        return ActionResult.success(f"Service créé: {response.body_id()}")

    async def create_slot(
        self,
        session_id: str | None,
        service_id: str,
        datetime: str,
        capacity: int | float | None = None,
    ) -> ActionResult:
        email = self._admin_identity(session_id)
        if email is None:
            return self._forbidden()
        service_id = (service_id or "").strip()
        datetime = (datetime or "").strip()
        if not service_id or not datetime:
            return ActionResult.invalid("Service ID + Datetime requis")

        response = await self._api.create_slot(
            email,
            service_id=service_id,
            datetime=datetime,
            capacity=capacity if capacity and capacity > 0 else 1,
        )
        if not response.ok:
            return ActionResult.backend_failure(response.error_message("Erreur"))
        self._logger.info("Slot created", extra={"service_id": service_id})
        return ActionResult.success(f"Créneau ajouté. Slot ID: {response.body_id()}\nCopie cet ID pour réserver.")
