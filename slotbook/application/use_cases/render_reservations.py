from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from slotbook.domain.entities.catalog import Catalog
from slotbook.domain.entities.display_record import DisplayRecord
from slotbook.domain.entities.reservation import Reservation

NO_RESERVATIONS = "Aucune réservation"
UNKNOWN_DATE = "Date inconnue"
UNKNOWN_SLOT = "inconnu"


def fallback_label(slot_id: str | None) -> str:
    return f"Créneau {slot_id or UNKNOWN_SLOT}"


def created_at_line(created_at: str | None) -> str | None:
    if not created_at:
        return None
    return f"Réservé le {created_at}"


class ReservationRenderer:
    """Joins reservations with the slot catalog into display records."""

    def render(self, reservations: Any, catalog: Catalog) -> list[DisplayRecord]:
        if not _is_collection(reservations) or len(reservations) == 0:
            return [DisplayRecord(reservation_id="", service_label=NO_RESERVATIONS, datetime="", placeholder=True)]

        records: list[DisplayRecord] = []
        for reservation in reservations:
            records.append(self._render_one(reservation, catalog))
        return records

    def _render_one(self, reservation: Reservation, catalog: Catalog) -> DisplayRecord:
        entry = catalog.get(reservation.slot_id) if reservation.slot_id else None
        if entry is not None:
            label, when = entry.service_label, entry.datetime
        else:
            label, when = fallback_label(reservation.slot_id), UNKNOWN_DATE

        return DisplayRecord(
            reservation_id=reservation.id,
            service_label=label,
            datetime=when,
            created_at_line=created_at_line(reservation.created_at),
        )


def _is_collection(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))
