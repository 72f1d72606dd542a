"""HTML fragments for the services and reservations views.

Every value that came from the backend goes through ``escape_html`` before it
is embedded.
"""

from __future__ import annotations

import html
from collections import defaultdict
from typing import Any, Sequence

from slotbook.domain.entities.catalog import CatalogEntry, CatalogSnapshot
from slotbook.domain.entities.display_record import DisplayRecord

SERVICES_UNAVAILABLE = "Impossible de charger les services"
NO_SERVICES = "Aucun service disponible"
NO_SLOTS = "Aucun créneau"
RESERVATIONS_UNAVAILABLE = "Impossible de charger vos réservations"


def escape_html(value: Any) -> str:
    """Escape & < > " ' so the value is inert inside markup or attributes."""
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def render_reservations_html(records: Sequence[DisplayRecord]) -> str:
    items: list[str] = []
    for record in records:
        if record.placeholder:
            items.append(f'<li class="empty">{escape_html(record.service_label)}</li>')
            continue
        lines = [
            f"<strong>{escape_html(record.service_label)}</strong>",
            f'<span class="when">{escape_html(record.datetime)}</span>',
            f'<code class="id">{escape_html(record.reservation_id)}</code>',
        ]
        if record.created_at_line:
            lines.append(f'<small class="created">{escape_html(record.created_at_line)}</small>')
        items.append(f'<li data-reservation-id="{escape_html(record.reservation_id)}">{"".join(lines)}</li>')
    return f'<ul class="reservations">{"".join(items)}</ul>'


def render_services_html(snapshot: CatalogSnapshot | None) -> str:
    if snapshot is None:
        return f'<p class="error">{escape_html(SERVICES_UNAVAILABLE)}</p>'
    if not snapshot.services:
        return f'<p class="empty">{escape_html(NO_SERVICES)}</p>'

    slots_by_service: dict[str, list[tuple[str, CatalogEntry]]] = defaultdict(list)
    for slot_id, entry in snapshot.catalog.items():
        slots_by_service[entry.service_id].append((slot_id, entry))

    sections: list[str] = []
    for service in snapshot.services:
        slots = slots_by_service.get(service.id, [])
        if slots:
            slot_items = "".join(
                f'<li data-slot-id="{escape_html(slot_id)}">'
                f'<span class="when">{escape_html(entry.datetime)}</span> '
                f'<span class="capacity">Places: {escape_html(entry.capacity)}</span> '
                f'<code class="id">{escape_html(slot_id)}</code></li>'
                for slot_id, entry in slots
            )
            body = f'<ul class="slots">{slot_items}</ul>'
        else:
            body = f'<p class="empty">{escape_html(NO_SLOTS)}</p>'
        sections.append(
            f'<section class="service" data-service-id="{escape_html(service.id)}">'
            f"<h3>{escape_html(service.label)}</h3>"
            f'<code class="id">{escape_html(service.id)}</code>{body}</section>'
        )
    return "".join(sections)


def render_reservations_failure_html() -> str:
    return f'<p class="error">{escape_html(RESERVATIONS_UNAVAILABLE)}</p>'
