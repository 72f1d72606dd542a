#!/usr/bin/env python3
"""
Interactive local harness for the booking flow (no HTTP server).

Usage:
  python3 scripts/browse_local.py

Uses the project wiring, so API_BASE_URL selects the real backend and an
empty value in ENV=dev falls back to the in-memory one.
Commands: login <email>, services, reload, book <slot_id>, me,
cancel <reservation_id>, service <name>, slot <service_id> <datetime> [capacity], quit
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slotbook.domain.entities.catalog import CatalogSnapshot  # noqa: E402
from slotbook.domain.entities.fetch_result import FetchStatus  # noqa: E402
from slotbook.wiring.dependencies import (  # noqa: E402
    get_admin_use_case,
    get_booking_use_case,
    get_session_store,
)


def _print_services(snapshot: CatalogSnapshot | None) -> None:
    if snapshot is None:
        print("Impossible de charger les services")
        return
    for service in snapshot.services:
        print(f"[{service.id}] {service.label}")
        for slot_id, entry in snapshot.catalog.items():
            if entry.service_id == service.id:
                print(f"    {slot_id}  {entry.datetime}  places={entry.capacity}")


async def main() -> None:
    booking = get_booking_use_case()
    admin = get_admin_use_case()
    session_id = get_session_store().get_or_create(None)

    print("Local booking harness. Type 'help' for commands.")
    while True:
        try:
            line = input(f"{booking.current_email(session_id) or 'aucun'}> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not line:
            continue
        command, _, rest = line.partition(" ")
        args = rest.split()

        if command in {"quit", "exit"}:
            break
        if command == "help":
            print(__doc__)
        elif command == "login":
            print((await booking.login(session_id, rest)).message)
        elif command == "services":
            _print_services(await booking.services())
        elif command == "reload":
            _print_services(await booking.reload_services())
        elif command == "book":
            print((await booking.book(session_id, rest)).message)
        elif command == "cancel":
            print((await booking.cancel(session_id, rest)).message)
        elif command == "me":
            view = await booking.my_reservations(session_id)
            if view.status is not FetchStatus.SUCCEEDED:
                print(view.message or "Impossible de charger vos réservations")
                continue
            for record in view.records:
                print(f"- {record.service_label}  {record.datetime}  {record.reservation_id}")
                if record.created_at_line:
                    print(f"    {record.created_at_line}")
        elif command == "service":
            print((await admin.create_service(session_id, rest)).message)
        elif command == "slot" and len(args) >= 2:
            capacity = int(args[2]) if len(args) > 2 and args[2].isdigit() else None
            print((await admin.create_slot(session_id, args[0], args[1], capacity)).message)
        else:
            print("Unknown command, type 'help'.")


if __name__ == "__main__":
    asyncio.run(main())
