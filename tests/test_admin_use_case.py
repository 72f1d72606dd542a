"""
Tests for admin-only service and slot management.
"""

from __future__ import annotations

import pytest

from slotbook.application.use_cases.admin import AdminUseCase

ADMIN = "admin@example.com"


def _login(sessions, email: str) -> str:
    session_id = sessions.get_or_create(None)
    sessions.set_email(session_id, email)
    return session_id


@pytest.mark.asyncio
async def test_non_admin_is_rejected(api, sessions):
    uc = AdminUseCase(api=api, sessions=sessions, admin_email=ADMIN)
    session_id = _login(sessions, "user@example.com")

    result = await uc.create_service(session_id, "Nails")

    assert result.ok is False
    assert result.error == "forbidden"
    assert result.message == "Action admin: connecte-toi en admin@example.com"


@pytest.mark.asyncio
async def test_create_service_requires_name(api, sessions):
    uc = AdminUseCase(api=api, sessions=sessions, admin_email=ADMIN)
    session_id = _login(sessions, ADMIN)

    result = await uc.create_service(session_id, "  ")

    assert result.message == "Nom requis"


@pytest.mark.asyncio
async def test_create_service_defaults_duration(api, sessions):
    uc = AdminUseCase(api=api, sessions=sessions, admin_email=ADMIN)
    session_id = _login(sessions, ADMIN)

    result = await uc.create_service(session_id, " Nails ", " Manucure ", duration=-5)

    assert result.ok is True
    service_id = result.message.removeprefix("Service créé: ")
    services = (await api.list_services()).data
    created = next(s for s in services if s.id == service_id)
    assert created.name == "Nails"
    assert created.description == "Manucure"
    assert created.duration == 0


@pytest.mark.asyncio
async def test_create_slot_validation_and_default_capacity(api, sessions):
    uc = AdminUseCase(api=api, sessions=sessions, admin_email=ADMIN)
    session_id = _login(sessions, ADMIN)

    missing = await uc.create_slot(session_id, "s1", "  ")
    assert missing.message == "Service ID + Datetime requis"

    result = await uc.create_slot(session_id, "s1", "2024-03-01T10:00", capacity=None)
    assert result.ok is True
    assert result.message.endswith("\nCopie cet ID pour réserver.")

    slots = (await api.list_slots("s1")).data
    assert slots[-1].datetime == "2024-03-01T10:00"
    assert slots[-1].capacity == 1


@pytest.mark.asyncio
async def test_create_slot_surfaces_server_error(api, sessions):
    uc = AdminUseCase(api=api, sessions=sessions, admin_email=ADMIN)
    session_id = _login(sessions, ADMIN)

    result = await uc.create_slot(session_id, "nope", "2024-03-01T10:00", capacity=2)

    assert result.ok is False
    assert result.error == "backend"
    assert result.message == "service not found"
