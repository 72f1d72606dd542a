from __future__ import annotations

import pytest

from slotbook.domain.entities.service import Service, Slot
from slotbook.infrastructure.http.mock_booking_api import MockBookingApi
from slotbook.infrastructure.store.memory_session_store import MemorySessionStore

ADMIN = "admin@example.com"


@pytest.fixture
def api() -> MockBookingApi:
    backend = MockBookingApi(admin_email=ADMIN)
    backend.add_service(
        Service(id="s1", name="Haircut", description=""),
        [Slot(id="sl1", datetime="2024-01-01T10:00", capacity=2)],
    )
    backend.add_service(
        Service(id="s2", name="Massage", description="60 min", duration=60),
        [
            Slot(id="sl2", datetime="2024-01-02T09:00", capacity=1),
            Slot(id="sl3", datetime="2024-01-02T11:00", capacity=1),
        ],
    )
    return backend


@pytest.fixture
def sessions() -> MemorySessionStore:
    return MemorySessionStore()
