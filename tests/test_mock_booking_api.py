"""
Tests for the in-memory backend used in dev and in the other suites.
"""

from __future__ import annotations

import pytest

ADMIN = "admin@example.com"


@pytest.mark.asyncio
async def test_created_ids_do_not_collide_with_seeded_data(api):
    service = await api.create_service(ADMIN, "Nails", "", 45)
    slot = await api.create_slot(ADMIN, "s1", "2024-03-01T10:00", 1)

    assert service.body_id() not in {"s1", "s2"}
    assert slot.body_id() not in {"sl1", "sl2", "sl3"}

    services = (await api.list_services()).data
    assert [s.name for s in services] == ["Haircut", "Massage", "Nails"]
    # Seeded slots of s1 survive, the new slot is appended.
    assert [s.id for s in (await api.list_slots("s1")).data] == ["sl1", slot.body_id()]


@pytest.mark.asyncio
async def test_each_created_id_is_unique(api):
    ids = {(await api.create_service(ADMIN, f"Service {i}", "", 10)).body_id() for i in range(5)}

    assert len(ids) == 5
