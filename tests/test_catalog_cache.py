"""
Tests for the catalog cache lifecycle (EMPTY -> POPULATED, reload, retry after failure).
"""

from __future__ import annotations

import asyncio

import pytest

from slotbook.application.use_cases.build_catalog import SlotCatalogBuilder
from slotbook.application.use_cases.catalog_cache import CacheState, CatalogCache
from slotbook.domain.entities.fetch_result import FetchStatus
from slotbook.domain.entities.service import Slot


def _slot_calls(api) -> int:
    return sum(1 for call in api.calls if call.endswith("/slots"))


@pytest.mark.asyncio
async def test_second_call_is_a_cache_hit(api):
    cache = CatalogCache(SlotCatalogBuilder(api))
    assert cache.state is CacheState.EMPTY
    assert cache.last_outcome is FetchStatus.NOT_FETCHED

    first = await cache.ensure_catalog()
    calls_after_first = len(api.calls)
    second = await cache.ensure_catalog()

    assert cache.state is CacheState.POPULATED
    assert cache.last_outcome is FetchStatus.SUCCEEDED
    assert dict(first) == dict(second)
    assert len(api.calls) == calls_after_first
    assert _slot_calls(api) == 2


@pytest.mark.asyncio
async def test_failed_build_is_not_cached(api):
    api.services_available = False
    cache = CatalogCache(SlotCatalogBuilder(api))

    catalog = await cache.ensure_catalog()

    assert dict(catalog) == {}
    assert cache.state is CacheState.EMPTY
    assert cache.last_outcome is FetchStatus.FAILED

    # Backend recovers: the next call retries the build.
    api.services_available = True
    catalog = await cache.ensure_catalog()

    assert set(catalog) == {"sl1", "sl2", "sl3"}
    assert cache.state is CacheState.POPULATED
    assert api.calls.count("/services") == 2


@pytest.mark.asyncio
async def test_cached_catalog_does_not_see_new_slots_until_reload(api):
    cache = CatalogCache(SlotCatalogBuilder(api))
    await cache.ensure_catalog()

    api._slots["s1"].append(Slot(id="sl9", datetime="2024-02-01T08:00", capacity=1))

    assert "sl9" not in await cache.ensure_catalog()
    reloaded = await cache.reload()
    assert "sl9" in reloaded.catalog
    assert "sl9" in await cache.ensure_catalog()


@pytest.mark.asyncio
async def test_failed_reload_leaves_cache_empty(api):
    cache = CatalogCache(SlotCatalogBuilder(api))
    await cache.ensure_catalog()

    api.services_available = False
    snapshot = await cache.reload()

    assert snapshot is None
    assert dict(await cache.ensure_catalog()) == {}
    assert cache.state is CacheState.EMPTY


@pytest.mark.asyncio
async def test_invalidate_returns_to_empty(api):
    cache = CatalogCache(SlotCatalogBuilder(api))
    await cache.ensure_snapshot()

    cache.invalidate()

    assert cache.state is CacheState.EMPTY


@pytest.mark.asyncio
async def test_overlapping_calls_each_build(api):
    """In-flight builds are not shared: two concurrent misses fan out twice."""
    cache = CatalogCache(SlotCatalogBuilder(api))

    a, b = await asyncio.gather(cache.ensure_catalog(), cache.ensure_catalog())

    assert dict(a) == dict(b)
    assert api.calls.count("/services") == 2
    assert _slot_calls(api) == 4
