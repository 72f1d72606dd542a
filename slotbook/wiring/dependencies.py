from functools import lru_cache
import logging

from slotbook.application.exceptions import BookingApiConfigError
from slotbook.application.ports.booking_api import BookingApiPort
from slotbook.application.ports.session_store import SessionStorePort
from slotbook.application.use_cases.admin import AdminUseCase
from slotbook.application.use_cases.booking import BookingUseCase
from slotbook.application.use_cases.build_catalog import SlotCatalogBuilder
from slotbook.application.use_cases.catalog_cache import CatalogCache
from slotbook.core.config import settings
from slotbook.infrastructure.http.booking_api_client import HttpBookingApi
from slotbook.infrastructure.http.mock_booking_api import MockBookingApi
from slotbook.infrastructure.store.memory_session_store import MemorySessionStore


@lru_cache
def get_booking_api() -> BookingApiPort:
    logger = logging.getLogger(__name__)
    if not settings.API_BASE_URL:
        if settings.ENV.lower() in {"dev", "local"}:
            logger.info("Using MockBookingApi (API_BASE_URL missing, ENV=dev/local)")
            return MockBookingApi()
        raise BookingApiConfigError("API_BASE_URL is required outside dev/local.")

    logger.info("Using HttpBookingApi base_url=%s", settings.API_BASE_URL)
    return HttpBookingApi()


@lru_cache
def get_session_store() -> SessionStorePort:
    return MemorySessionStore()


@lru_cache
def get_catalog_cache() -> CatalogCache:
    return CatalogCache(SlotCatalogBuilder(get_booking_api()))


def get_booking_use_case() -> BookingUseCase:
    return BookingUseCase(
        api=get_booking_api(),
        sessions=get_session_store(),
        cache=get_catalog_cache(),
    )


def get_admin_use_case() -> AdminUseCase:
    return AdminUseCase(
        api=get_booking_api(),
        sessions=get_session_store(),
        admin_email=settings.ADMIN_EMAIL,
    )


async def close_booking_api() -> None:
    # Only close an adapter that was actually created.
    if get_booking_api.cache_info().currsize:
        await get_booking_api().aclose()
        get_booking_api.cache_clear()
        get_catalog_cache.cache_clear()
