from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse

from slotbook.api.schemas import (
    ActionResponseSchema,
    BookRequestSchema,
    CreateServiceRequestSchema,
    CreateSlotRequestSchema,
    LoginRequestSchema,
    SessionSchema,
)
from slotbook.application.ports.session_store import SessionStorePort
from slotbook.application.use_cases.admin import AdminUseCase
from slotbook.application.use_cases.booking import ActionResult, BookingUseCase
from slotbook.application.utils.html_format import (
    escape_html,
    render_reservations_failure_html,
    render_reservations_html,
    render_services_html,
)
from slotbook.core.config import settings
from slotbook.domain.entities.fetch_result import FetchStatus
from slotbook.wiring.dependencies import get_admin_use_case, get_booking_use_case, get_session_store

router = APIRouter()
logger = logging.getLogger(__name__)

_ERROR_STATUS = {"validation": 400, "forbidden": 403, "backend": 502}


def _session_id(request: Request) -> str | None:
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def _action_response(result: ActionResult) -> JSONResponse:
    status_code = 200 if result.ok else _ERROR_STATUS.get(result.error or "", 400)
    payload = ActionResponseSchema(ok=result.ok, message=result.message)
    return JSONResponse(status_code=status_code, content=payload.model_dump())


@router.post("/session/login")
async def login(
    req: LoginRequestSchema,
    request: Request,
    uc: BookingUseCase = Depends(get_booking_use_case),
    sessions: SessionStorePort = Depends(get_session_store),
) -> Response:
    session_id = sessions.get_or_create(_session_id(request))
    response = _action_response(await uc.login(session_id, req.email))
    response.set_cookie(settings.SESSION_COOKIE_NAME, session_id, httponly=True, samesite="lax")
    return response


@router.get("/session", response_model=SessionSchema)
def current_session(request: Request, uc: BookingUseCase = Depends(get_booking_use_case)) -> SessionSchema:
    return SessionSchema(email=uc.current_email(_session_id(request)) or "aucun")


@router.get("/services", response_class=HTMLResponse)
async def services(uc: BookingUseCase = Depends(get_booking_use_case)) -> HTMLResponse:
    snapshot = await uc.services()
    return HTMLResponse(render_services_html(snapshot), status_code=200 if snapshot is not None else 502)


@router.post("/services/reload", response_class=HTMLResponse)
async def reload_services(uc: BookingUseCase = Depends(get_booking_use_case)) -> HTMLResponse:
    snapshot = await uc.reload_services()
    return HTMLResponse(render_services_html(snapshot), status_code=200 if snapshot is not None else 502)


@router.post("/reservations")
async def book(
    req: BookRequestSchema,
    request: Request,
    uc: BookingUseCase = Depends(get_booking_use_case),
) -> Response:
    return _action_response(await uc.book(_session_id(request), req.slot_id))


@router.get("/reservations/me", response_class=HTMLResponse)
async def my_reservations(request: Request, uc: BookingUseCase = Depends(get_booking_use_case)) -> HTMLResponse:
    view = await uc.my_reservations(_session_id(request))
    if view.status is FetchStatus.NOT_FETCHED:
        return HTMLResponse(f'<p class="error">{escape_html(view.message)}</p>', status_code=401)
    if view.status is FetchStatus.FAILED:
        logger.warning("Reservations fetch failed", extra={"reason": view.message})
        return HTMLResponse(render_reservations_failure_html(), status_code=502)
    return HTMLResponse(render_reservations_html(view.records))


@router.post("/reservations/{reservation_id}/cancel")
async def cancel(
    reservation_id: str,
    request: Request,
    uc: BookingUseCase = Depends(get_booking_use_case),
) -> Response:
    return _action_response(await uc.cancel(_session_id(request), reservation_id))


@router.post("/admin/services")
async def create_service(
    req: CreateServiceRequestSchema,
    request: Request,
    uc: AdminUseCase = Depends(get_admin_use_case),
) -> Response:
    result = await uc.create_service(_session_id(request), req.name, req.description, req.duration)
    return _action_response(result)


@router.post("/admin/services/{service_id}/slots")
async def create_slot(
    service_id: str,
    req: CreateSlotRequestSchema,
    request: Request,
    uc: AdminUseCase = Depends(get_admin_use_case),
) -> Response:
    result = await uc.create_slot(_session_id(request), service_id, req.datetime, req.capacity)
    return _action_response(result)
