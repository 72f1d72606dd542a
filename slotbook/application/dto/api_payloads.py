from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from slotbook.domain.entities.reservation import Reservation
from slotbook.domain.entities.service import Service, Slot

logger = logging.getLogger(__name__)

_DTO = TypeVar("_DTO", bound=BaseModel)


class ServiceDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str
    description: str | None = None
    duration: int | float = 0

    def to_entity(self) -> Service:
        return Service(
            id=self.id,
            name=self.name,
            description=self.description or None,
            duration=self.duration,
        )


class SlotDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    datetime: str | None = None
    capacity: int | float = 0
    service_id: str | None = Field(default=None, alias="serviceId")

    def to_entity(self) -> Slot:
        return Slot(id=self.id, datetime=self.datetime or "", capacity=self.capacity)


class ReservationDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    slot_id: str | None = Field(default=None, alias="slotId")
    created_at: str | None = Field(default=None, alias="createdAt")
    user_email: str | None = Field(default=None, alias="userEmail")

    def to_entity(self) -> Reservation:
        return Reservation(id=self.id, slot_id=self.slot_id or None, created_at=self.created_at or None)


class MalformedCollectionError(ValueError):
    """Raised when a collection endpoint answers with something other than a list."""


def _parse_items(payload: Any, dto_type: type[_DTO], kind: str) -> list[_DTO]:
    if not isinstance(payload, list):
        raise MalformedCollectionError(f"expected a list of {kind}, got {type(payload).__name__}")

    items: list[_DTO] = []
    for index, item in enumerate(payload):
        try:
            items.append(dto_type.model_validate(item))
        except ValidationError as exc:
            logger.warning(
                "Skipping malformed item",
                extra={"reason": f"{kind}[{index}]", "error": str(exc)},
            )
    return items


def parse_services(payload: Any) -> list[Service]:
    """Raises MalformedCollectionError when payload is not a list; invalid items are skipped."""
    return [dto.to_entity() for dto in _parse_items(payload, ServiceDTO, "services")]


def parse_slots(payload: Any) -> list[Slot]:
    return [dto.to_entity() for dto in _parse_items(payload, SlotDTO, "slots")]


def parse_reservations(payload: Any) -> list[Reservation]:
    return [dto.to_entity() for dto in _parse_items(payload, ReservationDTO, "reservations")]
