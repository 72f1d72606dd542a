from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class FetchStatus(str, Enum):
    NOT_FETCHED = "not_fetched"
    FAILED = "failed"
    SUCCEEDED = "succeeded"


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of a remote read. FAILED and SUCCEEDED with empty data are distinct."""

    status: FetchStatus = FetchStatus.NOT_FETCHED
    data: T | None = None
    reason: str | None = None

    @classmethod
    def succeeded(cls, data: T) -> FetchResult[T]:
        return cls(status=FetchStatus.SUCCEEDED, data=data)

    @classmethod
    def failed(cls, reason: str) -> FetchResult[Any]:
        return cls(status=FetchStatus.FAILED, reason=reason)

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.SUCCEEDED


@dataclass(frozen=True)
class ApiResponse:
    ok: bool
    status: int
    body: Any = None

    def error_message(self, fallback: str) -> str:
        if isinstance(self.body, dict):
            error = self.body.get("error")
            if isinstance(error, str) and error.strip():
                return error
        return fallback

    def body_id(self) -> str:
        if isinstance(self.body, dict) and self.body.get("id") is not None:
            return str(self.body["id"])
        return ""
