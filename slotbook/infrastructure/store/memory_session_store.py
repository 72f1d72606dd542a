from __future__ import annotations

from uuid import uuid4

from slotbook.application.ports.session_store import SessionStorePort


class MemorySessionStore(SessionStorePort):
    def __init__(self) -> None:
        self._emails: dict[str, str] = {}

    def get_or_create(self, session_id: str | None) -> str:
        if session_id and session_id in self._emails:
            return session_id
        # Ids the store never issued are replaced.
        new_id = uuid4().hex
        self._emails[new_id] = ""
        return new_id

    def get_email(self, session_id: str | None) -> str:
        if not session_id:
            return ""
        return self._emails.get(session_id, "")

    def set_email(self, session_id: str, email: str) -> None:
        self._emails[session_id] = email or ""
