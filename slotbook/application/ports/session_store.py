from abc import ABC, abstractmethod


class SessionStorePort(ABC):
    @abstractmethod
    def get_or_create(self, session_id: str | None) -> str:
        raise NotImplementedError

    @abstractmethod
    def get_email(self, session_id: str | None) -> str:
        """Return the stored email, or "" for an anonymous session."""
        raise NotImplementedError

    @abstractmethod
    def set_email(self, session_id: str, email: str) -> None:
        raise NotImplementedError
