"""Session scratch state - per-session values carried between requests.

The checkout keeps the half-filled form here while the customer changes
country, so it can be redisplayed exactly as typed.
"""

from abc import ABC, abstractmethod
from typing import Any


class SessionStore(ABC):
    """Abstract interface for session-scoped key/value storage."""

    @abstractmethod
    def get(self, session_id: str, key: str) -> Any | None:
        ...

    @abstractmethod
    def set(self, session_id: str, key: str, value: Any) -> None:
        ...

    @abstractmethod
    def remove(self, session_id: str, key: str) -> None:
        ...


class InMemorySessionStore(SessionStore):
    """Session store that keeps values in process memory. Values are held by reference."""

    def __init__(self):
        self._sessions: dict[str, dict[str, Any]] = {}

    def get(self, session_id: str, key: str) -> Any | None:
        return self._sessions.get(session_id, {}).get(key)

    def set(self, session_id: str, key: str, value: Any) -> None:
        self._sessions.setdefault(session_id, {})[key] = value

    def remove(self, session_id: str, key: str) -> None:
        self._sessions.get(session_id, {}).pop(key, None)

    def reset(self):
        self._sessions.clear()


_current_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    """Return the current session store. Defaults to InMemorySessionStore."""
    global _current_store
    if _current_store is None:
        _current_store = InMemorySessionStore()
    return _current_store


def set_session_store(store: SessionStore) -> None:
    global _current_store
    _current_store = store


def reset_session_store() -> None:
    global _current_store
    _current_store = None
