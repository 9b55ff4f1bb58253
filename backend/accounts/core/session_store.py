"""Session Store — in-memory map from opaque session id to the logged-in user.

Invariants:
    - Session ids are random UUID4 strings; knowing one user's id reveals nothing about another's
    - Stored values are immutable snapshots, never ORM instances bound to a DB session
    - Every read and write holds the lock (uvicorn may run sync code in a thread pool)
    - No expiry and no capacity bound; entries leave only through discard()

Design Decisions:
    - Process-local dict: sessions are lost on restart and not shared between workers
    - Exposed through get_session_store() so tests can inject a fresh store
"""

import threading
import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class SessionUser:
    """User fields echoed back by GET /auth."""
    id: str = ""
    login: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""


class SessionStore:
    """Thread-safe session table."""

    def __init__(self) -> None:
        self._sessions: dict[str, SessionUser] = {}
        self._lock = threading.Lock()

    def create(self, user: SessionUser) -> str:
        session_id = str(uuid.uuid4())
        with self._lock:
            self._sessions[session_id] = user
        return session_id

    def get(self, session_id: str) -> SessionUser | None:
        with self._lock:
            return self._sessions.get(session_id)

    def discard(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


_store = SessionStore()


def get_session_store() -> SessionStore:
    """FastAPI dependency for the process-wide session store."""
    return _store
