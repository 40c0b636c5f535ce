"""Session store for the network transport.

Connections are tracked by a UUID4 session id for as long as they are
open.  The stdio path never touches this module.
"""

from __future__ import annotations

import threading
import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


class Session(BaseModel):
    """One open client connection."""

    model_config = ConfigDict(frozen=True)

    session_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    peer: str = ""
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class SessionStore:
    """Thread-safe map of session id to :class:`Session`."""

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions

    def create(self, peer: str = "") -> Session:
        """Create, register and return a new session."""
        session = Session(peer=peer)
        self.insert(session)
        return session

    def insert(self, session: Session) -> None:
        """Register *session*.

        Raises:
            KeyError: If a session with the same id is already registered.
        """
        with self._lock:
            if session.session_id in self._sessions:
                raise KeyError(f"Session already registered: {session.session_id}")
            self._sessions[session.session_id] = session

    def get(self, session_id: str) -> Session | None:
        with self._lock:
            return self._sessions.get(session_id)

    def remove(self, session_id: str) -> Session | None:
        """Unregister and return the session, or ``None`` if unknown."""
        with self._lock:
            return self._sessions.pop(session_id, None)

    def snapshot(self) -> list[Session]:
        """Snapshot of all open sessions, oldest first."""
        with self._lock:
            return list(self._sessions.values())
