"""Session manager for tracking active editor sessions."""

import logging
import uuid
from datetime import datetime, timedelta
from typing import Optional

from pageforge.config import settings
from pageforge.exceptions import SessionNotFoundError
from pageforge.repository import PageRepository

from .models import EditorSession

logger = logging.getLogger(__name__)


class SessionManager:
    """Manages all active editor sessions."""

    def __init__(self, session_timeout_seconds: Optional[float] = None):
        self._sessions: dict[str, EditorSession] = {}
        if session_timeout_seconds is None:
            session_timeout_seconds = settings.SESSION_TIMEOUT_SECONDS
        self._session_timeout = timedelta(seconds=session_timeout_seconds)

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self, session_id: Optional[str] = None) -> EditorSession:
        """Register a new session or return the existing one with that id."""
        if session_id and session_id in self._sessions:
            session = self._sessions[session_id]
            session.update_activity()
            return session

        session = EditorSession(
            id=session_id or str(uuid.uuid4()),
            repository=PageRepository(),
        )
        self._sessions[session.id] = session
        logger.info("Registered new session: %s, total sessions: %d", session.id, len(self._sessions))
        return session

    def unregister(self, session_id: str) -> bool:
        """Remove a session."""
        if session_id in self._sessions:
            del self._sessions[session_id]
            return True
        return False

    def get(self, session_id: str) -> Optional[EditorSession]:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def require(self, session_id: str) -> EditorSession:
        """Get a session by ID, treating 'current' as the most recent session.

        Raises:
            SessionNotFoundError: If the session does not exist.
        """
        if session_id == "current":
            session = self.get_most_recent()
            if session is None:
                raise SessionNotFoundError("No active sessions")
        else:
            session = self.get(session_id)
            if session is None:
                raise SessionNotFoundError(f"Session '{session_id}' not found")
        session.update_activity()
        return session

    def get_all(self) -> list[EditorSession]:
        """Get all active sessions, sorted by most recent activity first."""
        sessions = list(self._sessions.values())
        sessions.sort(key=lambda s: s.last_activity, reverse=True)
        return sessions

    def get_most_recent(self) -> Optional[EditorSession]:
        """Get the most recently active session."""
        sessions = self.get_all()
        return sessions[0] if sessions else None

    def heartbeat(self, session_id: str) -> bool:
        """Update session activity timestamp.

        Args:
            session_id: The session ID

        Returns:
            True if session exists, False otherwise
        """
        self.cleanup_inactive()

        session = self._sessions.get(session_id)
        if session:
            session.update_activity()
            return True
        return False

    def cleanup_inactive(self) -> int:
        """Remove sessions that have been inactive too long.

        Returns:
            Number of sessions removed
        """
        now = datetime.now()
        inactive = [
            sid
            for sid, session in self._sessions.items()
            if now - session.last_activity > self._session_timeout
        ]

        for sid in inactive:
            logger.info("Removing inactive session: %s", sid)
            del self._sessions[sid]

        return len(inactive)


# Global singleton instance
session_manager = SessionManager()
