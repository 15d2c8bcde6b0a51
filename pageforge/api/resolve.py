"""Shared lookups for API endpoints."""

from fastapi import HTTPException

from ..exceptions import SessionNotFoundError
from ..repository import PageRepository
from ..sessions import EditorSession, session_manager


def resolve_session(session_id: str) -> EditorSession:
    """Resolve session_id, treating 'current' as the most recent session.

    Raises:
        HTTPException: If session not found or no active sessions.
    """
    try:
        return session_manager.require(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


def resolve_repository(session_id: str) -> PageRepository:
    """Resolve the document repository of a session."""
    return resolve_session(session_id).repository


def command_result(success: bool, repo: PageRepository, **extra) -> dict:
    """Build the response of a document command.

    Commands on missing targets are no-ops in the core, so they report
    ``success: false`` rather than an HTTP error.
    """
    result = {
        "success": success,
        "current_page_id": repo.current_page_id,
        "selected_element_id": repo.selected_element_id,
        "can_undo": repo.can_undo,
        "can_redo": repo.can_redo,
    }
    result.update(extra)
    return result
