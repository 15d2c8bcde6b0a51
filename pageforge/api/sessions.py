"""Session management API endpoints.

Session-level operations use the URL pattern:
/api/sessions/{session}/...

Use 'current' as the session id to address the most recently active session.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..sessions import session_manager
from .resolve import resolve_session

router = APIRouter(prefix="/sessions", tags=["sessions"])


class SessionCreateRequest(BaseModel):
    """Request body for creating a session."""

    session_id: Optional[str] = None


@router.get("")
async def list_sessions() -> dict:
    """List all active editor sessions, sorted by most recent activity first."""
    sessions = session_manager.get_all()
    return {"sessions": [s.to_summary() for s in sessions]}


@router.post("")
async def create_session(request: Optional[SessionCreateRequest] = None) -> dict:
    """Create a new session with an empty document."""
    session = session_manager.create(request.session_id if request else None)
    return session.to_summary()


@router.get("/{session_id}")
async def get_session(session_id: str) -> dict:
    """Get the full editor state of a session."""
    return resolve_session(session_id).to_detail()


@router.delete("/{session_id}")
async def delete_session(session_id: str) -> dict:
    """Close a session and discard its document."""
    session = resolve_session(session_id)
    session_manager.unregister(session.id)
    return {"success": True, "session_id": session.id}


@router.post("/{session_id}/heartbeat")
async def heartbeat(session_id: str) -> dict:
    """Keep the session alive."""
    session = resolve_session(session_id)
    if session_manager.heartbeat(session.id):
        return {"success": True, "session_id": session.id}
    raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")
