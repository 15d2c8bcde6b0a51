"""Selection, drag, clipboard and history API endpoints.

/api/sessions/{session}/selection
/api/sessions/{session}/dragging
/api/sessions/{session}/clipboard/{copy,cut,paste}
/api/sessions/{session}/history/{undo,redo,checkpoint}
"""

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from .resolve import command_result, resolve_repository

router = APIRouter(prefix="/sessions/{session_id}", tags=["editing"])


class SelectRequest(BaseModel):
    """Request body for selecting an element (null clears)."""

    element_id: Optional[str] = None


class DraggingRequest(BaseModel):
    """Request body for the drag-in-progress hint."""

    dragging: bool


class ClipboardRequest(BaseModel):
    """Request body for copy/cut."""

    element_id: str


@router.put("/selection")
async def select_element(session_id: str, request: SelectRequest) -> dict:
    repo = resolve_repository(session_id)
    repo.select_element(request.element_id)
    return command_result(True, repo)


@router.put("/dragging")
async def set_dragging(session_id: str, request: DraggingRequest) -> dict:
    repo = resolve_repository(session_id)
    repo.set_dragging(request.dragging)
    return command_result(True, repo, is_dragging=repo.is_dragging)


@router.post("/clipboard/copy")
async def copy_element(session_id: str, request: ClipboardRequest) -> dict:
    repo = resolve_repository(session_id)
    return command_result(repo.copy_element(request.element_id), repo, has_clipboard=repo.has_clipboard)


@router.post("/clipboard/cut")
async def cut_element(session_id: str, request: ClipboardRequest) -> dict:
    repo = resolve_repository(session_id)
    return command_result(repo.cut_element(request.element_id), repo, has_clipboard=repo.has_clipboard)


@router.post("/clipboard/paste")
async def paste_element(session_id: str) -> dict:
    repo = resolve_repository(session_id)
    element = repo.paste_element()
    if element is None:
        return command_result(False, repo)
    return command_result(True, repo, element=element.to_api_dict())


@router.post("/history/undo")
async def undo(session_id: str) -> dict:
    repo = resolve_repository(session_id)
    return command_result(repo.undo(), repo)


@router.post("/history/redo")
async def redo(session_id: str) -> dict:
    repo = resolve_repository(session_id)
    return command_result(repo.redo(), repo)


@router.post("/history/checkpoint")
async def save_history_state(session_id: str) -> dict:
    """Record an undo checkpoint, e.g. once per drag gesture."""
    repo = resolve_repository(session_id)
    repo.save_history_state()
    return command_result(True, repo)
