"""Element API endpoints.

Element operations act on the active page of the session:
/api/sessions/{session}/elements/{element}/...
"""

from typing import Any, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..elements import Position, Size
from .resolve import command_result, resolve_repository

router = APIRouter(prefix="/sessions/{session_id}/elements", tags=["elements"])


class ElementCreateRequest(BaseModel):
    """Request body for adding an element.

    Any extra PageElement field (children, style, objectReference, locked)
    is passed through from ``fields``.
    """

    type: str
    props: dict[str, Any] = {}
    position: Optional[Position] = None
    size: Optional[Size] = None
    fields: dict[str, Any] = {}


@router.post("")
async def add_element(session_id: str, request: ElementCreateRequest) -> dict:
    """Add an element to the top level of the active page and select it."""
    repo = resolve_repository(session_id)
    data = dict(request.fields)
    data.update(type=request.type, props=request.props)
    if request.position is not None:
        data['position'] = request.position.model_dump()
    if request.size is not None:
        data['size'] = request.size.model_dump()
    element = repo.add_element(data)
    if element is None:
        return command_result(False, repo)
    return command_result(True, repo, element=element.to_api_dict())


@router.get("/{element_id}")
async def get_element(session_id: str, element_id: str) -> dict:
    """Get an element (with its subtree) from the active page."""
    repo = resolve_repository(session_id)
    element = repo.find_element(element_id)
    if element is None:
        raise HTTPException(status_code=404, detail=f"Element '{element_id}' not found")
    return element.to_api_dict()


@router.patch("/{element_id}")
async def update_element(session_id: str, element_id: str, updates: dict[str, Any]) -> dict:
    """Merge partial fields into an element at any depth."""
    repo = resolve_repository(session_id)
    return command_result(repo.update_element(element_id, updates), repo)


@router.delete("/{element_id}")
async def delete_element(session_id: str, element_id: str) -> dict:
    """Delete an element and its subtree."""
    repo = resolve_repository(session_id)
    return command_result(repo.delete_element(element_id), repo)


@router.put("/{element_id}/position")
async def move_element(session_id: str, element_id: str, position: Position) -> dict:
    """Live position update (not recorded in the undo history)."""
    repo = resolve_repository(session_id)
    return command_result(repo.move_element(element_id, position), repo)


@router.put("/{element_id}/size")
async def resize_element(session_id: str, element_id: str, size: Size) -> dict:
    """Live size update (not recorded in the undo history)."""
    repo = resolve_repository(session_id)
    return command_result(repo.resize_element(element_id, size), repo)


@router.patch("/{element_id}/props")
async def update_element_props(session_id: str, element_id: str, props: dict[str, Any]) -> dict:
    """Shallow-merge into an element's props."""
    repo = resolve_repository(session_id)
    return command_result(repo.update_element_props(element_id, props), repo)
