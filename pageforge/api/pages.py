"""Page API endpoints.

/api/sessions/{session}/pages/...
"""

from typing import Any, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from .resolve import command_result, resolve_repository

router = APIRouter(prefix="/sessions/{session_id}", tags=["pages"])


class PageCreateRequest(BaseModel):
    """Request body for adding a page."""

    title: str


class CurrentPageRequest(BaseModel):
    """Request body for switching the active page."""

    page_id: Optional[str] = None


@router.get("/pages")
async def list_pages(session_id: str, include_elements: bool = False) -> dict:
    """List the pages of the session's document."""
    repo = resolve_repository(session_id)
    return {
        "pages": [page.to_api_dict(include_elements=include_elements) for page in repo.pages],
        "current_page_id": repo.current_page_id,
    }


@router.post("/pages")
async def add_page(session_id: str, request: PageCreateRequest) -> dict:
    """Add a page and make it the active page."""
    repo = resolve_repository(session_id)
    page = repo.add_page(request.title)
    return command_result(True, repo, page=page.to_api_dict())


@router.get("/pages/{page_id}")
async def get_page(session_id: str, page_id: str) -> dict:
    """Get a page with its element tree."""
    repo = resolve_repository(session_id)
    page = repo.get_page(page_id)
    if page is None:
        raise HTTPException(status_code=404, detail=f"Page '{page_id}' not found")
    return page.to_api_dict()


@router.patch("/pages/{page_id}")
async def update_page(session_id: str, page_id: str, updates: dict[str, Any]) -> dict:
    """Merge partial fields (e.g. a new title) into a page."""
    repo = resolve_repository(session_id)
    return command_result(repo.update_page(page_id, updates), repo)


@router.delete("/pages/{page_id}")
async def delete_page(session_id: str, page_id: str) -> dict:
    """Delete a page."""
    repo = resolve_repository(session_id)
    return command_result(repo.delete_page(page_id), repo)


@router.put("/current-page")
async def set_current_page(session_id: str, request: CurrentPageRequest) -> dict:
    """Switch the active page (clears the selection)."""
    repo = resolve_repository(session_id)
    return command_result(repo.set_current_page_id(request.page_id), repo)
