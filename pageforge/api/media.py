"""Media library API endpoints.

/api/sessions/{session}/media/...
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from .resolve import resolve_repository

router = APIRouter(prefix="/sessions/{session_id}/media", tags=["media"])


class MediaCreateRequest(BaseModel):
    """Request body for registering an uploaded media file."""

    name: str
    url: str
    content_type: str = Field(default="application/octet-stream", alias="type")
    size: int = Field(default=0, ge=0)

    model_config = {"populate_by_name": True}


@router.get("")
async def list_media(session_id: str) -> dict:
    repo = resolve_repository(session_id)
    return {"media": [media.to_api_dict() for media in repo.media.items]}


@router.post("")
async def add_media(session_id: str, request: MediaCreateRequest) -> dict:
    repo = resolve_repository(session_id)
    media = repo.add_media(request.name, request.url, content_type=request.content_type, size=request.size)
    return media.to_api_dict()


@router.get("/{media_id}")
async def get_media(session_id: str, media_id: str) -> dict:
    repo = resolve_repository(session_id)
    media = repo.get_media(media_id)
    if media is None:
        raise HTTPException(status_code=404, detail=f"Media '{media_id}' not found")
    return media.to_api_dict()


@router.delete("/{media_id}")
async def delete_media(session_id: str, media_id: str) -> dict:
    """Delete a media record and remove references to it from element props."""
    repo = resolve_repository(session_id)
    return {"success": repo.delete_media(media_id), "media_id": media_id}
