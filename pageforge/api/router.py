"""Main API router."""

from fastapi import APIRouter

from .editing import router as editing_router
from .elements import router as elements_router
from .media import router as media_router
from .pages import router as pages_router
from .sessions import router as sessions_router

api_router = APIRouter()


@api_router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "version": "0.1.0"}


# Mount sub-routers
# Note: all sub-routers define full paths /sessions/{id}/...
api_router.include_router(sessions_router)
api_router.include_router(pages_router)
api_router.include_router(elements_router)
api_router.include_router(editing_router)
api_router.include_router(media_router)
