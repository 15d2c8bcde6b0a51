"""HTTP API for the Pageforge document core."""

from .router import api_router

__all__ = ["api_router"]
