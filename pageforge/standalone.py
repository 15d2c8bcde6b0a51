"""Standalone FastAPI entry point for Pageforge.

Run:
    poetry run python -m pageforge.standalone

Environment variables:
    PAGEFORGE_HOST: Interface to bind (default: 0.0.0.0)
    PAGEFORGE_PORT: Port to run on (default: 8080)
"""

import uvicorn
from fastapi import FastAPI

from .app import create_api_app
from .config import settings


def create_standalone_app() -> FastAPI:
    """Create the standalone application with the API mounted at /api."""
    app = FastAPI(title="Pageforge")
    app.mount("/api", create_api_app())
    return app


if __name__ == "__main__":
    uvicorn.run(create_standalone_app(), host=settings.HOST, port=settings.PORT)
