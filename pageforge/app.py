"""FastAPI application factory for the Pageforge API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .api import api_router


def create_api_app() -> FastAPI:
    """Create the API application (mount it under /api or serve it directly)."""
    app = FastAPI(title="Pageforge API")

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        # Malformed payloads that reach the document core
        return JSONResponse(
            status_code=422,
            content={"detail": exc.errors(include_url=False, include_context=False, include_input=False)},
        )

    app.include_router(api_router)
    return app
