"""FastAPI application factory and global exception handling."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse

from note_summarizer import __version__ as app_version
from note_summarizer.api.routes import router
from note_summarizer.config import get_settings
from note_summarizer.summarizer.errors import TextInputError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def create_application() -> FastAPI:
    """Create and configure the FastAPI application instance."""
    settings = get_settings()
    configure_logging(settings.log_level)
    started_at = time.monotonic()

    app = FastAPI(
        title=settings.app_name,
        description="Extractive summaries for notes and free-form text.",
        version=app_version,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"error": "validation_error", "details": exc.errors()},
        )

    @app.exception_handler(TextInputError)
    async def text_input_exception_handler(
        request: Request, exc: TextInputError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content=exc.to_payload())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        detail = exc.detail
        if isinstance(detail, dict) and "error" in detail:
            payload = detail
        elif detail == "There was an error parsing the body":
            payload = {"error": "invalid_body", "details": detail}
        else:
            payload = {"error": "http_error", "details": detail}
        return JSONResponse(status_code=exc.status_code, content=payload)

    @app.get("/", tags=["health"])
    async def index() -> dict[str, Any]:
        return {
            "message": settings.app_name,
            "status": "running",
            "endpoints": {
                "summarize": "/api/summarize",
                "upload": "/api/notes/upload",
                "validate": "/api/notes/validate",
                "health": "/health",
            },
        }

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, Any]:
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": round(time.monotonic() - started_at, 3),
            "version": app_version,
            "engine": settings.default_engine,
        }

    app.include_router(router)
    logger.info(f"{settings.app_name} {app_version} ready ({settings.environment})")
    return app


app = create_application()
