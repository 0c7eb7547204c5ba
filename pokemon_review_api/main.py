"""
Entry point for the Pokemon Review API.

This module creates the FastAPI application, wires up middleware and error
handlers, and mounts every entity router under the API prefix.

Intended usage:
    uvicorn pokemon_review_api.main:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pokemon_review_api.config import Settings, get_settings
from pokemon_review_api.db.session import init_db
from pokemon_review_api.errors import ApiError, DuplicateNameError
from pokemon_review_api.logging.config import configure_logging
from pokemon_review_api.routers import ALL_ROUTERS
from pokemon_review_api.schemas import ErrorMap


def _validation_errors(exc: RequestValidationError) -> ErrorMap:
    """
    Flatten pydantic errors into the field -> messages map used for every
    error body.
    """
    errors: ErrorMap = {}
    for error in exc.errors():
        # loc looks like ("body", "name") or ("query", "countryId")
        loc = [str(part) for part in error.get("loc", ())[1:]]
        key = ".".join(loc)
        errors.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return errors


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application instance.
    """
    settings = settings or get_settings()
    logger = configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info(
            "api_starting",
            app_name=settings.app_name,
            version=settings.version,
            api_prefix=settings.api_prefix,
        )
        if settings.create_tables:
            init_db()
        yield
        logger.info("api_stopping")

    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Error handlers ---

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.state.errors)

    @app.exception_handler(DuplicateNameError)
    async def duplicate_name_handler(request: Request, exc: DuplicateNameError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"": [f"{exc.entity} already exists"]},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_validation_errors(exc),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            method=request.method,
            exc_info=exc,
        )
        message = str(exc) if settings.debug else "Internal Server Error"
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"": [message]},
        )

    # --- Routes ---

    @app.get("/health", tags=["system"])
    async def health() -> dict:
        return {"status": "ok", "version": settings.version}

    for router in ALL_ROUTERS:
        app.include_router(router, prefix=settings.api_prefix)

    return app


# Default application instance
app = create_app()


# ---------------------------------------------------------------------------
# Local development entry point
# ---------------------------------------------------------------------------


if __name__ == "__main__":
    host = os.getenv("POKEMON_API_HOST", "0.0.0.0")
    port_str = os.getenv("POKEMON_API_PORT", "8000")

    try:
        port = int(port_str)
    except ValueError:
        raise SystemExit(
            f"Invalid POKEMON_API_PORT value {port_str!r}; must be an integer."
        ) from None

    import uvicorn

    uvicorn.run(
        "pokemon_review_api.main:app",
        host=host,
        port=port,
        reload=os.getenv("POKEMON_API_RELOAD", "false").lower() == "true",
    )
