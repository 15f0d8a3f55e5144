"""
Album Catalog Backend — FastAPI Application Factory
====================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       that owns its own AlbumStore.
Who:   Called by uvicorn (album_catalog.main:app), `python -m album_catalog`,
       and the test suite (one app and store per test).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌──────┐ ┌──────┐        │
    │  │  Req ID  │→│ Logging  │→│ GZip │→│ CORS │        │
    │  └──────────┘ └──────────┘ └──────┘ └──────┘        │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │ /albums[/id] │ │ GET /api/│ │ GET /health     │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │  Static frontend mounted at "/" (after all routes)  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Decode error→400 │ NotFound→404 │ other→500  │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from album_catalog import __version__
from album_catalog.config import settings
from album_catalog.exceptions import AlbumCatalogError, NotFoundError, ValidationError
from album_catalog.middleware.logging import RequestLoggingMiddleware
from album_catalog.middleware.request_id import RequestIDMiddleware, request_id_var
from album_catalog.routes import albums, health, ping
from album_catalog.services.album_store import AlbumStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # album_catalog.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("=" * 60)
    logger.info("Album Catalog %s starting up...", __version__)
    logger.info("Collection seeded with %d albums", len(app.state.album_store))
    logger.info("Server ready at http://%s:%d", settings.host, settings.port)
    logger.info("=" * 60)

    yield

    # Albums are not persisted; everything created since startup is dropped here
    logger.info(
        "Album Catalog shutting down (%d albums discarded).",
        len(app.state.album_store),
    )


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Handler hierarchy:
        RequestValidationError  → 400 Bad Request (FastAPI's default would be 422)
        ValidationError         → 400 Bad Request
        NotFoundError           → 404 Not Found, {"message": ...}
        AlbumCatalogError       → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    Stack traces and exception context are logged server-side only.
    """

    def bad_request_response(exc: ValidationError) -> JSONResponse:
        """
        400 body shared by raised ValidationErrors and wrapped RequestValidationErrors.

        The rejected `input` is left out of each error: it echoes client data
        and may hold NaN/inf, which JSONResponse refuses to render.
        """
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        details = [
            {key: value for key, value in error.items() if key != "input"}
            if isinstance(error, dict) else error
            for error in exc.errors
        ]
        return JSONResponse(
            status_code=400,
            content={"message": exc.message, "details": jsonable_encoder(details)},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Body was not JSON, or did not decode into the expected model."""
        return bad_request_response(
            ValidationError(errors=list(exc.errors()), context={"path": request.url.path})
        )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        return bad_request_response(exc)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        logger.debug("[%s] Not found: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return JSONResponse(status_code=404, content={"message": exc.message})

    @app.exception_handler(AlbumCatalogError)
    async def handle_catalog_error(request: Request, exc: AlbumCatalogError):
        logger.error("[%s] Catalog error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return JSONResponse(status_code=500, content={"message": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={"message": "An unexpected error occurred. Please try again."},
        )


# ══════════════════════════════════════════════════════════════════════════
# Static Frontend
# ══════════════════════════════════════════════════════════════════════════

def mount_frontend(app: FastAPI, static_dir: str) -> bool:
    """
    Serve frontend assets from `static_dir` at "/".

    Must be called after every router is included: a Mount at "/" matches
    any path, so API routes only take precedence if they come first.

    Returns:
        True if mounted; False if the directory does not exist.
    """
    directory = Path(static_dir)
    if not directory.is_dir():
        logger.warning("Static directory %s not found; frontend will not be served", directory.resolve())
        return False

    app.mount("/", StaticFiles(directory=str(directory), html=True), name="frontend")
    logger.info("Serving frontend from %s", directory.resolve())
    return True


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[AlbumStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Album store owned by this app. Defaults to a freshly seeded
               store; tests pass their own to get an isolated collection.
    """
    app = FastAPI(
        title="Album Catalog API",
        description="In-memory catalog of record albums: list, fetch by id, and create.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.album_store = store if store is not None else AlbumStore.seeded()

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(albums.router)
    app.include_router(ping.router)
    app.include_router(health.router)

    mount_frontend(app, settings.static_dir)

    return app


# uvicorn expects `album_catalog.main:app` to be importable
app = create_app()
