"""
Wanderlust Backend: FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds the persistence client, registers middleware,
       exception handlers, routes and the static-file mount, and returns
       the app. uvicorn serves the module-level `app`.

Lifecycle:
    Startup:
    1. Initialize logging
    2. Create the static directory if missing
    3. Open the database (create tables). Failure is logged and the
       server keeps running; store-backed routes then answer 500.

    Shutdown:
    1. Dispose the database engine (close all connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from wanderlust import __version__
from wanderlust.config import Settings, settings as default_settings
from wanderlust.database import Database
from wanderlust.exceptions import (
    ConflictError,
    DatabaseError,
    ValidationError,
    WanderlustError,
)
from wanderlust.middleware.logging import RequestLoggingMiddleware
from wanderlust.middleware.request_id import RequestIDLogFilter, RequestIDMiddleware
from wanderlust.routes import contact, favourites, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s

    The request ID comes from RequestIDLogFilter on the handler, so every
    record written while a request is handled carries it, and records
    written outside a request show "-".
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDLogFilter())
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[handler],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the database on startup, dispose it on shutdown."""
    app_settings: Settings = app.state.settings
    database: Database = app.state.db

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(app_settings.log_level)
    logger.info("Wanderlust backend starting up...")

    static_dir = Path(app_settings.static_dir)
    static_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Static directory: %s", static_dir.resolve())

    try:
        await database.connect()
        logger.info("Connected to database")
    except Exception as e:
        logger.error("Database connection error: %s", str(e))
        logger.error("Serving without a database; store-backed routes will fail.")

    logger.info(
        "Server running at http://%s:%d", app_settings.backend_host, app_settings.backend_port
    )

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Wanderlust backend shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to `{success: false, ...}` responses.

    Handler hierarchy:
        ValidationError   → 400 (`errors` list or single `message`)
        ConflictError     → 409
        DatabaseError     → 500 (route's generic message; context logged)
        WanderlustError   → 500
        Exception         → 500 (stack trace logged)

    Driver errors, SQL and stack traces are logged server-side only.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("Validation error: %s", exc.errors or exc.message)
        if exc.errors:
            content = {"success": False, "errors": exc.errors}
        else:
            content = {"success": False, "message": exc.message}
        return JSONResponse(status_code=400, content=content)

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        logger.info("Conflict: %s | Context: %s", exc.message, exc.context)
        return JSONResponse(
            status_code=409,
            content={"success": False, "message": exc.message},
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error("Database error: %s | Context: %s", exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": exc.message},
        )

    @app.exception_handler(WanderlustError)
    async def handle_application_error(request: Request, exc: WanderlustError):
        logger.error("Application error: %s | Context: %s", exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": exc.message},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("Unexpected error: %s", str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "An unexpected error occurred."},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Configuration to build the app from. Defaults to the
                      environment-derived singleton.

    The Database is constructed here but not opened; the lifespan opens it.
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title="Wanderlust API",
        description="Contact-form submissions and favourite places for the Wanderlust travel site.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.db = Database.from_settings(app_settings)

    # ── Register Middleware ───────────────────────────────────────────────
    # Executes in reverse order of addition: RequestID → Logging → CORS
    origins = app_settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(contact.router)
    app.include_router(favourites.router)

    # Mounted last so the API routes above take precedence at "/"
    app.mount(
        "/",
        StaticFiles(directory=app_settings.static_dir, check_dir=False),
        name="static",
    )

    return app


app = create_app()
