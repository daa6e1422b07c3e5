"""
Journal — FastAPI Application Factory
======================================

What:  Creates and configures the FastAPI application.
How:   create_app() wires middleware, exception handlers, and routers;
       the module-level `app` is what uvicorn serves
       (uvicorn journal.main:app, or python -m journal).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Req ID → Logging → GZip → CORS        │
    │                                                     │
    │  Routes:      /api/entries (CRUD)   /health         │
    │                                                     │
    │  Exception Handlers:                                │
    │    ClientError → its status │ bad body → 400        │
    │    DatabaseError → 500      │ anything else → 500   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, validate settings, log the listen address
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from journal import __version__
from journal.config import settings
from journal.database import dispose_engine
from journal.exceptions import ClientError, DatabaseError, JournalError
from journal.middleware.logging import RequestLoggingMiddleware
from journal.middleware.request_id import RequestIDMiddleware, request_id_var
from journal.routes import entries, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s on stdout.
    Called once, before anything else in the lifespan.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Our access middleware replaces uvicorn's access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("Journal API %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving so /health can report the database as disconnected
        logger.error("Configuration error: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.host, settings.port)

    yield

    logger.info("Journal API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to JSON error bodies.

    Handler hierarchy:
        ClientError (ValidationError, NotFoundError) → exc.status_code
        RequestValidationError (bad JSON, wrong types) → 400
        DatabaseError                                 → 500, generic message
        JournalError (base)                           → 500
        Exception (fallback)                          → 500, generic message

    Responses never include stack traces or SQL; those go to the log.
    """

    @app.exception_handler(ClientError)
    async def handle_client_error(request: Request, exc: ClientError):
        """Client can fix this request; return the message unchanged."""
        rid = request_id_var.get("")
        logger.warning("[%s] %s (%d): %s", rid, exc.error_code, exc.status_code, exc.message)
        content = {
            "error": exc.error_code,
            "message": exc.message,
            "request_id": rid,
        }
        if exc.context:
            content["details"] = exc.context
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Malformed JSON or wrongly typed fields, reported as a plain 400."""
        rid = request_id_var.get("")
        fields = [
            str(err["loc"][-1]) for err in exc.errors() if err.get("loc")
        ]
        logger.warning("[%s] Request body rejected: %s", rid, fields)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": "Invalid request body.",
                "details": {"fields": fields},
                "request_id": rid,
            },
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        """Generic message to the caller, details logged server-side."""
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(JournalError)
    async def handle_journal_error(request: Request, exc: JournalError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: stack trace to the log, generic 500 to the caller."""
        rid = request_id_var.get("")
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again later.",
                "request_id": rid,
            },
            # Runs outside RequestIDMiddleware, so the header is set here
            headers={"X-Request-ID": rid},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Journal API",
        description="Personal journal: create, read, update and delete entries.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS → route
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

    app.include_router(entries.router)
    app.include_router(health.router)

    return app


app = create_app()
