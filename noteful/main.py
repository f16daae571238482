"""
Noteful API — FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and routers and
       returns the app; `app` at module level is what uvicorn serves.
Who:   uvicorn (noteful.main:app), the noteful-server script, the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  Req ID → Logging → Sec. headers → CORS → Errors    │
    │                                                     │
    │  Routes:                                            │
    │  /api/notes   /api/folders   /   /health            │
    │                                                     │
    │  Exception Handlers:                                │
    │  Validation→400 │ NotFound→404 │ anything else→500  │
    └─────────────────────────────────────────────────────┘

Error envelope:
    {"error": {"message": "..."}}

    Unexpected errors answer 500. In production the body is the generic
    {"error": {"message": "server error"}}; in development and test it
    carries the raw exception message and type.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from noteful import __version__
from noteful.config import settings
from noteful.database import dispose_engine
from noteful.exceptions import NotFoundError, ValidationError
from noteful.middleware.errors import UnexpectedErrorMiddleware, server_error_response
from noteful.middleware.logging import RequestLoggingMiddleware
from noteful.middleware.request_id import RequestIDMiddleware, request_id_var
from noteful.middleware.security_headers import SecurityHeadersMiddleware
from noteful.routes import folders, health, notes

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: 2024-01-15T12:00:00 [INFO] noteful.access: GET /api/notes 200 ...
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # uvicorn's own access log duplicates noteful.access
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: configure logging. Shutdown: dispose the database engine."""
    setup_logging()
    logger.info("Noteful API %s starting (environment=%s)", __version__, settings.environment)
    logger.info("Listening on http://%s:%d", settings.host, settings.port)

    yield

    logger.info("Noteful API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_envelope(message: str) -> Dict[str, Any]:
    return {"error": {"message": message}}


def describe_request_error(exc: RequestValidationError) -> str:
    """
    Turn FastAPI's first request validation error into one client message.

    Examples:
        folder_id: "abc" in the body   → Invalid 'folder_id' in request body
        /api/notes/abc                 → Invalid 'note_id' in request path
    """
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Request body must be valid JSON"

    loc = list(first.get("loc", ()))
    source = loc[0] if loc else "body"
    field = ".".join(str(part) for part in loc[1:])

    if source == "path":
        return f"Invalid '{field}' in request path"
    if source == "query":
        return f"Invalid '{field}' in request query"
    if not field:
        return "Request body must be a JSON object"
    return f"Invalid '{field}' in request body"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to status codes and the error envelope.

    Handler hierarchy:
        ValidationError         → 400
        RequestValidationError  → 400 (malformed body or path parameter)
        NotFoundError           → 404
        HTTPException           → its own status (unknown route, bad method)
        Exception (fallback)    → 500, detail hidden in production
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(status_code=400, content=error_envelope(exc.message))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        message = describe_request_error(exc)
        logger.warning("[%s] Malformed request: %s", rid, message)
        return JSONResponse(status_code=400, content=error_envelope(message))

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content=error_envelope(exc.message))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Last-resort 500 for errors raised outside UnexpectedErrorMiddleware
        (i.e. inside another middleware). Route errors never get here.
        """
        return server_error_response(exc)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Middleware executes in REVERSE order of addition, so adding
    Errors → CORS → Security headers → Logging → RequestID gives the
    execution order RequestID → Logging → Security headers → CORS → Errors.
    """
    app = FastAPI(
        title="Noteful API",
        description="Notes organized into folders.",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    app.add_middleware(UnexpectedErrorMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", "X-Request-ID"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(notes.router)
    app.include_router(folders.router)
    app.include_router(health.router)

    return app


app = create_app()
