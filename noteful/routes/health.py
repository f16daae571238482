"""
Noteful API — Root & Health Check Routes
========================================

What:  GET /        plain-text greeting for liveness checks
       GET /health  database probe for readiness checks

Status levels (GET /health):
    healthy:   database answered SELECT 1 (HTTP 200)
    unhealthy: database unreachable (HTTP 503)
"""

import logging

from fastapi import APIRouter, Response
from fastapi.responses import PlainTextResponse
from sqlalchemy import text

from noteful import __version__
from noteful.config import settings
from noteful.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/", response_class=PlainTextResponse, summary="Liveness greeting")
async def root() -> str:
    return "Hello, world!"


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(response: Response) -> HealthResponse:
    """
    Probe the database with a lightweight SELECT 1.

    The engine is imported lazily so tests can swap `noteful.database.engine`.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        from noteful import database
        async with database.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        environment=settings.environment,
        database=db_status,
    )
