"""
Noteful API — Shared Response Schemas
=====================================

What:  Error envelope and health check models shared by every router.
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    message: str = Field(description="Human-readable error description")


class ErrorResponse(BaseModel):
    """
    Error envelope returned for 400, 404 and (in production) 500 responses.

    Example:
        {"error": {"message": "Missing 'text' in request body"}}
    """
    error: ErrorDetail


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    environment: str = Field(description="Execution mode: development, test, production")
    database: str = Field(description="Database connectivity: connected, disconnected")
