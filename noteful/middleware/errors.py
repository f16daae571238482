"""
Noteful API — Unexpected Error Middleware
=========================================

What:  Turns exceptions nobody handled into the 500 error envelope.
How:   Wraps the router; an exception escaping a handler becomes a
       JSONResponse here, so the outer middlewares still see a response.
When:  Innermost middleware, directly around the routes.

Starlette runs handlers registered for `Exception` in its outermost error
middleware, after every user middleware has been unwound. A 500 produced
there carries no X-Request-ID, no CORS or security headers, and never
reaches the access log. Converting the exception here keeps 500s on the
same path as every other response.

Body:
    production   {"error": {"message": "server error"}}
    otherwise    {"message": "<exc>", "error": {"type": "<ExcType>", "message": "<exc>"}}
"""

import logging
from typing import Any, Dict

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from noteful.config import settings
from noteful.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)


def server_error_content(exc: Exception) -> Dict[str, Any]:
    """Response body for an unexpected error; detail is hidden in production."""
    if settings.is_production:
        return {"error": {"message": "server error"}}
    return {
        "message": str(exc),
        "error": {"type": type(exc).__name__, "message": str(exc)},
    }


def server_error_response(exc: Exception) -> JSONResponse:
    rid = request_id_var.get("")
    logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=exc)
    return JSONResponse(status_code=500, content=server_error_content(exc))


class UnexpectedErrorMiddleware(BaseHTTPMiddleware):
    """Answers 500 for any exception raised below it in the chain."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return server_error_response(exc)
