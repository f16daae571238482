"""
Noteful API — Request ID Middleware
===================================

What:  Assigns an ID to each incoming request and echoes it in the response.
How:   Reuses the client's X-Request-ID header when it is a short token of
       safe characters, otherwise generates a short UUID; stores it in a
       ContextVar for loggers and in request.state for handlers.
When:  First middleware in the chain.

The ID ends up verbatim in access-log lines, so a client value with spaces,
quotes or control characters is replaced rather than echoed.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

CLIENT_REQUEST_ID = re.compile(r"[A-Za-z0-9._-]{1,64}")


def choose_request_id(client_value: str) -> str:
    if client_value and CLIENT_REQUEST_ID.fullmatch(client_value):
        return client_value
    return str(uuid.uuid4())[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that tags every request and response with X-Request-ID."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = choose_request_id(request.headers.get("X-Request-ID", ""))

        # Visible to the logging middleware and exception handlers below
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
