"""
Noteful API — Request Logging Middleware
========================================

What:  One access-log line per HTTP request.
How:   Measures the time spent in the rest of the chain and logs the
       outcome to the `noteful.access` logger.
When:  After RequestIDMiddleware (uses the request ID for correlation).

Line formats:
    production   GET /api/notes 200 512 - 3.4 ms
    otherwise    127.0.0.1 - - "GET /api/notes HTTP/1.1" 200 512 3.4ms [a1b2c3d4]

What we log vs what we DON'T log:
    ✅ Log: method, path, status, size, duration, client address, request ID
    ❌ Don't log: request or response bodies (note text is user content)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from noteful.config import settings
from noteful.middleware.request_id import request_id_var

logger = logging.getLogger("noteful.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration of each request.

    Level follows the status code: 5xx → ERROR, 4xx → WARNING, else INFO.
    Unhandled exceptions arrive here already converted to a 500 response by
    UnexpectedErrorMiddleware, which also logs their traceback.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        # request.client is None under some test transports
        client_ip = request.client.host if request.client else "-"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        size = response.headers.get("content-length", "-")

        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        extra = {
            "request_id": rid,
            "method": method,
            "path": path,
            "status": status,
            "duration_ms": round(duration_ms, 2),
            "client_ip": client_ip,
        }

        if settings.is_production:
            logger.log(
                log_level,
                "%s %s %d %s - %.1f ms",
                method, path, status, size, duration_ms,
                extra=extra,
            )
        else:
            http_version = request.scope.get("http_version", "1.1")
            logger.log(
                log_level,
                '%s - - "%s %s HTTP/%s" %d %s %.1fms [%s]',
                client_ip, method, path, http_version, status, size, duration_ms, rid,
                extra=extra,
            )

        return response
