"""
Noteful API — Security Headers Middleware
=========================================

What:  Adds standard hardening headers to every response.
How:   Sets each header only when the route did not set it already.

Headers:
    X-Content-Type-Options: nosniff          no MIME sniffing of JSON bodies
    X-Frame-Options: SAMEORIGIN              no framing by other origins
    X-DNS-Prefetch-Control: off
    X-Download-Options: noopen
    X-XSS-Protection: 1; mode=block
    Strict-Transport-Security                HTTPS only (production)
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from noteful.config import settings

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-XSS-Protection": "1; mode=block",
}

HSTS_VALUE = "max-age=15552000; includeSubDomains"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Applies SECURITY_HEADERS (plus HSTS in production) to responses."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)

        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        if settings.is_production:
            response.headers.setdefault("Strict-Transport-Security", HSTS_VALUE)

        return response
