# Middleware package init
"""
Noteful API — Middleware Package
================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [Security Headers] → [CORS] → [Errors] → Route Handler

    1. Request ID first so every later log line can carry it
    2. Logging wraps everything below it, so durations include the handler
    3. Security headers are added on the way out
    4. CORS is Starlette's CORSMiddleware (answers preflight requests)
    5. Errors turns an unhandled exception into a 500 response, so the
       layers above still decorate and log it
"""
