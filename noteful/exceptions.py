"""
Noteful API — Custom Exception Hierarchy
========================================

What:  Application-specific exceptions for client-correctable failures.
How:   Each exception carries a user-facing message and an optional context
       dict. Global handlers registered in main.py turn them into the
       `{"error": {"message": ...}}` envelope with the matching status code.
Who:   Raised by routers; caught by the global handlers.

Exception Hierarchy:
    NotefulError (base)
    ├── ValidationError   → 400 Bad Request
    └── NotFoundError     → 404 Not Found

Anything else (SQLAlchemy errors, bugs) is an unexpected error and is
answered with 500 by the catch-all handler.
"""

from typing import Any, Dict, Optional


class NotefulError(Exception):
    """
    Base exception for all Noteful application errors.

    Attributes:
        message:  User-facing error description (returned in the API response)
        context:  Additional debug info (logged, never returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotefulError):
    """
    Raised when client input fails validation.

    When:    Missing required field, no updatable field on PATCH, malformed
             body or path parameter.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NotefulError):
    """
    Raised when a requested resource does not exist.

    Stores return None for missing rows; routers convert that into this
    exception. The message is the resource's fixed not-found text, e.g.
    "Note doesn't exist".

    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} doesn't exist"
        ctx = context or {}
        ctx["resource"] = resource.lower()
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
