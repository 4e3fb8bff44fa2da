"""
Wanderlust Backend: Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the failures a request can hit.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the `{success: false, ...}` JSON body with the right status.
Who:   Raised by services and body parsing; caught by global handlers.

Exception Hierarchy:
    WanderlustError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── ConflictError     → 409 Conflict (favourite already saved)
    └── DatabaseError     → 500 Internal Server Error (generic message)
"""

from typing import Any, Dict, List, Optional


class WanderlustError(Exception):
    """
    Base exception for all Wanderlust application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred.",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(WanderlustError):
    """
    Raised when client input fails validation.

    HTTP:    400 Bad Request

    Two response shapes exist. Field-level rules (the contact form) report
    every failing rule:
        {"success": false, "errors": ["Name is required.", ...]}
    Whole-request checks report a single message:
        {"success": false, "message": "Name and description are required."}
    """

    def __init__(
        self,
        message: str = "Validation failed.",
        errors: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.errors = list(errors or [])


class ConflictError(WanderlustError):
    """
    Raised when a write would break a uniqueness rule.

    When:    POST /favourites with a name that is already saved, either found
             by the existence check or rejected by the unique constraint.
    HTTP:    409 Conflict
    """

    def __init__(
        self,
        message: str = "The resource already exists.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(WanderlustError):
    """
    Raised when database operations fail unexpectedly.

    What:    A query, insert or delete failed (store unreachable, malformed
             identifier, constraint violation other than name uniqueness).
    HTTP:    500 Internal Server Error

    The message is the route's generic text and is returned as-is; the
    driver error is kept in `context` and only ever logged.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
