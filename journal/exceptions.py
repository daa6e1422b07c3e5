"""
Journal — Custom Exception Hierarchy
=====================================

What:  Application-specific exceptions raised by services.
How:   Each exception carries a user-facing message and an optional context
       dict. Global handlers registered in journal.main turn them into JSON
       error responses.

Exception Hierarchy:
    JournalError (base)              → 500 Internal Server Error
    ├── ClientError(status_code)     → status code carried on the error
    │   ├── ValidationError          → 400 Bad Request
    │   └── NotFoundError            → 404 Not Found
    └── DatabaseError                → 500 Internal Server Error

Client errors are returned to the caller unchanged. Everything else is
answered with a generic message; the detail stays in the server log.
"""

from typing import Any, Dict, Optional


class JournalError(Exception):
    """
    Base exception for all journal application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ClientError(JournalError):
    """
    A request the client can fix, reported with an explicit HTTP status.

    The status code travels on the exception so one handler can answer
    every subclass.
    """

    status_code: int = 400
    error_code: str = "client_error"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ClientError):
    """
    Raised when client input fails validation.

    When:    Malformed entryId, missing title/notes/photoUrl, unparseable body.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Invalid entryId.",
            "details": {"field": "entryId"}
        }
    """

    status_code = 400
    error_code = "validation_error"

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


class NotFoundError(ClientError):
    """
    Raised when a requested entry does not exist.

    HTTP:    404 Not Found
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        resource: str = "entryId",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} {resource_id} does not exist."
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(JournalError):
    """
    Raised when a store operation fails unexpectedly.

    When:    Connection lost, constraint violation, driver error.
    HTTP:    500 Internal Server Error

    The response message is always generic; the SQL error is logged only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
