"""
GameShelf Backend — Custom Exception Hierarchy
================================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes and client-facing bodies.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    GameShelfError (base)
    ├── GameValidationError  → 422 Unprocessable Entity (required fields missing)
    ├── NotFoundError        → 404 Not Found
    └── DatabaseError        → 500 Internal Server Error
"""

from typing import Any, Dict, List, Optional


class GameShelfError(Exception):
    """
    Base exception for all GameShelf application errors.

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


class GameValidationError(GameShelfError):
    """
    Raised when a Game payload is missing one or more required fields.

    HTTP:    422 Unprocessable Entity

    Carries one ValidatorError entry per missing field, keyed by field name
    and kept in rule-table order. Existing clients read
    `errors.<field>.message`, so the message literal never changes:

        {
            "name": "ValidationError",
            "message": "Game validation failed: title: Path 'title' is required.",
            "errors": {
                "title": {
                    "message": "Path 'title' is required.",
                    "kind": "required",
                    "path": "title",
                    "name": "ValidatorError"
                }
            }
        }
    """

    def __init__(
        self,
        errors: Dict[str, Dict[str, str]],
        model_name: str = "Game",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.errors = errors
        self.model_name = model_name
        summary = ", ".join(
            f"{path}: {error['message']}" for path, error in errors.items()
        )
        ctx = context or {}
        ctx["fields"] = list(errors)
        super().__init__(
            message=f"{model_name} validation failed: {summary}",
            context=ctx,
        )

    @property
    def fields(self) -> List[str]:
        return list(self.errors)

    def to_dict(self) -> Dict[str, Any]:
        """Response body for the 422 handler."""
        return {
            "name": "ValidationError",
            "message": self.message,
            "errors": self.errors,
        }


class NotFoundError(GameShelfError):
    """
    Raised when a requested resource does not exist.

    When:    PUT /api/game/update with an id that matches no Game.
    HTTP:    404 Not Found

    SQLAlchemy returns None for missing records; the service converts that
    into this exception so the route stays free of status-code logic.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(GameShelfError):
    """
    Raised when database operations fail unexpectedly.

    What:    A query, insert, update or delete failed.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the original
    exception type is kept in context and logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
