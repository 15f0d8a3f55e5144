"""
Album Catalog Backend — Custom Exception Hierarchy
===================================================

What:  Application-specific exceptions for the catalog's error scenarios.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error responses with the right HTTP status code.
Who:   Raised by the album store and route handlers.

Exception Hierarchy:
    AlbumCatalogError (base)          → 500 Internal Server Error
    ├── ValidationError               → 400 Bad Request
    └── NotFoundError                 → 404 Not Found
        └── AlbumNotFoundError        → 404, {"message": "album not found"}

The message of a NotFoundError is returned to the client verbatim; context
is logged server-side only.
"""

from typing import Any, Dict, Optional


class AlbumCatalogError(Exception):
    """
    Base exception for all catalog errors.

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


class ValidationError(AlbumCatalogError):
    """
    Raised when client input cannot be decoded into the expected shape.

    HTTP: 400 Bad Request. FastAPI's own RequestValidationError (malformed
    JSON, wrong field types) is mapped to the same status and body format.
    """

    def __init__(
        self,
        message: str = "invalid album payload",
        errors: Optional[list] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.errors = errors or []


class NotFoundError(AlbumCatalogError):
    """Raised when a requested resource does not exist. HTTP: 404."""

    def __init__(
        self,
        message: str = "resource not found",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AlbumNotFoundError(NotFoundError):
    """
    Raised when no album in the collection has the requested id.

    The message is part of the API contract: clients match on the exact
    body {"message": "album not found"}.
    """

    def __init__(self, album_id: str):
        super().__init__(
            message="album not found",
            context={"resource": "album", "album_id": album_id},
        )
        self.album_id = album_id
