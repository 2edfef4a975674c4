# File index error taxonomy.
# Created: 2026-10-19
#
# Each error carries the HTTP status the API layer answers with.

from __future__ import annotations


class FileIndexError(Exception):
    """Base class for errors surfaced to API clients verbatim."""

    status_code: int = 500
    default_message: str = "Internal error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class AccessDenied(FileIndexError):
    """The requested path resolves outside the configured root."""

    status_code = 403
    default_message = "Access denied"


class NotFound(FileIndexError):
    """The requested path does not exist (and no search was requested)."""

    status_code = 404
    default_message = "File or directory not found"


class InvalidAction(FileIndexError):
    """The ``action`` parameter is not one of list/preview/download."""

    status_code = 400
    default_message = "Invalid action"


class ScanTimeout(FileIndexError):
    """A scan or read did not finish within its time bound."""

    status_code = 500
    default_message = "Operation timed out"
