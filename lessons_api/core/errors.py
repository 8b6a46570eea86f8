"""Error taxonomy shared by repositories, services and routers."""

from __future__ import annotations


class LessonsApiError(Exception):
    """Base class for errors surfaced to HTTP clients as ``{"error": ...}``."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(LessonsApiError):
    """Missing or malformed request field."""


class NotFoundError(LessonsApiError):
    """Unknown lesson id or user email."""


class DuplicateError(LessonsApiError):
    """A unique key (user email) is already taken."""


class InvalidCredentialsError(LessonsApiError):
    pass


class BackendError(LessonsApiError):
    """Unexpected failure raised by the storage layer."""
