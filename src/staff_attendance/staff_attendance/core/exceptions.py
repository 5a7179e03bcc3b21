from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400

    def __init__(self, message: str, *, reason: str | None = None):
        super().__init__(message)
        self.reason = reason


class ValidationError(DomainError):
    """Raised when input data is missing, malformed or violates domain rules."""

    status_code = 400


class NotFoundError(DomainError):
    """Raised when a referenced entity (or a non-empty result) does not exist."""

    status_code = 404


class ConflictError(DomainError):
    """Raised when creating an entity whose identifier is already taken."""

    status_code = 409


class StoreError(DomainError):
    """Raised when the underlying persistence layer fails."""

    status_code = 500
