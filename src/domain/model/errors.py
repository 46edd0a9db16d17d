"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Every error carries a message and the HTTP status code the API layer
answers with, so a single exception handler can translate all of them.
"""


class DomainError(Exception):
    """Base class for all domain errors."""

    status_code: int = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class AuthError(DomainError):
    """Credentials are missing or do not match."""

    status_code = 401


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class ConflictError(DomainError):
    """Entity with the same unique key already exists."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""

    status_code = 404


class StorageError(DomainError):
    """Backing store failed or is unreachable."""

    status_code = 503
