"""Domain layer errors.

Each error carries a message that is safe to show to API callers and an
optional ``details`` payload. The API layer maps each class to a status.
"""

from typing import Any


class DomainError(Exception):
    """Base domain error."""

    def __init__(self, message: str, details: Any = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(DomainError):
    """Malformed or out-of-bound input."""

    pass


class UnauthenticatedError(DomainError):
    """No verified caller identity where one is required."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, message: str, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} not found")


class ConflictError(DomainError):
    """Uniqueness violation not resolved by domain logic."""

    pass
