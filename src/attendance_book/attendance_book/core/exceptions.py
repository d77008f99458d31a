class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a member or class-scoped record does not exist."""


class ConflictError(DomainError):
    """Raised when an operation would break existing attendance data."""


class AlreadyCheckedInError(ConflictError):
    """Raised when a member checks in twice for the same session."""
