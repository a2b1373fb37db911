from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 500


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    status_code = 400


class InvalidStateError(ValidationError):
    """Raised when stored data cannot be used to complete an action."""


class InvalidStoredLoginError(InvalidStateError):
    """Stored login instant is missing or malformed."""

    def __init__(self, message: str = "Invalid stored login time"):
        super().__init__(message)


class ClockSkewError(InvalidStateError):
    """Mark-out instant precedes the stored login instant."""

    def __init__(self, message: str = "Logout time is earlier than login time"):
        super().__init__(message)


class AuthenticationError(DomainError):
    """Raised when no authenticated identity is present."""

    status_code = 401


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    status_code = 403


class NotFoundError(DomainError):
    status_code = 404


class EmployeeNotFoundError(NotFoundError):
    def __init__(self, message: str = "Employee not found"):
        super().__init__(message)


class RecordNotFoundError(NotFoundError):
    def __init__(self, message: str = "No attendance record found for today"):
        super().__init__(message)


class DuplicateRecordError(DomainError):
    """Raised by stores when a uniqueness constraint rejects an insert."""

    status_code = 409
