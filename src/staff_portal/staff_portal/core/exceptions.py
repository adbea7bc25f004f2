class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid or no session exists."""


class NotFoundError(DomainError):
    """Raised when an expected record (e.g. a staff profile) is missing."""


class DataAccessError(DomainError):
    """Raised when the record store fails, as opposed to returning no rows."""
