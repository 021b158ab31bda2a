class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MissingFieldError(ValidationError):
    """Raised when a required field is absent or blank."""


class InvalidFormatError(ValidationError):
    """Raised when a field cannot be parsed (id, date)."""


class InvalidRangeError(ValidationError):
    """Raised when the end date falls before the start date."""


class PastDateError(ValidationError):
    """Raised when a request starts before today."""


class InvalidStatusError(ValidationError):
    """Raised when a status value is not one of the known statuses."""


class NotFoundError(DomainError):
    """Raised when the referenced record does not exist."""


class InvalidTransitionError(DomainError):
    """Raised when a status change is not allowed from the current status."""


class AuthenticationError(DomainError):
    """Raised when the acting principal cannot be identified."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class PersistenceError(Exception):
    """Raised when the storage layer fails (unavailable, constraint violation)."""
