class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class ConflictError(DomainError):
    """Raised when a uniqueness constraint would be violated."""


class DuplicateRegistrationError(ConflictError):
    """Raised when an attendee already holds a registration for a session."""


class CapacityExceededError(DomainError):
    """Raised when a session has no seats left."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class PersistenceError(DomainError):
    """Raised when the underlying store fails."""
