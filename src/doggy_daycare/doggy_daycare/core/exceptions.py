class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a dog or schedule id is unknown."""


class MigrationError(DomainError):
    """Raised when a stored document neither decodes nor migrates."""


class StorageError(DomainError):
    """Raised when the data file cannot be read or written."""
