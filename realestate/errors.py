"""Custom domain exceptions for the application."""


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    pass


class DuplicateResourceError(DomainError):
    """Raised when a create or update would clash with an existing record (email, phone, rating...)."""

    pass


class DomainValidationError(DomainError):
    """Raised when business rules or domain validation fail (e.g. missing required fields)."""

    pass


class UnauthorizedError(DomainError):
    """Raised when credentials are missing or do not match."""

    pass


class MissingTableError(DomainError):
    """Raised when the backing table of a resource has not been created yet."""

    pass
