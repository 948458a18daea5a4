"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application.

Validation failures inside command use cases are NOT raised: they travel back
to the caller as a Notification inside a Left result. The exceptions below are
for precondition failures (NotFoundError), fail-fast validation
(ValidationError) and infrastructure failures (DatabaseError).
"""

from typing import TYPE_CHECKING, Iterable, List

if TYPE_CHECKING:
    from domain.validation.error import Error


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, missing_keys: list[str] | None = None):
        details = {"missing_keys": missing_keys} if missing_keys else {}
        super().__init__(message, details)


class DomainError(ApplicationError):
    """
    Raised when a domain rule is broken.

    Carries the list of errors that caused it. The exception message is the
    first error's message, so a single-error failure reads naturally.
    """

    def __init__(self, message: str, errors: Iterable["Error"] | None = None):
        self.errors: List["Error"] = list(errors or [])
        super().__init__(message, {"errors": [error.message for error in self.errors]})

    @classmethod
    def with_error(cls, error: "Error") -> "DomainError":
        return cls(error.message, [error])

    @classmethod
    def with_errors(cls, errors: Iterable["Error"]) -> "DomainError":
        errors = list(errors)
        message = errors[0].message if errors else ""
        return cls(message, errors)


class ValidationError(DomainError):
    """Raised by the fail-fast validation handler when a field rule fails"""


class NotFoundError(DomainError):
    """Raised when an aggregate looked up by ID does not exist"""

    @classmethod
    def with_id(cls, aggregate_name: str, aggregate_id: object) -> "NotFoundError":
        from domain.validation.error import Error

        value = getattr(aggregate_id, "value", aggregate_id)
        return cls.with_error(Error(f"{aggregate_name} with ID {value} was not found"))


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
