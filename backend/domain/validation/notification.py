"""
Notification

Accumulating validation handler. Every appended error is kept, in order,
and nothing is ever raised. Command use cases return a Notification inside
a Left result when it holds errors.
"""

from typing import Callable, Iterable, List, Optional

from exceptions import DomainError
from .error import Error
from .handler import ValidationHandler


class Notification(ValidationHandler):
    """Ordered, duplicate-preserving collection of errors."""

    def __init__(self, errors: Optional[Iterable[Error]] = None):
        self._errors: List[Error] = list(errors or [])

    @classmethod
    def create(cls, error: Optional[Error] = None) -> "Notification":
        """
        Create a notification, optionally seeded with one error.

        Args:
            error: Optional first error

        Returns:
            New Notification instance
        """
        notification = cls()
        if error is not None:
            notification.append(error)
        return notification

    @classmethod
    def create_from_exception(cls, exc: BaseException) -> "Notification":
        """
        Wrap an exception into a single-error notification.

        The error message is the exception's description.
        """
        return cls.create(Error(_describe(exc)))

    def append(self, error: Error) -> "Notification":
        self._errors.append(error)
        return self

    def append_all(self, handler: ValidationHandler) -> "Notification":
        self._errors.extend(handler.errors)
        return self

    def validate(self, validation: Callable[[], object]) -> "Notification":
        try:
            validation()
        except DomainError as e:
            self._errors.extend(e.errors)
        except Exception as e:
            self._errors.append(Error(_describe(e)))
        return self

    @property
    def errors(self) -> List[Error]:
        return list(self._errors)

    def __repr__(self) -> str:
        return f"Notification(errors={self._errors!r})"


def _describe(exc: BaseException) -> str:
    message = getattr(exc, "message", None) or str(exc)
    return message or type(exc).__name__
