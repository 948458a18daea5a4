"""
Fail-fast validation handler.

Used for direct validation calls outside the command flow: the first
appended error aborts validation with a ValidationError.
"""

from typing import Callable, List

from exceptions import DomainError, ValidationError
from .error import Error
from .handler import ValidationHandler


class ThrowsValidationHandler(ValidationHandler):
    """
    Handler that raises instead of collecting.

    The raised ValidationError carries every error accumulated during the
    call, including the one that triggered it.
    """

    def __init__(self):
        self._errors: List[Error] = []

    def append(self, error: Error) -> "ThrowsValidationHandler":
        self._errors.append(error)
        raise ValidationError.with_errors(self._errors)

    def append_all(self, handler: ValidationHandler) -> "ThrowsValidationHandler":
        self._errors.extend(handler.errors)
        if self._errors:
            raise ValidationError.with_errors(self._errors)
        return self

    def validate(self, validation: Callable[[], object]) -> "ThrowsValidationHandler":
        try:
            validation()
        except DomainError as e:
            self._errors.extend(e.errors)
            raise ValidationError.with_errors(self._errors) from e
        except Exception as e:
            self._errors.append(Error(str(e) or type(e).__name__))
            raise ValidationError.with_errors(self._errors) from e
        return self

    @property
    def errors(self) -> List[Error]:
        return list(self._errors)
