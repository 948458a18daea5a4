"""
Validation Handler Interface

Abstract sink for validation errors. Aggregates call `append` for each
broken rule without knowing whether the handler collects or raises.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from .error import Error


class ValidationHandler(ABC):
    """
    Interface for validation error handlers.

    Both implementations expose the same append API so that
    `Category.validate(handler)` works with either of them.
    """

    @abstractmethod
    def append(self, error: Error) -> "ValidationHandler":
        """
        Record a single error.

        Args:
            error: Error to record

        Returns:
            The handler itself, to allow chaining
        """
        pass

    @abstractmethod
    def append_all(self, handler: "ValidationHandler") -> "ValidationHandler":
        """
        Record every error held by another handler, preserving order.

        Args:
            handler: Handler whose errors are merged in

        Returns:
            The handler itself, to allow chaining
        """
        pass

    @abstractmethod
    def validate(self, validation: Callable[[], object]) -> "ValidationHandler":
        """
        Run a validation callable and record whatever it raises.

        Args:
            validation: Zero-argument callable

        Returns:
            The handler itself, to allow chaining
        """
        pass

    @property
    @abstractmethod
    def errors(self) -> List[Error]:
        """Errors recorded so far, in insertion order."""
        pass

    def has_error(self) -> bool:
        """Check if at least one error was recorded."""
        return len(self.errors) > 0

    def first_error(self) -> Optional[Error]:
        """Return the first recorded error, or None when there is none."""
        errors = self.errors
        return errors[0] if errors else None
