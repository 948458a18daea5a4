"""
Domain Validation

Aggregates report rule violations to a ValidationHandler. Which handler is
passed decides what happens next:
- Notification: collects every error and never raises (command use cases)
- ThrowsValidationHandler: raises ValidationError on the first error
"""

from .error import Error
from .handler import ValidationHandler
from .notification import Notification
from .throws_validation_handler import ThrowsValidationHandler

__all__ = [
    "Error",
    "ValidationHandler",
    "Notification",
    "ThrowsValidationHandler",
]
