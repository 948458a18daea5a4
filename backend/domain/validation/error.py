"""
Error Value Object

A single human-readable validation or domain error.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Error:
    """Immutable error message. Two errors with the same message are equal."""

    message: str

    def __str__(self) -> str:
        return self.message
