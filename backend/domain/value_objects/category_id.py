"""
CategoryID Value Object

Immutable, globally unique identifier of a Category aggregate.
"""

from dataclasses import dataclass

from utils.uuid_helper import generate_uuid


@dataclass(frozen=True)
class CategoryID:
    """
    Opaque category identifier.

    Generated once when the aggregate is created and compared by value.
    """

    value: str

    def __post_init__(self):
        """Validate identifier."""
        if not isinstance(self.value, str) or not self.value:
            raise ValueError(f"Category ID must be a non-empty string: {self.value!r}")

    @classmethod
    def unique(cls) -> "CategoryID":
        """Generate a new random identifier."""
        return cls(generate_uuid())

    @classmethod
    def from_string(cls, value: str) -> "CategoryID":
        """Wrap an existing identifier value."""
        return cls(value)

    def __str__(self) -> str:
        return self.value
