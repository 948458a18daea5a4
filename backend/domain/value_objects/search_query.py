"""
Search Query Value Objects

Parameters of a paginated category listing. The use case passes them
through untouched; only the gateway interprets them.
"""

from dataclasses import dataclass, field
from enum import Enum


class SortDirection(str, Enum):
    """Ordering direction for listings."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_string(cls, value: str) -> "SortDirection":
        """
        Create SortDirection from string value (case-insensitive).

        Args:
            value: "asc" or "desc" in any case

        Returns:
            SortDirection instance

        Raises:
            ValueError: If value is not a valid direction
        """
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Invalid sort direction: {value}")


@dataclass(frozen=True)
class CategorySearchQuery:
    """
    Immutable listing query.

    Attributes:
        page: Zero-based page index
        per_page: Page size
        terms: Free-text filter matched against name or description
        sort: Field to order by (e.g. "name", "createdAt")
        direction: Ordering direction
    """

    page: int = 0
    per_page: int = 10
    terms: str = ""
    sort: str = "name"
    direction: SortDirection = field(default=SortDirection.ASC)

    def __post_init__(self):
        """Validate paging and normalise direction."""
        if self.page < 0:
            raise ValueError(f"Page cannot be negative: {self.page}")
        if self.per_page < 0:
            raise ValueError(f"Page size cannot be negative: {self.per_page}")
        if not isinstance(self.direction, SortDirection):
            object.__setattr__(self, "direction", SortDirection.from_string(self.direction))

    @property
    def offset(self) -> int:
        """Number of rows to skip for this page."""
        return self.page * self.per_page
