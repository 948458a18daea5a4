"""
Generic paginated result.
"""

from dataclasses import dataclass, field
from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Pagination(Generic[T]):
    """
    One page of items plus the paging metadata it was produced with.

    Attributes:
        current_page: Zero-based page index
        per_page: Requested page size
        total: Number of items matching the query across all pages
        items: Items on this page, in order
    """

    current_page: int
    per_page: int
    total: int
    items: List[T] = field(default_factory=list)

    def map(self, fn: Callable[[T], U]) -> "Pagination[U]":
        """
        Transform every item, keeping order, count and paging metadata.

        Args:
            fn: Function applied to each item

        Returns:
            New Pagination with the transformed items
        """
        return Pagination(
            current_page=self.current_page,
            per_page=self.per_page,
            total=self.total,
            items=[fn(item) for item in self.items],
        )
