"""
Category Gateway Interface

Persistence contract consumed by the category use cases. Implementations
live outside the domain (see repositories/category_gateway.py).
"""

from abc import ABC, abstractmethod
from typing import Optional

from domain.pagination import Pagination
from domain.value_objects.category_id import CategoryID
from domain.value_objects.search_query import CategorySearchQuery
from .category import Category


class CategoryGateway(ABC):
    """
    Interface for storing and querying Category aggregates.

    Implementations must be safe to call concurrently if the use cases
    are shared between callers.
    """

    @abstractmethod
    def create(self, category: Category) -> Category:
        """
        Persist a new category.

        Returns:
            The persisted representation
        """
        pass

    @abstractmethod
    def update(self, category: Category) -> Category:
        """
        Persist changes to an existing category.

        Returns:
            The persisted representation
        """
        pass

    @abstractmethod
    def delete_by_id(self, category_id: CategoryID) -> None:
        """
        Remove a category. Unknown IDs are ignored.
        """
        pass

    @abstractmethod
    def find_by_id(self, category_id: CategoryID) -> Optional[Category]:
        """
        Load a category.

        Returns:
            The category, or None if it does not exist
        """
        pass

    @abstractmethod
    def find_all(self, query: CategorySearchQuery) -> Pagination[Category]:
        """
        List categories.

        Filters by case-insensitive substring match of `query.terms` against
        name OR description (blank terms disable the filter), orders by
        `query.sort`/`query.direction`, then applies page/per_page.

        Returns:
            One page of categories
        """
        pass
