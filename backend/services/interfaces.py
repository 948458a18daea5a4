"""
Service Interfaces

Abstract base classes for the category use cases, following the Dependency
Inversion Principle. One small interface per use case, each with a single
`execute` method, so callers and tests depend on the contract only.
"""

from abc import ABC, abstractmethod

from domain.pagination import Pagination
from domain.result import Result
from domain.validation.notification import Notification
from domain.value_objects.search_query import CategorySearchQuery
from dtos.internal.category_commands import CreateCategoryCommand, UpdateCategoryCommand
from dtos.internal.category_outputs import CategoryListOutput, CategoryOutput


class ICreateCategoryUseCase(ABC):
    """Interface for creating categories."""

    @abstractmethod
    def execute(self, command: CreateCategoryCommand) -> Result[Notification, CategoryOutput]:
        """
        Create a category.

        Args:
            command: Name, description and active flag

        Returns:
            Right(CategoryOutput) on success, Left(Notification) when
            validation fails or the gateway raises
        """
        pass


class IUpdateCategoryUseCase(ABC):
    """Interface for updating categories."""

    @abstractmethod
    def execute(self, command: UpdateCategoryCommand) -> Result[Notification, CategoryOutput]:
        """
        Update an existing category.

        Args:
            command: ID plus the new name, description and active flag

        Returns:
            Right(CategoryOutput) on success, Left(Notification) when
            validation fails or the gateway raises

        Raises:
            NotFoundError: If no category has the given ID
        """
        pass


class IGetCategoryByIdUseCase(ABC):
    """Interface for loading a single category."""

    @abstractmethod
    def execute(self, id: str) -> CategoryOutput:
        """
        Load a category by ID.

        Raises:
            NotFoundError: If no category has the given ID
        """
        pass


class IDeleteCategoryUseCase(ABC):
    """Interface for deleting categories."""

    @abstractmethod
    def execute(self, id: str) -> None:
        """
        Delete a category by ID. Unknown IDs are not an error.
        """
        pass


class IListCategoriesUseCase(ABC):
    """Interface for paginated category listings."""

    @abstractmethod
    def execute(self, query: CategorySearchQuery) -> Pagination[CategoryListOutput]:
        """
        List categories matching a search query.

        Args:
            query: Paging, terms and ordering

        Returns:
            One page of category list items
        """
        pass
