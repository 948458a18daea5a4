"""
SQLAlchemy implementation of the CategoryGateway.

Each call is its own unit of work: it commits on success and rolls back on
failure. Database failures surface as DatabaseError.
"""

import logging
from typing import Callable, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from constants import SearchDefaults
from domain.aggregates.category import Category
from domain.aggregates.category_gateway import CategoryGateway
from domain.pagination import Pagination
from domain.value_objects.category_id import CategoryID
from domain.value_objects.search_query import CategorySearchQuery, SortDirection
from exceptions import DatabaseError
from models import CategoryModel
from .category_repository import CategoryRepository
from .category_specifications import category_terms_spec

logger = logging.getLogger(__name__)

T = TypeVar('T')


class SQLAlchemyCategoryGateway(CategoryGateway):
    """CategoryGateway backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db
        self.repository = CategoryRepository(db)

    def create(self, category: Category) -> Category:
        def _create():
            model = self.repository.create(CategoryModel.from_aggregate(category))
            return model.to_aggregate()

        return self._in_transaction("create", _create)

    def update(self, category: Category) -> Category:
        def _update():
            model = self.repository.update(CategoryModel.from_aggregate(category))
            return model.to_aggregate()

        return self._in_transaction("update", _update)

    def delete_by_id(self, category_id: CategoryID) -> None:
        def _delete():
            if not self.repository.delete_by_id(category_id.value):
                logger.debug(f"Category {category_id} not found, nothing to delete")

        self._in_transaction("delete_by_id", _delete)

    def find_by_id(self, category_id: CategoryID) -> Optional[Category]:
        try:
            model = self.repository.get_by_id(category_id.value)
        except SQLAlchemyError as e:
            raise DatabaseError("find_by_id", f"Failed to load category {category_id}: {e}") from e
        return model.to_aggregate() if model is not None else None

    def find_all(self, query: CategorySearchQuery) -> Pagination[Category]:
        sort_column = SearchDefaults.SORTABLE_FIELDS.get(query.sort)
        if sort_column is None:
            raise DatabaseError("find_all", f"Unsupported sort field: {query.sort}")

        try:
            items, total = self.repository.find_page(
                category_terms_spec(query.terms),
                sort_column,
                query.direction == SortDirection.DESC,
                query.offset,
                query.per_page
            )
        except SQLAlchemyError as e:
            raise DatabaseError("find_all", f"Failed to list categories: {e}") from e

        return Pagination(
            current_page=query.page,
            per_page=query.per_page,
            total=total,
            items=[model.to_aggregate() for model in items],
        )

    def _in_transaction(self, operation: str, work: Callable[[], T]) -> T:
        try:
            result = work()
            self.db.commit()
            return result
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Category {operation} failed: {e}")
            raise DatabaseError(operation, f"Category {operation} failed: {e}") from e
