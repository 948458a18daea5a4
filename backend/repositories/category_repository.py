"""
Category repository for category-specific data access operations.

Supports the Specification Pattern for filtered, ordered, paged queries.
"""

from typing import List, Optional, Tuple
from sqlalchemy.orm import Session

from models import CategoryModel
from .base_repository import BaseRepository
from .specifications import Specification


class CategoryRepository(BaseRepository[CategoryModel]):
    """Repository for CategoryModel operations."""

    def __init__(self, db: Session):
        super().__init__(db, CategoryModel)

    def find_page(
        self,
        spec: Optional[Specification[CategoryModel]],
        sort_column: str,
        descending: bool,
        offset: int,
        limit: int
    ) -> Tuple[List[CategoryModel], int]:
        """
        Find one page of categories.

        Args:
            spec: Filter to apply, or None for every category
            sort_column: CategoryModel column to order by
            descending: Order direction
            offset: Rows to skip
            limit: Maximum rows to return

        Returns:
            Tuple of (categories on the page, total matching categories)
        """
        query = self.db.query(self.model)
        if spec is not None:
            query = query.filter(spec.to_sql_filter())

        total = query.count()

        column = getattr(self.model, sort_column)
        # id breaks ties so page boundaries stay stable
        query = query.order_by(column.desc() if descending else column.asc(), self.model.id.asc())

        items = query.offset(offset).limit(limit).all()
        return items, total
