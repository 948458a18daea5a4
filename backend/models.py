from sqlalchemy import Column, String, Boolean, Text, DateTime, CheckConstraint, Index
from datetime import datetime, timezone
from typing import Optional

from database import Base
from domain.aggregates.category import Category
from domain.value_objects.category_id import CategoryID


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back naive datetimes; everything is stored as UTC
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class CategoryModel(Base):
    """
    Persistent form of the Category aggregate.

    Soft delete:
    - active = True  -> deleted_at IS NULL
    - active = False -> deleted_at holds the deactivation time
    """
    __tablename__ = 'category'

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        CheckConstraint("name != ''", name='ck_category_name_not_empty'),
        Index('idx_category_name', 'name'),
        Index('idx_category_created_at', 'created_at'),
    )

    @classmethod
    def from_aggregate(cls, category: Category) -> "CategoryModel":
        return cls(
            id=category.id.value,
            name=category.name,
            description=category.description,
            active=category.is_active,
            created_at=category.created_at,
            updated_at=category.updated_at,
            deleted_at=category.deleted_at,
        )

    def to_aggregate(self) -> Category:
        return Category.restore(
            CategoryID.from_string(self.id),
            self.name,
            self.description,
            bool(self.active),
            _as_utc(self.created_at),
            _as_utc(self.updated_at),
            _as_utc(self.deleted_at),
        )

    def __repr__(self) -> str:
        return f"<CategoryModel id={self.id} name={self.name!r} active={self.active}>"
