"""
Category output DTOs.

Read-only snapshots of a Category returned by the use cases.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from domain.aggregates.category import Category


@dataclass(frozen=True)
class CategoryOutput:
    """
    Full category snapshot.

    Returned by the create, update and get-by-id use cases.
    """

    id: str
    name: Optional[str]
    description: Optional[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_category(cls, category: Category) -> "CategoryOutput":
        return cls(
            id=category.id.value,
            name=category.name,
            description=category.description,
            is_active=category.is_active,
            created_at=category.created_at,
            updated_at=category.updated_at,
            deleted_at=category.deleted_at,
        )


@dataclass(frozen=True)
class CategoryListOutput:
    """Category item of a paginated listing."""

    id: str
    name: Optional[str]
    description: Optional[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_category(cls, category: Category) -> "CategoryListOutput":
        return cls(
            id=category.id.value,
            name=category.name,
            description=category.description,
            is_active=category.is_active,
            created_at=category.created_at,
            updated_at=category.updated_at,
            deleted_at=category.deleted_at,
        )
