"""
Category Aggregate

A catalog category. Mutated in place through `update`, `activate` and
`deactivate`; removal from storage is the gateway's job.

Soft delete: `deleted_at` is set exactly while the category is inactive.
Every constructor and mutator re-checks this through
`_assert_soft_delete_invariant`.
"""

import copy
from datetime import datetime, timedelta, timezone
from typing import Optional

from constants import CategoryRules
from domain.validation.error import Error
from domain.validation.handler import ValidationHandler
from domain.value_objects.category_id import CategoryID
from exceptions import DomainError
from .category_validator import CategoryValidator


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class Category:
    """Category aggregate root."""

    def __init__(
        self,
        id: CategoryID,
        name: Optional[str],
        description: Optional[str],
        active: bool,
        created_at: datetime,
        updated_at: datetime,
        deleted_at: Optional[datetime] = None,
    ):
        self._id = id
        self.name = name
        self.description = description
        self.active = active
        self._created_at = created_at
        self.updated_at = updated_at
        self.deleted_at = deleted_at
        self._assert_soft_delete_invariant()

    @classmethod
    def new_category(cls, name: Optional[str], description: Optional[str], active: bool) -> "Category":
        """
        Create a brand new category.

        Assigns a fresh ID and stamps created_at/updated_at with the same
        instant. An inactive category is soft-deleted from the start.

        Args:
            name: Category name (validated later, may be invalid here)
            description: Optional free text
            active: Whether the category starts active

        Returns:
            New Category instance
        """
        now = utc_now()
        deleted_at = None if active else now
        return cls(CategoryID.unique(), name, description, active, now, now, deleted_at)

    @classmethod
    def restore(
        cls,
        id: CategoryID,
        name: Optional[str],
        description: Optional[str],
        active: bool,
        created_at: datetime,
        updated_at: datetime,
        deleted_at: Optional[datetime],
    ) -> "Category":
        """Rebuild a category from persisted state."""
        return cls(id, name, description, active, created_at, updated_at, deleted_at)

    @property
    def id(self) -> CategoryID:
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def is_active(self) -> bool:
        return self.active

    def validate(self, handler: ValidationHandler) -> None:
        """
        Check the aggregate's rules against a validation handler.

        Args:
            handler: Notification (collects) or ThrowsValidationHandler (raises)
        """
        CategoryValidator(self, handler).validate()

    def activate(self) -> "Category":
        """Reactivate the category, clearing the soft-delete marker."""
        self._set_active(True, self._touch())
        return self

    def deactivate(self) -> "Category":
        """Deactivate the category; an existing soft-delete marker is kept."""
        self._set_active(False, self._touch())
        return self

    def update(self, name: Optional[str], description: Optional[str], active: bool) -> "Category":
        """
        Replace name, description and active flag.

        updated_at advances once; deleted_at follows the new active flag.

        Args:
            name: New name
            description: New description
            active: New active flag

        Returns:
            The category itself
        """
        now = self._touch()
        self.name = name
        self.description = description
        self._set_active(active, now)
        return self

    def clone(self) -> "Category":
        """Independent copy of this aggregate."""
        return copy.copy(self)

    def _touch(self) -> datetime:
        # updated_at must strictly advance even when the clock has not
        now = utc_now()
        if now <= self.updated_at:
            now = self.updated_at + timedelta(microseconds=1)
        self.updated_at = now
        return now

    def _set_active(self, active: bool, now: datetime) -> None:
        if active:
            self.deleted_at = None
        elif self.deleted_at is None:
            self.deleted_at = now
        self.active = active
        self._assert_soft_delete_invariant()

    def _assert_soft_delete_invariant(self) -> None:
        if (self.deleted_at is not None) == bool(self.active):
            raise DomainError.with_error(Error(CategoryRules.SOFT_DELETE_INVARIANT))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Category(id={self._id.value!r}, name={self.name!r}, active={self.active})"
