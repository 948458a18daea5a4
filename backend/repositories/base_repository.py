"""
Generic persistence helpers shared by the table-specific repositories.
"""

from typing import Generic, TypeVar, Optional, Type
from sqlalchemy.orm import Session

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Keyed add/load/merge/remove on a single mapped class.

    Nothing here commits: every method only flushes, so the caller that
    owns the unit of work (the gateway) decides between commit and
    rollback.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Args:
            db: Session shared with the owning gateway
            model: Mapped class this repository reads and writes
        """
        self.db = db
        self.model = model

    def create(self, obj: T) -> T:
        """
        Stage a new row and flush it so constraint violations surface now.

        Args:
            obj: Transient model instance

        Returns:
            The same instance, now pending in the session
        """
        self.db.add(obj)
        self.db.flush()
        return obj

    def get_by_id(self, id: str) -> Optional[T]:
        """
        Load a row by primary key, using the identity map when possible.

        Args:
            id: Primary key value

        Returns:
            Mapped instance, or None when no row has that key
        """
        return self.db.get(self.model, id)

    def update(self, obj: T) -> T:
        """
        Copy a detached instance's state onto the stored record.

        Args:
            obj: Detached instance carrying the new column values

        Returns:
            The session-attached instance
        """
        merged = self.db.merge(obj)
        self.db.flush()
        return merged

    def delete_by_id(self, id: str) -> bool:
        """
        Remove a row by primary key.

        Returns:
            False when there was nothing to remove
        """
        existing = self.get_by_id(id)
        if existing is None:
            return False
        self.db.delete(existing)
        self.db.flush()
        return True
