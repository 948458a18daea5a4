"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and the SQLAlchemy implementation of the CategoryGateway.
"""

from .base_repository import BaseRepository
from .category_repository import CategoryRepository
from .category_gateway import SQLAlchemyCategoryGateway

__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "SQLAlchemyCategoryGateway",
]
