"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- CategoryID: Opaque identifier of a Category aggregate
- SortDirection: Ascending/descending ordering (immutable enum-like value)
- CategorySearchQuery: Paging, free-text terms and ordering for listings
"""

from .category_id import CategoryID
from .search_query import CategorySearchQuery, SortDirection

__all__ = ["CategoryID", "CategorySearchQuery", "SortDirection"]
