"""
Domain Aggregates

Aggregates are clusters of domain objects that can be treated as a single unit.
The aggregate root is the only member of the aggregate that outside objects
are allowed to hold references to.

Examples:
- Category: Catalog category with soft-delete lifecycle
"""

from .category import Category
from .category_gateway import CategoryGateway
from .category_validator import CategoryValidator

__all__ = ["Category", "CategoryGateway", "CategoryValidator"]
