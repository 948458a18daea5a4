"""
Internal DTOs

DTOs passed into and out of the category use cases.
These are not exposed to external APIs directly.

Benefits:
- Use cases never hand out the mutable aggregate
- Commands are immutable snapshots of caller input
- Clear service boundaries
"""

from .category_commands import CreateCategoryCommand, UpdateCategoryCommand
from .category_outputs import CategoryListOutput, CategoryOutput

__all__ = [
    "CreateCategoryCommand",
    "UpdateCategoryCommand",
    "CategoryOutput",
    "CategoryListOutput",
]
