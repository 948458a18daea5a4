"""
Category command DTOs.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CreateCategoryCommand:
    """Input of the create-category use case."""

    name: Optional[str]
    description: Optional[str] = None
    is_active: bool = True

    @classmethod
    def with_values(cls, name: Optional[str], description: Optional[str], is_active: bool) -> "CreateCategoryCommand":
        return cls(name=name, description=description, is_active=is_active)


@dataclass(frozen=True)
class UpdateCategoryCommand:
    """Input of the update-category use case."""

    id: str
    name: Optional[str]
    description: Optional[str] = None
    is_active: bool = True

    @classmethod
    def with_values(
        cls,
        id: str,
        name: Optional[str],
        description: Optional[str],
        is_active: bool,
    ) -> "UpdateCategoryCommand":
        return cls(id=id, name=name, description=description, is_active=is_active)
