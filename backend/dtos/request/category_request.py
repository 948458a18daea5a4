"""
Category Request DTOs

DTOs for category-related API requests.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional

from constants import SearchDefaults


class CreateCategoryRequest(BaseModel):
    """
    Request DTO for creating a category.

    Field rules (name length etc.) are NOT checked here: the aggregate
    validates them and reports every broken rule at once.
    """

    name: Optional[str] = Field(None, description="Category name")
    description: Optional[str] = Field(None, description="Free-text description")
    is_active: bool = Field(True, description="Whether the category is active")

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "name": "Filmes",
                "description": "A categoria mais assistida",
                "is_active": True
            }
        }


class UpdateCategoryRequest(CreateCategoryRequest):
    """Request DTO for updating a category. Same fields as creation."""


class CategoryListRequest(BaseModel):
    """
    Request DTO for listing categories.

    Provides a clear contract for paging, search and ordering parameters.
    """

    search: str = Field("", description="Text matched against name or description")
    page: int = Field(SearchDefaults.PAGE, description="Zero-based page index")
    per_page: int = Field(SearchDefaults.PER_PAGE, description="Page size")
    sort: str = Field(SearchDefaults.SORT, description="Field to order by")
    dir: str = Field(SearchDefaults.DIRECTION, description="asc or desc")

    @field_validator("page")
    @classmethod
    def validate_page(cls, v):
        """Ensure page is non-negative."""
        if v < 0:
            raise ValueError("Page must be non-negative")
        return v

    @field_validator("per_page")
    @classmethod
    def validate_per_page(cls, v):
        """Ensure page size is within reasonable bounds; 0 returns only the total."""
        if v < 0 or v > SearchDefaults.MAX_PER_PAGE:
            raise ValueError(f"per_page must be between 0 and {SearchDefaults.MAX_PER_PAGE}")
        return v

    @field_validator("sort")
    @classmethod
    def validate_sort(cls, v):
        """Only known fields can be used for ordering."""
        if v not in SearchDefaults.SORTABLE_FIELDS:
            raise ValueError(f"Unsupported sort field: {v}")
        return v

    @field_validator("dir")
    @classmethod
    def validate_dir(cls, v):
        """Accept asc/desc in any case."""
        value = v.lower()
        if value not in ("asc", "desc"):
            raise ValueError("dir must be 'asc' or 'desc'")
        return value
