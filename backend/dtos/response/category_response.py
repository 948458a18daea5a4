"""
Category Response DTOs

DTOs for category-related API responses.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional, List

from domain.pagination import Pagination
from domain.validation.handler import ValidationHandler
from dtos.internal.category_outputs import CategoryListOutput, CategoryOutput


class CategoryResponse(BaseModel):
    """
    Response DTO for category information.

    Separates the API response from the use case output so that both
    can evolve independently.
    """

    id: str = Field(description="Category ID")
    name: Optional[str] = Field(None, description="Category name")
    description: Optional[str] = Field(None, description="Free-text description")
    is_active: bool = Field(description="Whether the category is active")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last modification timestamp")
    deleted_at: Optional[datetime] = Field(None, description="Soft-delete timestamp, set while inactive")

    class Config:
        """Pydantic configuration."""
        from_attributes = True

    @classmethod
    def from_output(cls, output: CategoryOutput | CategoryListOutput) -> "CategoryResponse":
        return cls.model_validate(output)


class CategoryListResponse(BaseModel):
    """
    Response DTO for a page of categories.
    """

    current_page: int = Field(description="Zero-based page index")
    per_page: int = Field(description="Page size")
    total: int = Field(description="Number of categories matching the query")
    items: List[CategoryResponse] = Field(description="Categories on this page")

    @classmethod
    def from_pagination(cls, page: Pagination[CategoryListOutput]) -> "CategoryListResponse":
        return cls(
            current_page=page.current_page,
            per_page=page.per_page,
            total=page.total,
            items=[CategoryResponse.from_output(item) for item in page.items],
        )


class ErrorItem(BaseModel):
    """Single error message."""

    message: str


class ErrorResponse(BaseModel):
    """
    Response DTO for failed requests.

    Carries every error collected, in order.
    """

    message: str = Field(description="First error message")
    errors: List[ErrorItem] = Field(default_factory=list, description="All error messages")

    @classmethod
    def from_handler(cls, handler: ValidationHandler) -> "ErrorResponse":
        first = handler.first_error()
        return cls(
            message=first.message if first else "",
            errors=[ErrorItem(message=error.message) for error in handler.errors],
        )

    @classmethod
    def from_messages(cls, messages: List[str]) -> "ErrorResponse":
        return cls(
            message=messages[0] if messages else "",
            errors=[ErrorItem(message=message) for message in messages],
        )
