"""
Request DTOs

DTOs for incoming API requests. These decouple the API from database models
and provide a clear contract for what data the API expects.
"""

from .category_request import CategoryListRequest, CreateCategoryRequest, UpdateCategoryRequest

__all__ = ["CreateCategoryRequest", "UpdateCategoryRequest", "CategoryListRequest"]
