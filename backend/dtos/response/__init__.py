"""
Response DTOs

DTOs for outgoing API responses. These decouple the API from database models
and provide a clear contract for what data the API returns.
"""

from .category_response import CategoryListResponse, CategoryResponse, ErrorItem, ErrorResponse

__all__ = ["CategoryResponse", "CategoryListResponse", "ErrorItem", "ErrorResponse"]
