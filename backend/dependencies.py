"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating the gateway and the
category use cases, following the Dependency Inversion Principle. Routes
depend on the use case interfaces, so tests can override any provider.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from domain.aggregates.category_gateway import CategoryGateway
from repositories.category_gateway import SQLAlchemyCategoryGateway
from services.interfaces import (
    ICreateCategoryUseCase,
    IDeleteCategoryUseCase,
    IGetCategoryByIdUseCase,
    IListCategoriesUseCase,
    IUpdateCategoryUseCase,
)
from services.create_category import CreateCategoryUseCase
from services.delete_category import DeleteCategoryUseCase
from services.get_category import GetCategoryByIdUseCase
from services.list_categories import ListCategoriesUseCase
from services.update_category import UpdateCategoryUseCase


def get_category_gateway(db: Session = Depends(get_db)) -> CategoryGateway:
    """
    Factory function for creating the CategoryGateway.

    Args:
        db: Database session

    Returns:
        SQLAlchemyCategoryGateway bound to the request's session
    """
    return SQLAlchemyCategoryGateway(db)


def get_create_category_use_case(
    gateway: CategoryGateway = Depends(get_category_gateway)
) -> ICreateCategoryUseCase:
    """Factory function for the create-category use case."""
    return CreateCategoryUseCase(gateway)


def get_update_category_use_case(
    gateway: CategoryGateway = Depends(get_category_gateway)
) -> IUpdateCategoryUseCase:
    """Factory function for the update-category use case."""
    return UpdateCategoryUseCase(gateway)


def get_get_category_use_case(
    gateway: CategoryGateway = Depends(get_category_gateway)
) -> IGetCategoryByIdUseCase:
    """Factory function for the get-category-by-id use case."""
    return GetCategoryByIdUseCase(gateway)


def get_delete_category_use_case(
    gateway: CategoryGateway = Depends(get_category_gateway)
) -> IDeleteCategoryUseCase:
    """Factory function for the delete-category use case."""
    return DeleteCategoryUseCase(gateway)


def get_list_categories_use_case(
    gateway: CategoryGateway = Depends(get_category_gateway)
) -> IListCategoriesUseCase:
    """Factory function for the list-categories use case."""
    return ListCategoriesUseCase(gateway)
