"""
Error handling decorators and utilities for API endpoints.

This module centralizes how application exceptions become HTTP responses,
so every category endpoint reports errors the same way:

    {"detail": {"message": "...", "errors": [{"message": "..."}, ...]}}
"""

from functools import wraps
from typing import Callable, List
from fastapi import HTTPException
import inspect
import logging

from constants import HTTPStatus
from domain.validation.handler import ValidationHandler
from dtos.response.category_response import ErrorResponse
from exceptions import (
    ApplicationError,
    ConfigurationError,
    DatabaseError,
    DomainError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


def error_detail(messages: List[str]) -> dict:
    """Build the error body for a list of messages."""
    return ErrorResponse.from_messages(messages).model_dump()


def notification_error(handler: ValidationHandler) -> HTTPException:
    """
    Convert collected validation errors into a 422 response.

    Args:
        handler: Notification returned in a Left result

    Returns:
        HTTPException ready to be raised
    """
    return HTTPException(
        status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
        detail=ErrorResponse.from_handler(handler).model_dump()
    )


def _translate(operation_name: str, e: Exception) -> HTTPException:
    if isinstance(e, NotFoundError):
        logger.info(f"{operation_name} - Not found: {e.message}")
        return HTTPException(
            status_code=HTTPStatus.NOT_FOUND,
            detail=error_detail([error.message for error in e.errors])
        )
    if isinstance(e, DomainError):
        logger.warning(f"{operation_name} - Domain error: {e.message}")
        return HTTPException(
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            detail=error_detail([error.message for error in e.errors])
        )
    if isinstance(e, DatabaseError):
        logger.error(f"{operation_name} - Database error: {e.message}", exc_info=True)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=error_detail([f"Database operation failed: {e.message}"])
        )
    if isinstance(e, ConfigurationError):
        logger.error(f"{operation_name} - Configuration error: {e.message}")
        return HTTPException(
            status_code=HTTPStatus.SERVICE_UNAVAILABLE,
            detail=error_detail([e.message])
        )
    if isinstance(e, ApplicationError):
        logger.error(f"{operation_name} - Application error: {e.message}", exc_info=True)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=error_detail([f"{operation_name} failed: {e.message}"])
        )
    if isinstance(e, ValueError):
        logger.warning(f"{operation_name} - Invalid input: {e}")
        return HTTPException(
            status_code=HTTPStatus.BAD_REQUEST,
            detail=error_detail([str(e)])
        )
    logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=True)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=error_detail([f"{operation_name} failed. Please check server logs."])
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle common API errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Get category")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.get("/{category_id}")
        @handle_api_errors("Get category")
        def get_category(category_id: str, ...):
            return use_case.execute(category_id)
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                raise _translate(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise _translate(operation_name, e) from e

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator
