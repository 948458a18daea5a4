"""
Category API endpoints

Thin HTTP adapter over the category use cases. Command endpoints unpack the
Left/Right result explicitly; lookups let NotFoundError surface as 404.
"""
from fastapi import APIRouter, Depends, Response
import logging

from constants import HTTPStatus, SearchDefaults
from dependencies import (
    get_create_category_use_case,
    get_delete_category_use_case,
    get_get_category_use_case,
    get_list_categories_use_case,
    get_update_category_use_case,
)
from domain.value_objects.search_query import CategorySearchQuery
from dtos.internal.category_commands import CreateCategoryCommand, UpdateCategoryCommand
from dtos.request.category_request import CategoryListRequest, CreateCategoryRequest, UpdateCategoryRequest
from dtos.response.category_response import CategoryListResponse, CategoryResponse
from services.interfaces import (
    ICreateCategoryUseCase,
    IDeleteCategoryUseCase,
    IGetCategoryByIdUseCase,
    IListCategoriesUseCase,
    IUpdateCategoryUseCase,
)
from utils.error_handlers import handle_api_errors, notification_error

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/categories", response_model=CategoryResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create category")
def create_category(
    request: CreateCategoryRequest,
    use_case: ICreateCategoryUseCase = Depends(get_create_category_use_case)
):
    """
    Create a category.

    Returns:
        CategoryResponse: The created category

    Raises:
        HTTPException: 422 with every validation error, or 422 with the
            gateway error when persistence fails
    """
    command = CreateCategoryCommand.with_values(request.name, request.description, request.is_active)
    result = use_case.execute(command)

    if result.is_left():
        raise notification_error(result.get_left())
    return CategoryResponse.from_output(result.get())


@router.get("/categories", response_model=CategoryListResponse)
@handle_api_errors("List categories")
def list_categories(
    search: str = "",
    page: int = SearchDefaults.PAGE,
    per_page: int = SearchDefaults.PER_PAGE,
    sort: str = SearchDefaults.SORT,
    dir: str = SearchDefaults.DIRECTION,
    use_case: IListCategoriesUseCase = Depends(get_list_categories_use_case)
):
    """
    List categories.

    Query parameters:
    - search: Text matched against name or description (case-insensitive)
    - page: Zero-based page index
    - per_page: Page size
    - sort: name, description, createdAt, updatedAt, isActive
    - dir: asc or desc

    Raises:
        HTTPException: 400 if a parameter is invalid
    """
    request = CategoryListRequest(search=search, page=page, per_page=per_page, sort=sort, dir=dir)
    query = CategorySearchQuery(
        page=request.page,
        per_page=request.per_page,
        terms=request.search,
        sort=request.sort,
        direction=request.dir
    )
    return CategoryListResponse.from_pagination(use_case.execute(query))


@router.get("/categories/{category_id}", response_model=CategoryResponse)
@handle_api_errors("Get category")
def get_category(
    category_id: str,
    use_case: IGetCategoryByIdUseCase = Depends(get_get_category_use_case)
):
    """
    Get a specific category.

    Raises:
        HTTPException: 404 if the category does not exist
    """
    return CategoryResponse.from_output(use_case.execute(category_id))


@router.put("/categories/{category_id}", response_model=CategoryResponse)
@handle_api_errors("Update category")
def update_category(
    category_id: str,
    request: UpdateCategoryRequest,
    use_case: IUpdateCategoryUseCase = Depends(get_update_category_use_case)
):
    """
    Update a category.

    Raises:
        HTTPException: 404 if the category does not exist, 422 with every
            validation error otherwise
    """
    command = UpdateCategoryCommand.with_values(
        category_id, request.name, request.description, request.is_active
    )
    result = use_case.execute(command)

    if result.is_left():
        raise notification_error(result.get_left())
    return CategoryResponse.from_output(result.get())


@router.delete("/categories/{category_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete category")
def delete_category(
    category_id: str,
    use_case: IDeleteCategoryUseCase = Depends(get_delete_category_use_case)
):
    """
    Delete a category. Deleting an unknown category also returns 204.
    """
    use_case.execute(category_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
