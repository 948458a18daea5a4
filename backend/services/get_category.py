"""
Get Category By ID Use Case
"""

from domain.aggregates.category import Category
from domain.aggregates.category_gateway import CategoryGateway
from domain.value_objects.category_id import CategoryID
from dtos.internal.category_outputs import CategoryOutput
from exceptions import NotFoundError
from services.interfaces import IGetCategoryByIdUseCase
from utils.logging_utils import log_operation


class GetCategoryByIdUseCase(IGetCategoryByIdUseCase):
    """
    Default implementation of IGetCategoryByIdUseCase.

    Gateway failures propagate unchanged.
    """

    def __init__(self, gateway: CategoryGateway):
        if gateway is None:
            raise ValueError("GetCategoryByIdUseCase requires a CategoryGateway")
        self.gateway = gateway

    @log_operation("get_category")
    def execute(self, id: str) -> CategoryOutput:
        category_id = CategoryID.from_string(id)
        category = self.gateway.find_by_id(category_id)
        if category is None:
            raise NotFoundError.with_id(Category.__name__, category_id)
        return CategoryOutput.from_category(category)
