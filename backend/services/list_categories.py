"""
List Categories Use Case
"""

from domain.aggregates.category_gateway import CategoryGateway
from domain.pagination import Pagination
from domain.value_objects.search_query import CategorySearchQuery
from dtos.internal.category_outputs import CategoryListOutput
from services.interfaces import IListCategoriesUseCase
from utils.logging_utils import log_operation


class ListCategoriesUseCase(IListCategoriesUseCase):
    """
    Default implementation of IListCategoriesUseCase.

    The query goes to the gateway untouched; gateway failures propagate.
    """

    def __init__(self, gateway: CategoryGateway):
        if gateway is None:
            raise ValueError("ListCategoriesUseCase requires a CategoryGateway")
        self.gateway = gateway

    @log_operation("list_categories")
    def execute(self, query: CategorySearchQuery) -> Pagination[CategoryListOutput]:
        return self.gateway.find_all(query).map(CategoryListOutput.from_category)
