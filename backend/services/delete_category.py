"""
Delete Category Use Case
"""

import logging

from domain.aggregates.category_gateway import CategoryGateway
from domain.value_objects.category_id import CategoryID
from services.interfaces import IDeleteCategoryUseCase
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class DeleteCategoryUseCase(IDeleteCategoryUseCase):
    """
    Default implementation of IDeleteCategoryUseCase.

    Deleting an unknown ID is a no-op; the gateway guarantees it.
    Gateway failures propagate unchanged.
    """

    def __init__(self, gateway: CategoryGateway):
        if gateway is None:
            raise ValueError("DeleteCategoryUseCase requires a CategoryGateway")
        self.gateway = gateway

    @log_operation("delete_category")
    def execute(self, id: str) -> None:
        self.gateway.delete_by_id(CategoryID.from_string(id))
        logger.info(f"Deleted category {id} (if it existed)")
