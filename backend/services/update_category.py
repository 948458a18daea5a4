"""
Update Category Use Case

Loads an existing Category, applies the new values on a copy, validates the
copy with an accumulating Notification and persists it. A missing category
is a precondition failure and raises NotFoundError; validation and gateway
failures come back as Left(Notification).
"""

import logging

from domain.aggregates.category import Category
from domain.aggregates.category_gateway import CategoryGateway
from domain.result import Left, Result, attempt
from domain.validation.notification import Notification
from domain.value_objects.category_id import CategoryID
from dtos.internal.category_commands import UpdateCategoryCommand
from dtos.internal.category_outputs import CategoryOutput
from exceptions import NotFoundError
from services.interfaces import IUpdateCategoryUseCase
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class UpdateCategoryUseCase(IUpdateCategoryUseCase):
    """Default implementation of IUpdateCategoryUseCase."""

    def __init__(self, gateway: CategoryGateway):
        if gateway is None:
            raise ValueError("UpdateCategoryUseCase requires a CategoryGateway")
        self.gateway = gateway

    @log_operation("update_category")
    def execute(self, command: UpdateCategoryCommand) -> Result[Notification, CategoryOutput]:
        category_id = CategoryID.from_string(command.id)

        existing = self.gateway.find_by_id(category_id)
        if existing is None:
            raise NotFoundError.with_id(Category.__name__, category_id)

        category = existing.clone().update(command.name, command.description, command.is_active)

        notification = Notification.create()
        category.validate(notification)

        if notification.has_error():
            logger.info(
                f"Rejected update of category {category_id} with "
                f"{len(notification.errors)} validation error(s)"
            )
            return Left(notification)

        return self._update(category)

    def _update(self, category: Category) -> Result[Notification, CategoryOutput]:
        result = attempt(lambda: self.gateway.update(category))
        if result.is_left():
            logger.error(f"Gateway failed to update category {category.id}: {result.get_left()}")
        else:
            logger.info(f"Updated category {category.id}")
        return result.bimap(Notification.create_from_exception, CategoryOutput.from_category)
