"""
Create Category Use Case

Builds a new Category, validates it with an accumulating Notification and
persists it through the gateway. Never raises for validation or gateway
failures: both come back as Left(Notification).
"""

import logging

from domain.aggregates.category import Category
from domain.aggregates.category_gateway import CategoryGateway
from domain.result import Left, Result, attempt
from domain.validation.notification import Notification
from dtos.internal.category_commands import CreateCategoryCommand
from dtos.internal.category_outputs import CategoryOutput
from services.interfaces import ICreateCategoryUseCase
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class CreateCategoryUseCase(ICreateCategoryUseCase):
    """Default implementation of ICreateCategoryUseCase."""

    def __init__(self, gateway: CategoryGateway):
        if gateway is None:
            raise ValueError("CreateCategoryUseCase requires a CategoryGateway")
        self.gateway = gateway

    @log_operation("create_category")
    def execute(self, command: CreateCategoryCommand) -> Result[Notification, CategoryOutput]:
        category = Category.new_category(command.name, command.description, command.is_active)

        notification = Notification.create()
        category.validate(notification)

        if notification.has_error():
            logger.info(f"Rejected category creation with {len(notification.errors)} validation error(s)")
            return Left(notification)

        return self._create(category)

    def _create(self, category: Category) -> Result[Notification, CategoryOutput]:
        result = attempt(lambda: self.gateway.create(category))
        if result.is_left():
            logger.error(f"Gateway failed to create category {category.id}: {result.get_left()}")
        else:
            logger.info(f"Created category {category.id}")
        return result.bimap(Notification.create_from_exception, CategoryOutput.from_category)
