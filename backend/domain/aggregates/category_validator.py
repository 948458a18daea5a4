"""
Category validation rules.
"""

from typing import TYPE_CHECKING

from constants import CategoryRules
from domain.validation.error import Error
from domain.validation.handler import ValidationHandler

if TYPE_CHECKING:
    from .category import Category


class CategoryValidator:
    """
    Checks a Category's name against its handler.

    The name is trimmed once and every check runs on the trimmed value:
    1. present        -> "'name' should not be null"
    2. not blank      -> "'name' should not be empty"
    3. 3..255 chars   -> "'name' must be between 3 and 255 characters"

    A missing or blank name reports one error only.
    """

    def __init__(self, category: "Category", handler: ValidationHandler):
        self.category = category
        self.handler = handler

    def validate(self) -> None:
        self._check_name_constraints()

    def _check_name_constraints(self) -> None:
        name = self.category.name
        if name is None:
            self.handler.append(Error(CategoryRules.NAME_NULL))
            return

        trimmed = name.strip()
        if not trimmed:
            self.handler.append(Error(CategoryRules.NAME_EMPTY))
            return

        length = len(trimmed)
        if length < CategoryRules.NAME_MIN_LENGTH or length > CategoryRules.NAME_MAX_LENGTH:
            self.handler.append(Error(CategoryRules.NAME_LENGTH))
