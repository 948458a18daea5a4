"""Tests for DeleteCategoryUseCase."""

import pytest

from domain.aggregates.category import Category
from domain.value_objects.category_id import CategoryID
from services.delete_category import DeleteCategoryUseCase


class TestDeleteCategoryUseCase:
    def test_delegates_to_gateway(self, gateway):
        DeleteCategoryUseCase(gateway).execute("123")

        gateway.delete_by_id.assert_called_once_with(CategoryID("123"))

    def test_gateway_failure_propagates(self, gateway):
        gateway.delete_by_id.side_effect = RuntimeError("Gateway error")

        with pytest.raises(RuntimeError, match="Gateway error"):
            DeleteCategoryUseCase(gateway).execute("123")


class TestDeleteCategoryAgainstDatabase:
    def test_removes_category(self, sql_gateway):
        category = Category.new_category("Filmes", None, True)
        sql_gateway.create(category)

        DeleteCategoryUseCase(sql_gateway).execute(category.id.value)

        assert sql_gateway.find_by_id(category.id) is None

    def test_unknown_id_is_a_no_op(self, sql_gateway):
        category = Category.new_category("Filmes", None, True)
        sql_gateway.create(category)

        DeleteCategoryUseCase(sql_gateway).execute("does-not-exist")

        assert sql_gateway.find_by_id(category.id) is not None
