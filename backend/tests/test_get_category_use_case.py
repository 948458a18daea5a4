"""Tests for GetCategoryByIdUseCase."""

import pytest

from domain.aggregates.category import Category
from domain.value_objects.category_id import CategoryID
from exceptions import NotFoundError
from services.get_category import GetCategoryByIdUseCase


class TestGetCategoryByIdUseCase:
    def test_returns_full_output(self, gateway):
        category = Category.new_category("Filmes", "A categoria mais assistida", True)
        gateway.find_by_id.return_value = category

        output = GetCategoryByIdUseCase(gateway).execute(category.id.value)

        assert output.id == category.id.value
        assert output.name == "Filmes"
        assert output.description == "A categoria mais assistida"
        assert output.is_active is True
        assert output.created_at == category.created_at
        assert output.updated_at == category.updated_at
        assert output.deleted_at is None
        gateway.find_by_id.assert_called_once_with(CategoryID(category.id.value))

    def test_unknown_id_raises_not_found(self, gateway):
        gateway.find_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            GetCategoryByIdUseCase(gateway).execute("123")

        assert exc_info.value.message == "Category with ID 123 was not found"

    def test_gateway_failure_propagates(self, gateway):
        gateway.find_by_id.side_effect = RuntimeError("Gateway error")

        with pytest.raises(RuntimeError, match="Gateway error"):
            GetCategoryByIdUseCase(gateway).execute("123")


class TestGetCategoryAgainstDatabase:
    def test_reads_persisted_category(self, sql_gateway):
        category = Category.new_category("Filmes", None, False)
        sql_gateway.create(category)

        output = GetCategoryByIdUseCase(sql_gateway).execute(category.id.value)

        assert output.name == "Filmes"
        assert output.is_active is False
        assert output.deleted_at == category.deleted_at
