"""Tests for UpdateCategoryUseCase against a mocked gateway."""

import pytest

from domain.aggregates.category import Category
from domain.value_objects.category_id import CategoryID
from dtos.internal.category_commands import UpdateCategoryCommand
from exceptions import NotFoundError
from services.update_category import UpdateCategoryUseCase


@pytest.fixture
def existing():
    return Category.new_category("Film", None, True)


class TestUpdateCategoryUseCase:
    def test_valid_command_updates_category(self, gateway, existing):
        gateway.find_by_id.return_value = existing
        command = UpdateCategoryCommand.with_values(
            existing.id.value, "Filmes", "A categoria mais assistida", True
        )

        result = UpdateCategoryUseCase(gateway).execute(command)

        assert result.is_right()
        output = result.get()
        assert output.id == existing.id.value
        assert output.name == "Filmes"
        assert output.description == "A categoria mais assistida"
        assert output.is_active is True
        assert output.created_at == existing.created_at
        assert output.updated_at > existing.updated_at
        assert output.deleted_at is None

        gateway.find_by_id.assert_called_once_with(CategoryID(existing.id.value))
        gateway.update.assert_called_once()

    def test_loaded_category_is_not_mutated(self, gateway, existing):
        gateway.find_by_id.return_value = existing
        command = UpdateCategoryCommand.with_values(existing.id.value, "Filmes", None, False)

        UpdateCategoryUseCase(gateway).execute(command)

        assert existing.name == "Film"
        assert existing.is_active is True

    def test_deactivating_sets_deleted_at(self, gateway, existing):
        gateway.find_by_id.return_value = existing
        command = UpdateCategoryCommand.with_values(existing.id.value, "Filmes", None, False)

        result = UpdateCategoryUseCase(gateway).execute(command)

        assert result.get().is_active is False
        assert result.get().deleted_at is not None

    def test_activating_clears_deleted_at(self, gateway):
        inactive = Category.new_category("Filmes", None, False)
        gateway.find_by_id.return_value = inactive
        command = UpdateCategoryCommand.with_values(inactive.id.value, "Filmes", None, True)

        result = UpdateCategoryUseCase(gateway).execute(command)

        assert result.get().is_active is True
        assert result.get().deleted_at is None

    def test_invalid_name_returns_notification(self, gateway, existing):
        gateway.find_by_id.return_value = existing
        command = UpdateCategoryCommand.with_values(existing.id.value, None, None, True)

        result = UpdateCategoryUseCase(gateway).execute(command)

        assert result.is_left()
        assert [e.message for e in result.get_left().errors] == ["'name' should not be null"]
        gateway.update.assert_not_called()

    def test_gateway_failure_returns_notification(self, gateway, existing):
        gateway.find_by_id.return_value = existing
        gateway.update.side_effect = RuntimeError("Gateway error")
        command = UpdateCategoryCommand.with_values(existing.id.value, "Filmes", None, True)

        result = UpdateCategoryUseCase(gateway).execute(command)

        assert result.is_left()
        assert [e.message for e in result.get_left().errors] == ["Gateway error"]

    @pytest.mark.parametrize("name", ["Filmes", None, "", "ab"])
    def test_unknown_id_raises_not_found_whatever_the_name(self, gateway, name):
        gateway.find_by_id.return_value = None
        command = UpdateCategoryCommand.with_values("123", name, None, True)

        with pytest.raises(NotFoundError) as exc_info:
            UpdateCategoryUseCase(gateway).execute(command)

        assert exc_info.value.message == "Category with ID 123 was not found"
        assert len(exc_info.value.errors) == 1
        gateway.update.assert_not_called()

    def test_requires_gateway(self):
        with pytest.raises(ValueError):
            UpdateCategoryUseCase(None)
