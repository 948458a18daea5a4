"""Tests for the accumulating and fail-fast validation handlers."""

import pytest

from domain.validation import Error, Notification, ThrowsValidationHandler
from exceptions import DomainError, NotFoundError, ValidationError


class TestNotification:
    def test_new_notification_has_no_errors(self):
        notification = Notification.create()

        assert notification.errors == []
        assert not notification.has_error()
        assert notification.first_error() is None

    def test_create_with_error_seeds_it(self):
        notification = Notification.create(Error("boom"))

        assert notification.has_error()
        assert notification.first_error() == Error("boom")

    def test_append_keeps_order_and_duplicates(self):
        notification = Notification.create()

        notification.append(Error("a")).append(Error("b")).append(Error("a"))

        assert [e.message for e in notification.errors] == ["a", "b", "a"]
        assert notification.first_error().message == "a"

    def test_append_all_merges_other_handler(self):
        first = Notification.create(Error("a"))
        second = Notification.create(Error("b")).append(Error("c"))

        first.append_all(second)

        assert [e.message for e in first.errors] == ["a", "b", "c"]

    def test_validate_records_domain_error_errors(self):
        notification = Notification.create()

        def failing():
            raise DomainError.with_errors([Error("x"), Error("y")])

        notification.validate(failing)

        assert [e.message for e in notification.errors] == ["x", "y"]

    def test_validate_records_plain_exception_message(self):
        notification = Notification.create()

        def failing():
            raise RuntimeError("disk on fire")

        notification.validate(failing)

        assert [e.message for e in notification.errors] == ["disk on fire"]

    def test_validate_without_failure_records_nothing(self):
        notification = Notification.create()

        notification.validate(lambda: None)

        assert not notification.has_error()

    def test_create_from_exception_uses_exception_message(self):
        notification = Notification.create_from_exception(
            NotFoundError.with_id("Category", "123")
        )

        assert [e.message for e in notification.errors] == ["Category with ID 123 was not found"]

    def test_create_from_exception_without_message_uses_type_name(self):
        notification = Notification.create_from_exception(RuntimeError())

        assert notification.first_error().message == "RuntimeError"

    def test_errors_property_is_a_copy(self):
        notification = Notification.create(Error("a"))

        notification.errors.append(Error("b"))

        assert len(notification.errors) == 1


class TestThrowsValidationHandler:
    def test_append_raises_with_the_error(self):
        handler = ThrowsValidationHandler()

        with pytest.raises(ValidationError) as exc_info:
            handler.append(Error("bad name"))

        assert exc_info.value.message == "bad name"
        assert [e.message for e in exc_info.value.errors] == ["bad name"]

    def test_append_all_raises_when_other_has_errors(self):
        handler = ThrowsValidationHandler()

        with pytest.raises(ValidationError) as exc_info:
            handler.append_all(Notification.create(Error("a")).append(Error("b")))

        assert [e.message for e in exc_info.value.errors] == ["a", "b"]

    def test_append_all_of_empty_handler_does_not_raise(self):
        handler = ThrowsValidationHandler()

        assert handler.append_all(Notification.create()) is handler
        assert not handler.has_error()

    def test_validate_wraps_plain_exception(self):
        handler = ThrowsValidationHandler()

        def failing():
            raise ValueError("nope")

        with pytest.raises(ValidationError) as exc_info:
            handler.validate(failing)

        assert exc_info.value.errors[0].message == "nope"

    def test_validate_without_failure_returns_handler(self):
        handler = ThrowsValidationHandler()

        assert handler.validate(lambda: None) is handler

    def test_validation_error_is_a_domain_error(self):
        with pytest.raises(DomainError):
            ThrowsValidationHandler().append(Error("x"))


class TestError:
    def test_errors_compare_by_message(self):
        assert Error("a") == Error("a")
        assert Error("a") != Error("b")
