"""Tests for the Left/Right result channel."""

import pytest

from domain.result import Left, Right, attempt


class TestLeft:
    def test_left_is_failure(self):
        result = Left("bad")

        assert result.is_left()
        assert not result.is_right()
        assert result.get_left() == "bad"

    def test_get_on_left_raises(self):
        with pytest.raises(ValueError):
            Left("bad").get()

    def test_map_is_skipped(self):
        assert Left("bad").map(lambda v: v * 2) == Left("bad")

    def test_map_left_transforms_failure(self):
        assert Left("bad").map_left(str.upper) == Left("BAD")

    def test_fold_takes_left_branch(self):
        assert Left(1).fold(lambda e: f"error {e}", lambda v: f"value {v}") == "error 1"


class TestRight:
    def test_right_is_success(self):
        result = Right(42)

        assert result.is_right()
        assert not result.is_left()
        assert result.get() == 42

    def test_get_left_on_right_raises(self):
        with pytest.raises(ValueError):
            Right(42).get_left()

    def test_map_transforms_value(self):
        assert Right(2).map(lambda v: v * 2) == Right(4)

    def test_map_left_is_skipped(self):
        assert Right(2).map_left(str.upper) == Right(2)

    def test_bimap_applies_right_function(self):
        assert Right(2).bimap(str, lambda v: v + 1) == Right(3)

    def test_fold_takes_right_branch(self):
        assert Right(1).fold(lambda e: f"error {e}", lambda v: f"value {v}") == "value 1"


class TestAttempt:
    def test_returns_right_on_success(self):
        assert attempt(lambda: "ok") == Right("ok")

    def test_returns_left_with_exception_on_failure(self):
        def failing():
            raise RuntimeError("Gateway error")

        result = attempt(failing)

        assert result.is_left()
        assert isinstance(result.get_left(), RuntimeError)
        assert str(result.get_left()) == "Gateway error"

    def test_bimap_after_failure_maps_exception(self):
        def failing():
            raise RuntimeError("Gateway error")

        result = attempt(failing).bimap(str, lambda v: v)

        assert result == Left("Gateway error")
