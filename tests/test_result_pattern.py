"""Tests for the Result pattern."""

import pytest

from library_catalog.domain.result import Success, Failure, try_catch


class TestSuccess:
    """Test Success results."""

    def test_value(self):
        result = Success(42)
        assert result.is_success()
        assert not result.is_failure()
        assert result.value() == 42
        assert result.or_else(0) == 42

    def test_error_raises(self):
        with pytest.raises(ValueError):
            Success(1).error()

    def test_match_calls_success_handler(self):
        assert Success(2).match(success=lambda v: v * 10, failure=lambda e: "bad") == 20


class TestFailure:
    """Test Failure results."""

    def test_error(self):
        error = KeyError("missing")
        result = Failure(error)
        assert result.is_failure()
        assert result.error() is error
        assert result.or_else("default") == "default"

    def test_value_raises(self):
        with pytest.raises(ValueError, match="Cannot get value"):
            Failure(RuntimeError("boom")).value()

    def test_match_calls_failure_handler(self):
        result = Failure(RuntimeError("boom"))
        assert result.match(success=lambda v: v, failure=lambda e: str(e)) == "boom"

    def test_match_without_handler_returns_none(self):
        assert Failure(RuntimeError("boom")).match(success=lambda v: v) is None


class TestTryCatch:
    """Test the try_catch helper."""

    def test_captures_listed_error(self):
        result = try_catch(lambda: int("x"), ValueError)
        assert result.is_failure()
        assert isinstance(result.error(), ValueError)

    def test_success(self):
        assert try_catch(lambda: int(" 7 "), ValueError).value() == 7

    def test_other_errors_propagate(self):
        with pytest.raises(ZeroDivisionError):
            try_catch(lambda: 1 / 0, ValueError)
