"""Tests for ErrorContextException hierarchy."""

from __future__ import annotations

from fastapi_error_context.exceptions import (
    ErrorContextException,
    UserSerializationError,
)


class TestErrorContextException:
    def test_is_base_exception(self) -> None:
        exc = ErrorContextException("test")
        assert isinstance(exc, Exception)
        assert str(exc) == "test"


class TestUserSerializationError:
    def test_detail(self) -> None:
        exc = UserSerializationError("no strategy", user_type="User")
        assert exc.detail == "no strategy"
        assert exc.user_type == "User"
        assert str(exc) == "no strategy"

    def test_default_user_type(self) -> None:
        assert UserSerializationError("no strategy").user_type is None

    def test_is_error_context_exception(self) -> None:
        assert issubclass(UserSerializationError, ErrorContextException)
