"""ErrorContextException hierarchy."""

from __future__ import annotations


class ErrorContextException(Exception):
    """Base for all error-context exceptions."""


class UserSerializationError(ErrorContextException):
    """The principal could not be turned into a mapping."""

    def __init__(self, detail: str, *, user_type: str | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.user_type = user_type
