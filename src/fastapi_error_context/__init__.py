"""FastAPI Error Context - request context for error reports."""

from fastapi_error_context.context import RequestContextProvider
from fastapi_error_context.dependency import context_dependency
from fastapi_error_context.exceptions import (
    ErrorContextException,
    UserSerializationError,
)
from fastapi_error_context.handle import RequestHandle, StarletteRequestHandle
from fastapi_error_context.serialization import serialize_user
from fastapi_error_context.snapshot import ContextSnapshot, RouteDescriptor

__all__ = [
    "ContextSnapshot",
    "ErrorContextException",
    "RequestContextProvider",
    "RequestHandle",
    "RouteDescriptor",
    "StarletteRequestHandle",
    "UserSerializationError",
    "context_dependency",
    "serialize_user",
]
