"""context_dependency() — factory producing FastAPI-compatible dependency callables."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence

from starlette.requests import Request

from fastapi_error_context._types import UserResolver
from fastapi_error_context.context import RequestContextProvider
from fastapi_error_context.serialization import DIAGNOSTIC_METHOD, SERIALIZER_METHODS


def context_dependency(
    *,
    user_resolver: UserResolver | None = None,
    diagnostic_method: str = DIAGNOSTIC_METHOD,
    serializer_methods: Sequence[str] = SERIALIZER_METHODS,
) -> Callable[[Request], Awaitable[RequestContextProvider]]:
    """Return a FastAPI dependency yielding a provider bound to the request."""
    methods = tuple(serializer_methods)

    async def dependency(request: Request) -> RequestContextProvider:
        return RequestContextProvider.from_request(
            request,
            user_resolver=user_resolver,
            diagnostic_method=diagnostic_method,
            serializer_methods=methods,
        )

    return dependency
