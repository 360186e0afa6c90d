"""RequestHandle port and its Starlette adapter."""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from starlette.requests import Request
from starlette.routing import Match, Route
from starlette.types import Scope

from fastapi_error_context._types import UserResolver
from fastapi_error_context.exceptions import UserSerializationError
from fastapi_error_context.snapshot import RouteDescriptor


class RequestHandle(ABC):
    """Read-only view over an in-flight HTTP request."""

    @abstractmethod
    def route(self) -> RouteDescriptor | None: ...

    @abstractmethod
    def url(self) -> str: ...

    @abstractmethod
    def cookies(self) -> Mapping[str, str]: ...

    @abstractmethod
    def user(self) -> Any | None: ...

    def method(self) -> str | None:
        return None

    def client_ip(self) -> str | None:
        return None

    def user_agent(self) -> str | None:
        return None


class StarletteRequestHandle(RequestHandle):
    """Adapts a Starlette (or FastAPI) request to RequestHandle.

    The matched route is read from ``scope["route"]``, which FastAPI's
    ``APIRoute`` sets while routing. Plain Starlette apps don't set it, so the
    router stored in ``scope["router"]`` is searched for a fully matching
    ``Route`` instead.

    The principal comes from ``user_resolver`` when given, otherwise from
    ``scope["user"]`` as populated by Starlette's ``AuthenticationMiddleware``.
    Resolvers must be synchronous; an awaitable result is closed and rejected.
    """

    def __init__(
        self,
        request: Request,
        *,
        user_resolver: UserResolver | None = None,
    ) -> None:
        self._request = request
        self._user_resolver = user_resolver

    @property
    def request(self) -> Request:
        return self._request

    def route(self) -> RouteDescriptor | None:
        scope = self._request.scope
        route = scope.get("route")
        path_params: Mapping[str, Any] = self._request.path_params
        if route is None:
            route, path_params = _search_router(scope)
            if route is None:
                return None

        return RouteDescriptor(
            name=getattr(route, "name", None),
            parameters={name: str(value) for name, value in path_params.items()},
        )

    def url(self) -> str:
        return str(self._request.url)

    def cookies(self) -> Mapping[str, str]:
        return self._request.cookies

    def user(self) -> Any | None:
        if self._user_resolver is not None:
            user = self._user_resolver(self._request)
            if inspect.isawaitable(user):
                close = getattr(user, "close", None)
                if callable(close):
                    close()
                raise UserSerializationError(
                    "Async user resolvers are not supported",
                    user_type=type(user).__name__,
                )
        else:
            user = self._request.scope.get("user")

        # UnauthenticatedUser and friends
        if user is not None and getattr(user, "is_authenticated", True) is False:
            return None
        return user

    def method(self) -> str | None:
        return self._request.method

    def client_ip(self) -> str | None:
        client = self._request.client
        return client.host if client else None

    def user_agent(self) -> str | None:
        return self._request.headers.get("user-agent")


def _search_router(
    scope: Scope,
) -> tuple[Route | None, Mapping[str, Any]]:
    """Find the first top-level Route that fully matches the scope."""
    router = scope.get("router")
    if router is None:
        return None, {}

    for candidate in getattr(router, "routes", ()):
        if not isinstance(candidate, Route):
            continue
        match, child_scope = candidate.matches(scope)
        if match is Match.FULL:
            return candidate, child_scope.get("path_params", {})
    return None, {}
