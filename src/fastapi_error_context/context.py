"""RequestContextProvider — request context for error reports."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from starlette.requests import Request

from fastapi_error_context._types import ContextData, UserResolver
from fastapi_error_context.handle import RequestHandle, StarletteRequestHandle
from fastapi_error_context.serialization import (
    DIAGNOSTIC_METHOD,
    SERIALIZER_METHODS,
    serialize_user,
)
from fastapi_error_context.snapshot import ContextSnapshot, RouteDescriptor

logger = logging.getLogger(__name__)


class RequestContextProvider:
    """Reads route, request, cookie and user context off a request handle.

    Nothing is copied at construction time; every section is read from the
    handle when asked for. None of the accessors raise: a failing route
    lookup yields no route and a failing principal yields ``{}``, since
    building an error report must not raise a second error.
    """

    def __init__(
        self,
        handle: RequestHandle,
        *,
        diagnostic_method: str = DIAGNOSTIC_METHOD,
        serializer_methods: Sequence[str] = SERIALIZER_METHODS,
    ) -> None:
        self._handle = handle
        self._diagnostic_method = diagnostic_method
        self._serializer_methods = tuple(serializer_methods)

    @classmethod
    def from_request(
        cls,
        request: Request,
        *,
        user_resolver: UserResolver | None = None,
        diagnostic_method: str = DIAGNOSTIC_METHOD,
        serializer_methods: Sequence[str] = SERIALIZER_METHODS,
    ) -> RequestContextProvider:
        return cls(
            StarletteRequestHandle(request, user_resolver=user_resolver),
            diagnostic_method=diagnostic_method,
            serializer_methods=serializer_methods,
        )

    @property
    def handle(self) -> RequestHandle:
        return self._handle

    def to_dict(self) -> ContextData:
        """Full context as plain data: ``{route?, request, cookies, user}``."""
        return self.snapshot().as_dict()

    def snapshot(self) -> ContextSnapshot:
        return ContextSnapshot(
            route=self._resolve_route(),
            request=self.get_request(),
            cookies=self.get_cookies(),
            user=self.get_user(),
        )

    def get_route(self) -> ContextData | None:
        route = self._resolve_route()
        return route.as_dict() if route is not None else None

    def get_request(self) -> ContextData:
        return {
            "url": self._handle.url(),
            "ip": self._handle.client_ip(),
            "method": self._handle.method(),
            "useragent": self._handle.user_agent(),
        }

    def get_cookies(self) -> dict[str, str]:
        return dict(self._handle.cookies())

    def get_user(self) -> ContextData:
        try:
            user = self._handle.user()
            return serialize_user(
                user,
                diagnostic_method=self._diagnostic_method,
                serializer_methods=self._serializer_methods,
            )
        except Exception:
            logger.debug("Could not collect user context", exc_info=True)
            return {}

    def _resolve_route(self) -> RouteDescriptor | None:
        try:
            return self._handle.route()
        except Exception:
            logger.debug("Could not resolve matched route", exc_info=True)
            return None
