"""Shared pytest fixtures for fastapi-error-context tests."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.routing import APIRoute
from starlette.requests import Request


def _endpoint() -> None:
    return None


@pytest.fixture
def make_request() -> Any:
    """Factory for creating Starlette Request objects from a raw scope."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        query_string: str = "",
        cookies: dict[str, str] | None = None,
        **extra_scope: Any,
    ) -> Request:
        header_items = dict(headers or {})
        if cookies:
            header_items["cookie"] = "; ".join(f"{k}={v}" for k, v in cookies.items())
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "scheme": "http",
            "server": ("localhost", 80),
            "client": ("127.0.0.1", 50000),
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in header_items.items()
            ],
            "root_path": "",
        }
        scope.update(extra_scope)
        return Request(scope)

    return _make


@pytest.fixture
def make_routed_request(make_request: Any) -> Any:
    """Factory for requests bound to a FastAPI route, as the router leaves them."""

    def _make(
        pattern: str,
        path: str,
        *,
        name: str | None = None,
        **kwargs: Any,
    ) -> Request:
        route = APIRoute(pattern, _endpoint, name=name)
        request = make_request(path=path, **kwargs)
        _, child_scope = route.matches(request.scope)
        request.scope.update(child_scope)
        return request

    return _make


@pytest.fixture
def sample_user() -> dict[str, Any]:
    """Sample user dict for testing."""
    return {"id": 1, "email": "john@example.com"}
