"""RouteDescriptor and ContextSnapshot — immutable context values."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


def _freeze(instance: object, name: str) -> None:
    value = getattr(instance, name)
    object.__setattr__(instance, name, MappingProxyType(dict(value)))


@dataclass(frozen=True)
class RouteDescriptor:
    """Matched route name and its named path parameters in declared order."""

    name: str | None
    parameters: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        _freeze(self, "parameters")

    def as_dict(self) -> dict[str, Any]:
        return {"route": self.name, "routeParameters": dict(self.parameters)}


@dataclass(frozen=True)
class ContextSnapshot:
    """Structured request context attached to an error report.

    Mapping sections are read-only views over private copies. They are left
    out of the hash since their values need not be hashable.
    """

    request: Mapping[str, Any] = field(hash=False)
    cookies: Mapping[str, str] = field(hash=False)
    user: Mapping[str, Any] = field(hash=False)
    route: RouteDescriptor | None = None

    def __post_init__(self) -> None:
        for name in ("request", "cookies", "user"):
            _freeze(self, name)

    def as_dict(self) -> dict[str, Any]:
        """Render as plain data; the ``route`` key is omitted when unmatched."""
        data: dict[str, Any] = {}
        if self.route is not None:
            data["route"] = self.route.as_dict()
        data["request"] = dict(self.request)
        data["cookies"] = dict(self.cookies)
        data["user"] = dict(self.user)
        return data
