"""Shared type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from starlette.requests import Request

# Synchronously resolves the authenticated principal for a request, or None
UserResolver = Callable[[Request], Any]
ContextData = dict[str, Any]
