"""serialize_user — principal to mapping fallback chain."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from typing import Any

from fastapi_error_context.exceptions import UserSerializationError

DIAGNOSTIC_METHOD = "to_flare"
SERIALIZER_METHODS: tuple[str, ...] = ("to_dict", "model_dump")


def serialize_user(
    user: Any,
    *,
    diagnostic_method: str = DIAGNOSTIC_METHOD,
    serializer_methods: Sequence[str] = SERIALIZER_METHODS,
) -> dict[str, Any]:
    """Serialize an authenticated principal for an error report.

    Strategies are tried in order and the first one present wins:

    1. ``diagnostic_method`` on the principal (``to_flare`` by default), so
       applications can choose exactly what gets reported.
    2. The principal itself, when it is a mapping.
    3. Each of ``serializer_methods`` (``to_dict``, then pydantic's
       ``model_dump``).
    4. ``dataclasses.asdict`` for dataclass instances.

    Returns ``{}`` for ``None``. Raises ``UserSerializationError`` when no
    strategy applies or the chosen one doesn't return a mapping; anything the
    principal raises itself is propagated unchanged.
    """
    if user is None:
        return {}

    custom = getattr(user, diagnostic_method, None)
    if callable(custom):
        return _as_mapping(custom(), user)

    if isinstance(user, Mapping):
        return dict(user)

    for name in serializer_methods:
        method = getattr(user, name, None)
        if callable(method):
            return _as_mapping(method(), user)

    if dataclasses.is_dataclass(user) and not isinstance(user, type):
        return dataclasses.asdict(user)

    raise UserSerializationError(
        "No serialization strategy for principal",
        user_type=type(user).__name__,
    )


def _as_mapping(value: Any, user: Any) -> dict[str, Any]:
    if not isinstance(value, Mapping):
        raise UserSerializationError(
            f"Serializer returned {type(value).__name__}, expected a mapping",
            user_type=type(user).__name__,
        )
    return dict(value)
