"""Typed extraction from a tool's JSON argument bag."""

from __future__ import annotations

from typing import Any

from asmscope.protocols.errors import MissingArgumentError, ToolInputError


class ToolArguments:
    """Wraps the ``arguments`` mapping of a ``tools/call`` request.

    Each accessor checks the JSON type of one value.  Required accessors
    raise :class:`MissingArgumentError` naming the argument.
    """

    def __init__(self, raw: dict[str, Any] | None) -> None:
        self._raw: dict[str, Any] = dict(raw or {})

    def __contains__(self, key: str) -> bool:
        return key in self._raw

    def require_str(self, key: str) -> str:
        value = self._raw.get(key)
        if value is None:
            raise MissingArgumentError(key)
        return _as_text(key, value)

    def optional_str(self, key: str) -> str | None:
        value = self._raw.get(key)
        if value is None:
            return None
        return _as_text(key, value)

    def lenient_int(self, key: str, default: int) -> int:
        """Integer value of *key*; *default* when absent or not an integral number."""
        value = self._raw.get(key)
        if isinstance(value, bool):
            return default
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return default

    def optional_list(self, key: str) -> list[Any]:
        value = self._raw.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise ToolInputError(f"{key} must be an array")
        return value


def _as_text(key: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise ToolInputError(f"{key} must be a string")
