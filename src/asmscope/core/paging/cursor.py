"""Opaque pagination cursors.

A cursor is a capability token handed out with one page and consumed by
the request for the next one. It carries the offset of the next page and
the page size, serialized as base64-encoded JSON::

    >>> encode_cursor(100, 100)
    'eyJvZmZzZXQiOiAxMDAsICJwYWdlU2l6ZSI6IDEwMH0='

Clients must treat the string as opaque.  Decoding is strict: an absent
or empty cursor means "first page", anything else that does not decode to
a valid ``(offset, pageSize)`` pair raises :class:`InvalidCursorError`.
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any, NamedTuple

from asmscope.protocols.errors import InvalidCursorError

DEFAULT_PAGE_SIZE = 100


class Cursor(NamedTuple):
    """Decoded pagination state."""

    offset: int
    page_size: int


def encode_cursor(offset: int, page_size: int) -> str:
    """Encode pagination state into an opaque cursor string."""
    if offset < 0:
        msg = f"offset cannot be negative: {offset}"
        raise ValueError(msg)
    if page_size <= 0:
        msg = f"page_size must be positive: {page_size}"
        raise ValueError(msg)
    payload = json.dumps({"offset": offset, "pageSize": page_size})
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def decode_cursor(cursor: str | None, default_page_size: int = DEFAULT_PAGE_SIZE) -> Cursor:
    """Decode a cursor string into pagination state.

    Returns ``(0, default_page_size)`` when *cursor* is ``None`` or empty.

    Raises:
        InvalidCursorError: If the cursor is not base64, not a JSON object,
            lacks an integer ``offset``/``pageSize``, or holds a negative
            offset or non-positive page size.
    """
    if not cursor:
        return Cursor(0, default_page_size)

    try:
        raw = base64.b64decode(cursor, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidCursorError("not a valid base64 string") from exc

    try:
        data: Any = json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise InvalidCursorError("payload is not UTF-8 text") from exc
    except json.JSONDecodeError as exc:
        raise InvalidCursorError(f"invalid JSON format - {exc.msg}") from exc

    if not isinstance(data, dict):
        raise InvalidCursorError("cursor data is not an object")

    offset = _int_field(data, "offset")
    page_size = _int_field(data, "pageSize")

    if offset < 0:
        raise InvalidCursorError("offset cannot be negative")
    if page_size <= 0:
        raise InvalidCursorError("pageSize must be positive")

    return Cursor(offset, page_size)


def _int_field(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    # bool is an int subclass; a cursor never carries one.
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidCursorError(f"missing or invalid '{key}' field")
    return value
