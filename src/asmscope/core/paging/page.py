"""Page slicing over ordered result sets."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from asmscope.core.paging.cursor import encode_cursor

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One page of an ordered result set."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[T]
    total_count: int
    returned_count: int
    next_cursor: str | None = Field(default=None, alias="nextCursor")

    @property
    def has_more(self) -> bool:
        return self.next_cursor is not None

    def to_payload(self) -> dict[str, Any]:
        """Render as ``{items, total_count, returned_count, nextCursor?}``."""
        payload: dict[str, Any] = {
            "items": self.items,
            "total_count": self.total_count,
            "returned_count": self.returned_count,
        }
        if self.next_cursor is not None:
            payload["nextCursor"] = self.next_cursor
        return payload


def paginate(items: Iterable[T], offset: int, page_size: int) -> Page[T]:
    """Slice ``items[offset:offset + page_size]`` and attach a continuation cursor.

    *items* is materialized before slicing, so a lazy source is read
    exactly once.  An offset past the end yields an empty page.
    """
    if offset < 0 or page_size <= 0:
        msg = f"invalid page window: offset={offset}, page_size={page_size}"
        raise ValueError(msg)

    snapshot = list(items)
    total = len(snapshot)
    window = snapshot[offset : offset + page_size]

    next_cursor = None
    if offset + page_size < total:
        next_cursor = encode_cursor(offset + page_size, page_size)

    return Page(
        items=window,
        total_count=total,
        returned_count=len(window),
        next_cursor=next_cursor,
    )
