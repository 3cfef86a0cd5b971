"""Cursor-based pagination."""

from asmscope.core.paging.cursor import DEFAULT_PAGE_SIZE, Cursor, decode_cursor, encode_cursor
from asmscope.core.paging.page import Page, paginate

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "Cursor",
    "Page",
    "decode_cursor",
    "encode_cursor",
    "paginate",
]
