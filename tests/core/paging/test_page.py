"""Tests for page slicing."""

from __future__ import annotations

import pytest

from asmscope.core.paging import decode_cursor, paginate


class TestPaginate:
    def test_first_page_has_cursor(self) -> None:
        page = paginate(range(250), 0, 100)
        assert page.items == list(range(100))
        assert page.total_count == 250
        assert page.returned_count == 100
        assert page.has_more
        assert decode_cursor(page.next_cursor) == (100, 100)

    def test_last_page_has_no_cursor(self) -> None:
        page = paginate(range(250), 200, 100)
        assert page.items == list(range(200, 250))
        assert page.returned_count == 50
        assert page.next_cursor is None
        assert not page.has_more

    def test_exact_fit_has_no_cursor(self) -> None:
        page = paginate(range(100), 0, 100)
        assert page.returned_count == 100
        assert page.next_cursor is None

    def test_offset_past_end_is_empty(self) -> None:
        page = paginate(["a", "b"], 10, 5)
        assert page.items == []
        assert page.total_count == 2
        assert page.returned_count == 0
        assert page.next_cursor is None

    def test_following_cursors_covers_every_item_once(self) -> None:
        source = [f"item{i}" for i in range(23)]
        seen: list[str] = []
        offset, page_size = 0, 5
        while True:
            page = paginate(source, offset, page_size)
            seen.extend(page.items)
            if page.next_cursor is None:
                break
            offset, page_size = decode_cursor(page.next_cursor)
        assert seen == source

    def test_lazy_source_read_once(self) -> None:
        page = paginate((i * 2 for i in range(5)), 1, 2)
        assert page.items == [2, 4]
        assert page.total_count == 5

    def test_invalid_window(self) -> None:
        with pytest.raises(ValueError, match="invalid page window"):
            paginate([1], -1, 10)
        with pytest.raises(ValueError, match="invalid page window"):
            paginate([1], 0, 0)


class TestPagePayload:
    def test_payload_with_cursor(self) -> None:
        payload = paginate([1, 2, 3], 0, 2).to_payload()
        assert payload["items"] == [1, 2]
        assert payload["total_count"] == 3
        assert payload["returned_count"] == 2
        assert "nextCursor" in payload

    def test_payload_omits_absent_cursor(self) -> None:
        payload = paginate([1, 2, 3], 0, 10).to_payload()
        assert "nextCursor" not in payload
