"""Listing Search & Pagination - tests for pure search, filter and paging.

Tests cover:
    - search matches title OR description, case-insensitive
    - filter matches data_format only
    - input order preserved
    - paging clamps out-of-range offsets instead of raising
"""

import pytest

from datamart.core.records import DataItem
from datamart.core.search_listings import (
    INITIAL_PAGE_SIZE,
    filter_data_items,
    initial_data_items,
    page_data_items,
    search_data_items,
)


def _item(n: int, title: str = "", description: str = "", data_format: str = "csv") -> DataItem:
    return DataItem(
        id=f"00000000-0000-0000-0000-{n:012d}",
        title=title or f"Item {n}", description=description or "plain",
        price=10, seller="s", attachment_url="http://x",
        data_format=data_format, status="active", quality="high", rating=1,
    )


@pytest.fixture
def items() -> list[DataItem]:
    return [
        _item(1, title="Weather FOO archive"),
        _item(2, description="contains foo in body", data_format="JSON"),
        _item(3, title="Traffic", description="counts", data_format="parquet"),
        _item(4, title="Foobar", data_format="json-lines"),
    ]


def test_search_matches_title_or_description(items):
    result = search_data_items(items, "foo")
    assert [i.id for i in result] == [items[0].id, items[1].id, items[3].id]


def test_search_is_case_insensitive(items):
    assert search_data_items(items, "TRAFFIC") == [items[2]]


def test_search_empty_store_returns_empty():
    assert search_data_items([], "foo") == []


def test_search_empty_query_returns_all(items):
    assert search_data_items(items, "") == items


def test_search_does_not_match_data_format(items):
    assert search_data_items(items, "parquet") == []


def test_filter_matches_data_format_only(items):
    result = filter_data_items(items, "json")
    assert [i.id for i in result] == [items[1].id, items[3].id]


def test_filter_does_not_match_title(items):
    assert filter_data_items(items, "weather") == []


def test_initial_page_is_first_two(items):
    assert INITIAL_PAGE_SIZE == 2
    assert initial_data_items(items) == items[:2]


def test_initial_page_on_short_store():
    single = [_item(1)]
    assert initial_data_items(single) == single


def test_page_returns_slice(items):
    assert page_data_items(items, 1, 2) == items[1:3]


def test_page_clamps_limit(items):
    assert page_data_items(items, 2, 100) == items[2:]


def test_page_start_past_end_is_empty(items):
    assert page_data_items(items, 5, 3) == []


def test_page_zero_limit_is_empty(items):
    assert page_data_items(items, 0, 0) == []


def test_page_rejects_negative():
    with pytest.raises(ValueError):
        page_data_items([], -1, 2)
