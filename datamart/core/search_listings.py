"""Listing Search & Pagination - substring lookup and offset/limit paging over DataItems.

Invariants:
    - Pure functions: no IO, input order preserved in every result
    - Case-insensitive substring match
    - search matches title OR description; filter matches data_format only
    - Paging never raises on out-of-range offsets: results are clamped

Design Decisions:
    - Simple substring matching (not fuzzy): predictable and testable
    - INITIAL_PAGE_SIZE (2) is the cold-start page
"""

from typing import Sequence

from datamart.core.records import DataItem

INITIAL_PAGE_SIZE = 2


def search_data_items(items: Sequence[DataItem], query: str) -> list[DataItem]:
    """Items whose title or description contains query."""
    needle = query.lower()
    return [
        item for item in items
        if needle in item.title.lower() or needle in item.description.lower()
    ]


def filter_data_items(items: Sequence[DataItem], query: str) -> list[DataItem]:
    """Items whose data_format contains query."""
    needle = query.lower()
    return [item for item in items if needle in item.data_format.lower()]


def page_data_items(
    items: Sequence[DataItem], start: int, limit: int,
) -> list[DataItem]:
    """Slice [start, start + limit), clamped to the available length."""
    if start < 0 or limit < 0:
        raise ValueError("start and limit must be non-negative")
    return list(items[start:start + limit])


def initial_data_items(
    items: Sequence[DataItem], size: int = INITIAL_PAGE_SIZE,
) -> list[DataItem]:
    return page_data_items(items, 0, size)
