from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, TypeVar, Union

T = TypeVar("T")

ELLIPSIS = "..."
MAX_PAGE_SLOTS = 7

PageToken = Union[int, str]


@dataclass(frozen=True)
class PageRange:
    start: int
    end: int
    total: int

    def label(self) -> str:
        return f"Showing {self.start} to {self.end} of {self.total} results"


def total_pages(row_count: int, page_size: int) -> int:
    if row_count <= 0:
        return 0
    return math.ceil(row_count / page_size)


def clamp_page(page: int, pages: int) -> int:
    return max(1, min(max(pages, 1), int(page)))


def page_slice(rows: Sequence[T], page: int, page_size: int) -> List[T]:
    start = (page - 1) * page_size
    return list(rows[start:start + page_size])


def page_range(row_count: int, page: int, page_size: int) -> PageRange:
    if row_count <= 0:
        return PageRange(start=0, end=0, total=0)
    start = (page - 1) * page_size
    return PageRange(start=start + 1, end=min(start + page_size, row_count), total=row_count)


def page_numbers(current: int, pages: int) -> List[PageToken]:
    """Buttons for a page control with at most seven numeric slots."""
    if pages <= MAX_PAGE_SLOTS:
        return list(range(1, pages + 1))
    if current <= 4:
        return [1, 2, 3, 4, 5, ELLIPSIS, pages]
    if current >= pages - 3:
        return [1, ELLIPSIS] + list(range(pages - 4, pages + 1))
    return [1, ELLIPSIS, current - 1, current, current + 1, ELLIPSIS, pages]


def previous_page(current: int, pages: int) -> int:
    return clamp_page(current - 1, pages)


def next_page(current: int, pages: int) -> int:
    return clamp_page(current + 1, pages)


def has_previous(current: int) -> bool:
    return current > 1


def has_next(current: int, pages: int) -> bool:
    return current < pages
