from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 4


class BrowserTab(int, Enum):
    SAVES = 0
    ROOMS = 1


def total_pages(total_count: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    return max(1, math.ceil(max(0, total_count) / page_size))


def visible_slice(total_count: int, page_index: int, page_size: int) -> tuple[int, int]:
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    total = max(0, total_count)
    start = min(max(0, page_index) * page_size, total)
    end = min(start + page_size, total)
    return start, end


@dataclass(frozen=True, slots=True)
class PageView:
    source_size: int
    page_index: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return total_pages(self.source_size, self.page_size)

    @property
    def bounds(self) -> tuple[int, int]:
        return visible_slice(self.source_size, self.page_index, self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.page_index > 0

    @property
    def has_next(self) -> bool:
        return self.page_index < self.total_pages - 1


class PaginationController:
    """Page position for whichever list the active tab shows."""

    total_pages = staticmethod(total_pages)
    visible_slice = staticmethod(visible_slice)

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self._page_size = page_size
        self._active_tab = BrowserTab.SAVES
        self._page_index = 0

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def active_tab(self) -> BrowserTab:
        return self._active_tab

    @property
    def page_index(self) -> int:
        return self._page_index

    def switch_tab(self, tab: BrowserTab) -> None:
        self._active_tab = tab
        self._page_index = 0

    def next_page(self, total_count: int) -> bool:
        if self._page_index >= total_pages(total_count, self._page_size) - 1:
            return False
        self._page_index += 1
        return True

    def previous_page(self) -> bool:
        if self._page_index <= 0:
            return False
        self._page_index -= 1
        return True

    def clamp(self, total_count: int) -> int:
        last_page = total_pages(total_count, self._page_size) - 1
        self._page_index = min(max(0, self._page_index), last_page)
        return self._page_index

    def view(self, total_count: int) -> PageView:
        self.clamp(total_count)
        return PageView(source_size=max(0, total_count), page_index=self._page_index, page_size=self._page_size)

    def page_items(self, items: Sequence[T]) -> list[T]:
        start, end = self.view(len(items)).bounds
        return list(items[start:end])
