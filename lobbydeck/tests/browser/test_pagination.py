from __future__ import annotations

import pytest

from core.browser.pagination import BrowserTab, PaginationController, total_pages, visible_slice


def test_empty_source_has_one_page() -> None:
    assert total_pages(0, 4) == 1
    assert visible_slice(0, 0, 4) == (0, 0)


@pytest.mark.parametrize("count", [0, 1, 3, 4, 5, 8, 9, 17])
def test_slices_stay_within_bounds(count) -> None:
    pages = total_pages(count, 4)
    seen = 0
    for page in range(pages + 2):
        start, end = visible_slice(count, page, 4)
        assert 0 <= start <= end <= count
        assert end - start <= 4
        seen += end - start

    assert seen == count


def test_non_positive_page_size_rejected() -> None:
    with pytest.raises(ValueError):
        total_pages(3, 0)
    with pytest.raises(ValueError):
        PaginationController(page_size=0)


def test_next_and_previous_stop_at_edges() -> None:
    pagination = PaginationController(page_size=4)

    assert pagination.previous_page() is False
    assert pagination.next_page(9) is True
    assert pagination.next_page(9) is True
    assert pagination.next_page(9) is False
    assert pagination.page_index == 2
    assert pagination.previous_page() is True
    assert pagination.page_index == 1


def test_switch_tab_resets_page() -> None:
    pagination = PaginationController(page_size=4)
    pagination.next_page(10)

    pagination.switch_tab(BrowserTab.ROOMS)

    assert pagination.active_tab is BrowserTab.ROOMS
    assert pagination.page_index == 0


def test_clamp_after_source_shrinks() -> None:
    pagination = PaginationController(page_size=4)
    pagination.next_page(12)
    pagination.next_page(12)

    assert pagination.clamp(5) == 1
    assert pagination.clamp(0) == 0


def test_page_items() -> None:
    pagination = PaginationController(page_size=4)
    items = list(range(10))
    pagination.next_page(len(items))
    pagination.next_page(len(items))

    assert pagination.page_items(items) == [8, 9]
    view = pagination.view(len(items))
    assert view.has_previous is True
    assert view.has_next is False
    assert view.total_pages == 3
