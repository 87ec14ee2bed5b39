from core.browser.browser_model import BrowserSnapshot, NewSaveEntry, SaveEntry, SessionBrowserModel
from core.browser.pagination import (
    DEFAULT_PAGE_SIZE,
    BrowserTab,
    PageView,
    PaginationController,
    total_pages,
    visible_slice,
)

__all__ = [
    "BrowserSnapshot",
    "BrowserTab",
    "DEFAULT_PAGE_SIZE",
    "NewSaveEntry",
    "PageView",
    "PaginationController",
    "SaveEntry",
    "SessionBrowserModel",
    "total_pages",
    "visible_slice",
]
