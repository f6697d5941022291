"""
Client-side pagination helpers.

Page window selection for the pagination controls and the navigation
state the browser keeps between fetches.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from app.api.utils.exceptions import (
    InvalidPageException,
    InvalidSizeException,
    InvalidSortException,
)
from app.api.utils.validation import MAX_SIZE, MIN_PAGE, MIN_SIZE, VALID_SORT_FIELDS
from config import settings

logger = logging.getLogger(__name__)


def page_window(
    current_page: int,
    total_results: int,
    page_size: int,
    max_visible: int = settings.MAX_VISIBLE_PAGES,
) -> list[int]:
    """
    Pick the page numbers to show as buttons.

    All pages are shown when they fit. Otherwise the first pages are shown
    near the start, the last pages near the end, and a window starting two
    pages before the current one in between.

    Args:
        current_page (int): Page being displayed
        total_results (int): Total number of results
        page_size (int): Results per page
        max_visible (int): Maximum number of page buttons

    Returns:
        list[int]: Ascending page numbers, empty when there are no results

    Example:
        >>> page_window(5, 100, 10)
        [3, 4, 5, 6, 7]
    """
    total_pages = math.ceil(total_results / page_size)

    if total_pages <= max_visible:
        return list(range(1, total_pages + 1))

    if current_page <= 3:
        return list(range(1, max_visible + 1))

    if current_page >= total_pages - 2:
        return list(range(total_pages - max_visible + 1, total_pages + 1))

    start = current_page - 2
    return list(range(start, start + max_visible))


def result_range(current_page: int, total_results: int, page_size: int) -> tuple[int, int]:
    """1-based positions of the first and last result on the current page."""
    start = (current_page - 1) * page_size + 1
    end = min(current_page * page_size, total_results)
    return start, end


@dataclass
class ListingState:
    """
    Page, size and sort selected in the client.

    Values are validated on construction. Transitions validate their input
    first, so a rejected transition leaves the state unchanged.
    """

    page: int = settings.DEFAULT_PAGE
    size: int = settings.DEFAULT_PAGE_SIZE
    sort: Optional[str] = None

    def __post_init__(self) -> None:
        _check_page(self.page)
        _check_size(self.size)
        if self.sort is not None:
            _check_sort(self.sort)

    def sort_clicked(self, field: str) -> None:
        """Toggle sorting by field and go back to the first page."""
        _check_sort(field)
        self.sort = None if field == self.sort else field
        self.page = MIN_PAGE
        logger.debug(f"Sort changed: {self.sort}")

    def sort_reset(self) -> None:
        """Restore storage order and go back to the first page."""
        self.sort = None
        self.page = MIN_PAGE

    def page_size_changed(self, size: int) -> None:
        _check_size(size)
        self.size = size
        self.page = MIN_PAGE

    def page_changed(self, page: int) -> None:
        _check_page(page)
        self.page = page


def _check_page(page: int) -> None:
    if page < MIN_PAGE:
        raise InvalidPageException("Invalid page parameter")


def _check_size(size: int) -> None:
    if size < MIN_SIZE or size > MAX_SIZE:
        raise InvalidSizeException(
            f"Invalid size parameter. Must be between {MIN_SIZE} and {MAX_SIZE}"
        )


def _check_sort(field: str) -> None:
    if field not in VALID_SORT_FIELDS:
        raise InvalidSortException(
            f"Invalid sort field. Valid fields: {', '.join(VALID_SORT_FIELDS)}"
        )
