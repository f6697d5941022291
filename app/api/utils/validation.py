"""
Listing parameter validation.

Raw query strings are trimmed, escaped and checked here before they reach
the paginator. Parameters are checked in the order page, size, sort and
the first failure is reported.
"""

import html
import logging
import re
from typing import Optional

from app.api.utils.exceptions import (
    InvalidPageException,
    InvalidSizeException,
    InvalidSortException,
)
from app.api.v1.schemas.users import ListingQuery, SortField
from config import settings

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"[0-9]+")
MIN_PAGE = 1
MIN_SIZE = 1
MAX_SIZE = settings.MAX_PAGE_SIZE
VALID_SORT_FIELDS = [field.value for field in SortField]


def sanitize_param(value: Optional[str]) -> Optional[str]:
    """
    Trim surrounding whitespace and escape HTML special characters.

    Args:
        value (str, optional): Raw query parameter value

    Returns:
        str | None: Sanitized value, or None when the parameter was absent
    """
    if value is None:
        return None
    return html.escape(value.strip(), quote=True)


def _parse_integer(value: str) -> Optional[int]:
    if not INTEGER_PATTERN.fullmatch(value):
        return None
    try:
        return int(value)
    except ValueError:
        # More digits than the interpreter will convert
        return None


def validate_page(raw_page: Optional[str]) -> int:
    """
    Validate the page parameter.

    Args:
        raw_page (str, optional): Raw page value

    Returns:
        int: Page number, DEFAULT_PAGE when absent

    Raises:
        InvalidPageException: If the value is not an unsigned integer >= 1, or has
            more digits than can be converted
    """
    page_str = sanitize_param(raw_page)
    if page_str is None:
        return settings.DEFAULT_PAGE

    page = _parse_integer(page_str)
    if page is None or page < MIN_PAGE:
        logger.warning(f"Invalid page parameter rejected: {page_str!r}")
        raise InvalidPageException("Invalid page parameter")
    return page


def validate_size(raw_size: Optional[str]) -> int:
    """
    Validate the size parameter.

    Args:
        raw_size (str, optional): Raw size value

    Returns:
        int: Page size, DEFAULT_PAGE_SIZE when absent

    Raises:
        InvalidSizeException: If the value is not an unsigned integer in [1, MAX_SIZE]
    """
    size_str = sanitize_param(raw_size)
    if size_str is None:
        return settings.DEFAULT_PAGE_SIZE

    size = _parse_integer(size_str)
    if size is None or size < MIN_SIZE or size > MAX_SIZE:
        logger.warning(f"Invalid size parameter rejected: {size_str!r} (max: {MAX_SIZE})")
        raise InvalidSizeException(
            f"Invalid size parameter. Must be between {MIN_SIZE} and {MAX_SIZE}"
        )
    return size


def validate_sort(raw_sort: Optional[str]) -> Optional[SortField]:
    """
    Validate the sort parameter. Matching is exact and case-sensitive.

    Args:
        raw_sort (str, optional): Raw sort value

    Returns:
        SortField | None: Sort field, None when absent

    Raises:
        InvalidSortException: If the value is empty or not a sortable field
    """
    sort_str = sanitize_param(raw_sort)
    if sort_str is None:
        return None

    if not sort_str or sort_str not in VALID_SORT_FIELDS:
        logger.warning(f"Invalid sort field rejected: {sort_str!r} (valid: {VALID_SORT_FIELDS})")
        raise InvalidSortException(
            f"Invalid sort field. Valid fields: {', '.join(VALID_SORT_FIELDS)}"
        )
    return SortField(sort_str)


def validate_listing_params(
    page: Optional[str] = None,
    size: Optional[str] = None,
    sort: Optional[str] = None,
) -> ListingQuery:
    """
    Turn raw listing query parameters into a validated ListingQuery.

    Args:
        page (str, optional): Raw page value
        size (str, optional): Raw size value
        sort (str, optional): Raw sort value

    Returns:
        ListingQuery: Validated query

    Raises:
        ValidationException: For the first parameter that fails, checked
            in the order page, size, sort

    Example:
        >>> validate_listing_params(page="2", size="5", sort="name")
        ListingQuery(page=2, size=5, sort=<SortField.NAME: 'name'>)
    """
    query = ListingQuery(
        page=validate_page(page),
        size=validate_size(size),
        sort=validate_sort(sort),
    )
    logger.debug(f"Listing parameters validated: {query}")
    return query
