"""
Paging link helpers.

Builds the previous/next URLs returned in the ``paging`` block of listing
responses.
"""

import logging
import math
from typing import Optional
from urllib.parse import urlencode, urlsplit

from app.api.utils.exceptions import InternalFailureException
from app.api.v1.schemas.users import ListingQuery, PagingLinks

logger = logging.getLogger(__name__)


def total_pages(total_results: int, size: int) -> int:
    """Number of pages needed to show total_results items, size per page."""
    return math.ceil(total_results / size)


def build_page_url(base_url: str, page: int, query: ListingQuery) -> str:
    """
    Build the URL of a single page.

    Query parameters are always appended in the order page, size, sort.

    Args:
        base_url (str): Scheme, host and path of the listing endpoint
        page (int): Page number to link to
        query (ListingQuery): Current query, for size and sort

    Returns:
        str: Absolute page URL
    """
    params: list[tuple[str, str]] = [("page", str(page)), ("size", str(query.size))]
    if query.sort is not None:
        params.append(("sort", query.sort.value))
    return f"{base_url}?{urlencode(params)}"


def _check_base_url(base_url: str) -> None:
    parts = urlsplit(base_url)
    if not parts.scheme or not parts.netloc or parts.query:
        raise InternalFailureException(f"Malformed base URL: {base_url!r}")


def build_paging_links(query: ListingQuery, total_results: int, base_url: str) -> PagingLinks:
    """
    Derive the paging block for a listing response.

    ``previous`` is set only when page > 1, ``next`` only while there are
    pages after the current one. ``totalResults`` is always present.

    Args:
        query (ListingQuery): Validated query
        total_results (int): Size of the whole collection
        base_url (str): Scheme, host and path of the listing endpoint

    Returns:
        PagingLinks: Paging metadata

    Raises:
        InternalFailureException: If base_url lacks a scheme or host

    Example:
        >>> links = build_paging_links(ListingQuery(page=1, size=2), 5, "http://localhost/api/users")
        >>> links.next
        'http://localhost/api/users?page=2&size=2'
    """
    _check_base_url(base_url)
    pages = total_pages(total_results, query.size)

    logger.debug(
        f"Building paging URLs: page={query.page} size={query.size} "
        f"total_pages={pages} total={total_results}"
    )

    previous: Optional[str] = None
    next_url: Optional[str] = None

    if query.page > 1:
        previous = build_page_url(base_url, query.page - 1, query)
        logger.debug(f"Previous page URL generated: {previous}")

    if query.page < pages:
        next_url = build_page_url(base_url, query.page + 1, query)
        logger.debug(f"Next page URL generated: {next_url}")

    return PagingLinks(total_results=total_results, previous=previous, next=next_url)
