"""
Pagination utilities.

This module provides the sorting and slicing helpers used by listing endpoints.
"""

import logging
from operator import attrgetter
from typing import Generic, Optional, Sequence, TypeVar

from pydantic import BaseModel

from app.api.v1.schemas.users import ListingQuery, SortField

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ListingResult(BaseModel, Generic[T]):
    """One page of an ordered collection."""
    items: list[T]
    total_results: int


def sort_records(records: Sequence[T], field: Optional[SortField] = None) -> list[T]:
    """
    Return the records ordered by the given field.

    The sort is stable and ascending; strings compare by code point and
    integers numerically. The input sequence is never modified.

    Args:
        records: Records to order
        field: Attribute to sort by, None to keep storage order

    Returns:
        list: A new list
    """
    if field is None:
        return list(records)

    logger.debug(f"Sorting {len(records)} records by {field.value}")
    return sorted(records, key=attrgetter(field.value))


def paginate(records: Sequence[T], query: ListingQuery) -> ListingResult[T]:
    """
    Sort and slice a collection according to a validated query.

    Pages past the end of the collection are valid and yield no items.

    Args:
        records: Full collection
        query: Validated page, size and sort

    Returns:
        ListingResult: Items on the requested page and the total count
    """
    ordered = sort_records(records, query.sort)

    total_results = len(ordered)
    start_index = query.offset
    end_index = start_index + query.size
    items = ordered[start_index:end_index]

    logger.debug(
        f"Pagination applied: start={start_index} end={end_index} "
        f"returned={len(items)} total={total_results}"
    )

    if start_index >= total_results and total_results > 0:
        logger.warning(
            f"Requested page beyond available data: page={query.page} "
            f"size={query.size} total={total_results}"
        )

    return ListingResult(items=items, total_results=total_results)
