"""
Listing dependencies for FastAPI routes.

This module turns raw listing query strings into a validated ListingQuery.
"""

from typing import Optional
from fastapi import Query

from app.api.utils.validation import validate_listing_params
from app.api.v1.schemas.users import ListingQuery


async def get_listing_query(
    page: Optional[str] = Query(None, description="Page number (starting from 1)", examples=["1"]),
    size: Optional[str] = Query(None, description="Items per page (1-100, default 10)", examples=["10"]),
    sort: Optional[str] = Query(None, description="Sort field: name or id", examples=["name"]),
) -> ListingQuery:
    """
    Validate listing query parameters.

    Parameters are declared as strings so the validator sees the raw input
    and reports errors with the application error format.

    Raises:
        ValidationException: If page, size or sort is invalid
    """
    return validate_listing_params(page=page, size=size, sort=sort)
