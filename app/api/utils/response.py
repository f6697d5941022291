"""
Response payload utilities for consistent API response formatting.

Provides standardized response structures for listing and error cases
with proper HTTP status codes and data formatting.
"""

from typing import Optional, Sequence
from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.api.v1.models.user import User
from app.api.v1.schemas.users import PagingLinks


def listing_response(users: Sequence[User], paging: PagingLinks) -> JSONResponse:
    """
    Returns a JSON response for a page of users.

    Args:
        users (Sequence[User]): Users on the page
        paging (PagingLinks): Paging metadata

    Returns:
        JSONResponse: ``{"data": [...], "paging": {...}}``
    """
    content = {
        "data": [user.model_dump() for user in users],
        "paging": paging.to_response(),
    }
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(content))


def error_response(
    status_code: int,
    message: str = "An error occurred",
    detail: Optional[str] = None,
    request_id: Optional[str] = None,
) -> JSONResponse:
    """
    Generate a standardized error response.

    Args:
        status_code (int): HTTP status code
        message (str): Error message
        detail (str, optional): Machine-readable error code
        request_id (str, optional): Request ID for correlation

    Returns:
        JSONResponse: Formatted error response
    """
    content = {
        "status_code": status_code,
        "status": False,
        "message": message,
    }
    if detail is not None:
        content["detail"] = detail
    if request_id is not None:
        content["request_id"] = request_id

    return JSONResponse(
        status_code=status_code,
        content=content
    )
