"""
User directory routes.

This module provides the paginated, sortable user listing endpoint.
"""

import logging
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from app.api.core.dependencies import get_listing_query
from app.api.db.collection import UserCollection, get_user_collection
from app.api.v1.schemas.response import ErrorResponseModel
from app.api.v1.schemas.users import ListingQuery, UserListResponse
from app.api.v1.services.users import UserService
from app.api.utils.exceptions import UserDirectoryException
from app.api.utils.response import listing_response, error_response

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["Users"])


def listing_base_url(request: Request) -> str:
    """Scheme, host and path of the current request, without the query string."""
    return str(request.url.replace(query="", fragment=""))


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=UserListResponse,
    responses={
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ErrorResponseModel},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponseModel},
    },
)
async def list_users(
    request: Request,
    query: ListingQuery = Depends(get_listing_query),
    users: UserCollection = Depends(get_user_collection),
) -> JSONResponse:
    """
    Get a paginated, optionally sorted list of users.

    Pages past the end of the directory return an empty ``data`` list.
    ``paging.previous`` and ``paging.next`` are present only when such a
    page exists and carry the same size and sort.

    Args:
        request (Request): Incoming request, used to build paging links
        query (ListingQuery): Validated page, size and sort
        users (UserCollection): Read-only user collection

    Returns:
        JSONResponse: ``{"data": [...], "paging": {...}}``
    """
    request_id = getattr(request.state, "request_id", None)
    logger.info(f"list_users endpoint called [{request_id}]: {dict(request.query_params)}")

    try:
        result = UserService.list_users(users, query)
        paging = UserService.build_paging(
            query=query,
            total_results=result.total_results,
            base_url=listing_base_url(request),
        )

        logger.info(
            f"list_users completed [{request_id}]: returned={len(result.items)} "
            f"total={result.total_results} page={query.page} size={query.size}"
        )

        return listing_response(result.items, paging)
    except UserDirectoryException:
        raise
    except Exception as e:
        logger.error(f"User listing failed [{request_id}]: {str(e)}", exc_info=True)
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An unexpected error occurred",
            detail="INTERNAL_SERVER_ERROR",
            request_id=request_id,
        )
