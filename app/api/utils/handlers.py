"""
Exception handlers for the User Directory Service.

This module provides global exception handlers for FastAPI application.
"""

import logging
from fastapi import Request, status

from app.api.utils.exceptions import UserDirectoryException
from app.api.utils.response import error_response

logger = logging.getLogger(__name__)


def _request_id(request: Request):
    return getattr(request.state, "request_id", None)


async def user_directory_exception_handler(request: Request, exc: UserDirectoryException):
    """
    Global exception handler for all UserDirectoryException and subclasses.

    Args:
        request (Request): The request that caused the exception
        exc (UserDirectoryException): The exception instance

    Returns:
        JSONResponse: Formatted error response
    """
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{exc.error_code}: {exc.message} ({request.method} {request.url.path})")
    else:
        logger.warning(f"{exc.error_code}: {exc.message} ({request.method} {request.url.path})")

    return error_response(
        status_code=exc.status_code,
        message=exc.message,
        detail=exc.error_code,
        request_id=_request_id(request),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """
    Last-resort handler for unexpected errors.

    Args:
        request (Request): The request that caused the exception
        exc (Exception): The exception instance

    Returns:
        JSONResponse: Generic 500 response
    """
    logger.error(
        f"Unexpected error on {request.method} {request.url.path}: {str(exc)}",
        exc_info=exc,
    )

    return error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message="Internal server error",
        detail="INTERNAL_SERVER_ERROR",
        request_id=_request_id(request),
    )
