"""
Custom exception classes for the User Directory Service.

This module defines all custom exceptions used throughout the application
for consistent error handling and logging.
"""

from typing import Any, Optional
from fastapi import status


class UserDirectoryException(Exception):
    """
    Base exception class for all User Directory Service exceptions.

    Attributes:
        message (str): Error message
        status_code (int): HTTP status code
        error_code (str): Application-specific error code
        details (dict): Additional error details
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize UserDirectoryException.

        Args:
            message (str): Error message
            status_code (int): HTTP status code (default: 500)
            error_code (str): Application-specific error code (default: INTERNAL_ERROR)
            details (dict, optional): Additional error details
        """
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(UserDirectoryException):
    """
    Raised when a listing query parameter fails validation.

    Attributes:
        field (str): Name of the rejected query parameter

    Examples:
        >>> raise ValidationException("Invalid page parameter", field="page")
    """

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[dict] = None):
        """Initialize ValidationException."""
        self.field = field
        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class InvalidPageException(ValidationException):
    """
    Raised when the page parameter is not an integer >= 1.

    Examples:
        >>> raise InvalidPageException()
    """

    def __init__(self, message: str = "Invalid page parameter", details: Optional[dict] = None):
        """Initialize InvalidPageException."""
        super().__init__(message=message, field="page", details=details)


class InvalidSizeException(ValidationException):
    """
    Raised when the size parameter is not an integer within the allowed range.

    Examples:
        >>> raise InvalidSizeException("Invalid size parameter. Must be between 1 and 100")
    """

    def __init__(self, message: str = "Invalid size parameter", details: Optional[dict] = None):
        """Initialize InvalidSizeException."""
        super().__init__(message=message, field="size", details=details)


class InvalidSortException(ValidationException):
    """
    Raised when the sort parameter does not name a sortable field.

    Examples:
        >>> raise InvalidSortException("Invalid sort field. Valid fields: name, id")
    """

    def __init__(self, message: str = "Invalid sort field", details: Optional[dict] = None):
        """Initialize InvalidSortException."""
        super().__init__(message=message, field="sort", details=details)


class InternalFailureException(UserDirectoryException):
    """
    Raised on programming or configuration errors, e.g. a malformed base URL
    or a corrupt users data file.

    Examples:
        >>> raise InternalFailureException("Malformed base URL: /users")
    """

    def __init__(self, message: str = "Internal failure", details: Optional[dict] = None):
        """Initialize InternalFailureException."""
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code="INTERNAL_ERROR",
            details=details,
        )
