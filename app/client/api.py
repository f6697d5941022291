"""
User directory API client.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from app.api.v1.schemas.users import UserListResponse
from config import settings

logger = logging.getLogger(__name__)


class UserApiError(Exception):
    """
    Raised when the user listing cannot be fetched.

    Attributes:
        message (str): Error message
        status_code (int, optional): HTTP status of the failed response
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class UserApiClient:
    """Async client for the user listing endpoint."""

    def __init__(
        self,
        base_url: str = settings.API_BASE_URL,
        timeout: float = settings.CLIENT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize UserApiClient.

        Args:
            base_url (str): API root, e.g. ``http://localhost:8000/api/v1``
            timeout (float): Request timeout in seconds
            transport (httpx.AsyncBaseTransport, optional): Custom transport, used in tests
        """
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def __aenter__(self) -> "UserApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def get_users(self, page: int, size: int, sort: Optional[str] = None) -> UserListResponse:
        """
        Fetch one page of users.

        Args:
            page (int): Page number
            size (int): Users per page
            sort (str, optional): Field to sort by

        Returns:
            UserListResponse: Users and paging metadata

        Raises:
            UserApiError: On transport failure, non-2xx status or malformed body
        """
        params: list[tuple[str, str]] = [("page", str(page)), ("size", str(size))]
        if sort:
            params.append(("sort", sort))

        try:
            resp = await self._client.get(f"{self.base_url}/users", params=params)
        except httpx.HTTPError as e:
            logger.error(f"User listing request failed: {str(e)}")
            raise UserApiError(f"Failed to fetch users: {str(e)}") from e

        if resp.is_error:
            logger.warning(f"User listing returned {resp.status_code}: {resp.text}")
            raise UserApiError(
                f"Failed to fetch users: {resp.reason_phrase}",
                status_code=resp.status_code,
            )

        try:
            return UserListResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Malformed user listing response: {str(e)}")
            raise UserApiError("Failed to fetch users: malformed response") from e
