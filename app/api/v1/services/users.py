"""
User listing service layer.

This module provides business logic for ordering, paging and linking the user directory.
"""

import logging
from typing import Sequence

from app.api.utils.links import build_paging_links
from app.api.utils.pagination import ListingResult, paginate
from app.api.v1.models.user import User
from app.api.v1.schemas.users import ListingQuery, PagingLinks

logger = logging.getLogger(__name__)


class UserService:
    """Service class for user directory listing operations."""

    @staticmethod
    def list_users(users: Sequence[User], query: ListingQuery) -> ListingResult[User]:
        """
        Get one page of the user directory.

        Args:
            users (Sequence[User]): Full, read-only user collection
            query (ListingQuery): Validated page, size and sort

        Returns:
            ListingResult[User]: Users on the page and the total user count
        """
        sort = query.sort.value if query.sort else "none"
        logger.info(f"UserService.list_users called: page={query.page} size={query.size} sort={sort}")

        result = paginate(users, query)

        logger.info(
            f"UserService.list_users completed: returned={len(result.items)} "
            f"total={result.total_results}"
        )
        return result

    @staticmethod
    def build_paging(query: ListingQuery, total_results: int, base_url: str) -> PagingLinks:
        """
        Build previous/next links for a listing response.

        Args:
            query (ListingQuery): Validated query the page was produced from
            total_results (int): Total number of users
            base_url (str): Listing endpoint URL without query string

        Returns:
            PagingLinks: Paging metadata

        Raises:
            InternalFailureException: If base_url is malformed
        """
        return build_paging_links(query, total_results, base_url)
