"""
User directory browser.

Holds the navigation state, refetches the listing after every transition
and renders the current page.
"""

import asyncio
import logging
from typing import Optional

from app.api.v1.models.user import User
from app.api.v1.schemas.users import PagingLinks
from app.client.api import UserApiClient, UserApiError
from app.client.pagination import ListingState, page_window
from app.client.render import render_pagination, render_users_table
from config import settings

logger = logging.getLogger(__name__)


class UserDirectoryBrowser:
    """
    Client-side view of the user directory.

    Only one fetch is in flight at a time: starting a new one cancels the
    previous fetch, and a cancelled fetch never touches the displayed data.
    """

    def __init__(
        self,
        api: UserApiClient,
        state: Optional[ListingState] = None,
        max_visible_pages: int = settings.MAX_VISIBLE_PAGES,
    ):
        self.api = api
        self.state = state or ListingState()
        self.max_visible_pages = max_visible_pages
        self.users: list[User] = []
        self.paging = PagingLinks(total_results=0)
        self.error: Optional[str] = None
        self.loading = False
        self._inflight: Optional[asyncio.Task] = None

    async def _fetch(self, page: int, size: int, sort: Optional[str]) -> None:
        self.loading = True
        self.error = None
        try:
            response = await self.api.get_users(page, size, sort)
            self.users = list(response.data)
            self.paging = response.paging
        except UserApiError as e:
            self.error = e.message
            self.users = []
            self.paging = PagingLinks(total_results=0)
        finally:
            if asyncio.current_task() is self._inflight:
                self.loading = False

    async def refresh(self) -> None:
        """
        Fetch the page described by the current state.

        Supersedes any fetch still in flight.
        """
        if self._inflight is not None and not self._inflight.done():
            logger.debug("Cancelling superseded listing fetch")
            self._inflight.cancel()

        task = asyncio.create_task(self._fetch(self.state.page, self.state.size, self.state.sort))
        self._inflight = task
        try:
            await task
        except asyncio.CancelledError:
            if self._inflight is task:
                raise
            logger.debug(
                f"Listing fetch for page={self.state.page} superseded before completion"
            )

    async def change_sort(self, field: str) -> None:
        self.state.sort_clicked(field)
        await self.refresh()

    async def reset_sort(self) -> None:
        self.state.sort_reset()
        await self.refresh()

    async def change_page_size(self, size: int) -> None:
        self.state.page_size_changed(size)
        await self.refresh()

    async def change_page(self, page: int) -> None:
        self.state.page_changed(page)
        await self.refresh()

    async def next_page(self) -> None:
        if self.paging.next:
            await self.change_page(self.state.page + 1)

    async def previous_page(self) -> None:
        if self.paging.previous:
            await self.change_page(self.state.page - 1)

    def page_numbers(self) -> list[int]:
        """Page buttons for the current state and last fetched total."""
        return page_window(
            self.state.page,
            self.paging.total_results,
            self.state.size,
            self.max_visible_pages,
        )

    def render(self) -> str:
        """Render the current page as text."""
        if self.loading:
            return "Loading..."
        if self.error:
            return f"Error: {self.error}"

        return "\n\n".join([
            render_users_table(self.users),
            render_pagination(
                current_page=self.state.page,
                total_results=self.paging.total_results,
                page_size=self.state.size,
                page_numbers=self.page_numbers(),
                has_previous=bool(self.paging.previous),
                has_next=bool(self.paging.next),
            ),
        ])
