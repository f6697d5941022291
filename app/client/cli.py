"""
Command-line browser for the user directory.

Usage:
    user-directory --page 2 --size 5 --sort name
    user-directory --interactive
"""

import argparse
import asyncio
import logging
from typing import Optional

from app.api.utils.exceptions import InvalidSizeException, ValidationException
from app.api.utils.validation import VALID_SORT_FIELDS
from app.client.api import UserApiClient
from app.client.browser import UserDirectoryBrowser
from app.client.pagination import ListingState
from config import settings

PAGE_SIZE_CHOICES = ", ".join(str(size) for size in settings.PAGE_SIZE_OPTIONS)

HELP_TEXT = (
    "Commands: n (next), p (previous), <number> (go to page), "
    f"sort name|id, reset, size N ({PAGE_SIZE_CHOICES}), q (quit)"
)


def parse_command(line: str) -> tuple[str, Optional[str]]:
    """
    Split an interactive command into an action and its argument.

    Example:
        >>> parse_command("size 25")
        ('size', '25')
        >>> parse_command("3")
        ('page', '3')
    """
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "noop", None

    action = parts[0].lower()
    argument = parts[1].strip() if len(parts) > 1 else None

    if action.isdecimal():
        return "page", action
    if action in ("n", "next"):
        return "next", None
    if action in ("p", "prev", "previous"):
        return "previous", None
    if action in ("q", "quit", "exit"):
        return "quit", None
    if action in ("sort", "size", "reset", "help"):
        return action, argument
    return "unknown", line.strip()


async def apply_command(browser: UserDirectoryBrowser, action: str, argument: Optional[str]) -> bool:
    """
    Run one interactive command against the browser.

    Returns:
        bool: False when the session should end

    Raises:
        ValidationException: If a page, size or sort argument is rejected
    """
    if action == "quit":
        return False
    if action == "next":
        await browser.next_page()
    elif action == "previous":
        await browser.previous_page()
    elif action == "page" and argument is not None:
        await browser.change_page(int(argument))
    elif action == "sort" and argument:
        await browser.change_sort(argument)
    elif action == "reset":
        await browser.reset_sort()
    elif action == "size" and argument and argument.isdecimal():
        size = int(argument)
        if size not in settings.PAGE_SIZE_OPTIONS:
            raise InvalidSizeException(f"Invalid size parameter. Choose one of {PAGE_SIZE_CHOICES}")
        await browser.change_page_size(size)
    elif action == "noop":
        pass
    else:
        print(HELP_TEXT)
    return True


async def run(args: argparse.Namespace) -> int:
    state = ListingState(page=args.page, size=args.size, sort=args.sort)
    async with UserApiClient(base_url=args.base_url, timeout=args.timeout) as api:
        browser = UserDirectoryBrowser(api, state=state)
        await browser.refresh()
        print(browser.render())

        if not args.interactive:
            return 1 if browser.error else 0

        print(HELP_TEXT)
        while True:
            try:
                line = await asyncio.to_thread(input, "> ")
            except EOFError:
                break

            action, argument = parse_command(line)
            try:
                keep_going = await apply_command(browser, action, argument)
            except ValidationException as e:
                print(f"Error: {e.message}")
                continue
            if not keep_going:
                break
            print(browser.render())
    return 0


def positive_int(value: str) -> int:
    """argparse type for page numbers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid page number: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"page must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse the user directory")
    parser.add_argument("--base-url", default=settings.API_BASE_URL, help="API root URL")
    parser.add_argument("--page", type=positive_int, default=settings.DEFAULT_PAGE, help="Page to show")
    parser.add_argument(
        "--size",
        type=int,
        choices=settings.PAGE_SIZE_OPTIONS,
        default=settings.DEFAULT_PAGE_SIZE,
        help="Users per page",
    )
    parser.add_argument("--sort", choices=VALID_SORT_FIELDS, default=None, help="Sort field")
    parser.add_argument("--timeout", type=float, default=settings.CLIENT_TIMEOUT, help="Request timeout (s)")
    parser.add_argument("-i", "--interactive", action="store_true", help="Navigate interactively")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING)
    return asyncio.run(run(args))


if __name__ == "__main__":
    raise SystemExit(main())
