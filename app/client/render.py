"""
Plain-text rendering of the user table and pagination controls.
"""

from typing import Sequence

from app.api.v1.models.user import User
from app.client.pagination import result_range


def render_users_table(users: Sequence[User]) -> str:
    """
    Render users as a two-column ID/Name table.

    Args:
        users (Sequence[User]): Users on the current page

    Returns:
        str: Table text, or a notice when there are no users
    """
    if not users:
        return "No users found"

    id_width = max(len("ID"), *(len(str(user.id)) for user in users))
    name_width = max(len("Name"), *(len(user.name) for user in users))

    lines = [
        f"{'ID':>{id_width}}  {'Name':<{name_width}}",
        f"{'-' * id_width}  {'-' * name_width}",
    ]
    lines.extend(f"{user.id:>{id_width}}  {user.name:<{name_width}}" for user in users)
    return "\n".join(lines)


def render_pagination(
    current_page: int,
    total_results: int,
    page_size: int,
    page_numbers: Sequence[int],
    has_previous: bool,
    has_next: bool,
) -> str:
    """
    Render the result summary and page controls.

    The current page is bracketed; Previous/Next are shown in parentheses
    when disabled.

    Example:
        >>> print(render_pagination(2, 25, 10, [1, 2, 3], True, True))
        Showing 11 to 20 of 25 users
        < Previous  1 [2] 3  Next >
    """
    start, end = result_range(current_page, total_results, page_size)
    if start > end:
        summary = f"Showing 0 of {total_results} users"
    else:
        summary = f"Showing {start} to {end} of {total_results} users"

    previous = "< Previous" if has_previous else "(< Previous)"
    next_ = "Next >" if has_next else "(Next >)"
    pages = " ".join(
        f"[{number}]" if number == current_page else str(number)
        for number in page_numbers
    )

    controls = f"{previous}  {pages}  {next_}" if pages else f"{previous}  {next_}"
    return f"{summary}\n{controls}"
