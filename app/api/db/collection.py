import logging
from pathlib import Path
from typing import Union

from fastapi import FastAPI, Request
from pydantic import TypeAdapter, ValidationError

from app.api.utils.exceptions import InternalFailureException
from app.api.v1.models.user import User
from config import settings

logger = logging.getLogger(__name__)

UserCollection = tuple[User, ...]

_users_adapter = TypeAdapter(list[User])


def load_users(path: Union[str, Path]) -> UserCollection:
    """
    Load the user collection from a JSON array of ``{"id", "name"}`` objects.

    Args:
        path (str | Path): Location of the data file

    Returns:
        tuple[User, ...]: Users in file order

    Raises:
        InternalFailureException: If the file is missing, malformed or has duplicate ids
    """
    data_path = Path(path)
    try:
        users = _users_adapter.validate_json(data_path.read_bytes())
    except FileNotFoundError as e:
        raise InternalFailureException(f"Users data file not found: {data_path}") from e
    except ValidationError as e:
        raise InternalFailureException(
            f"Users data file is malformed: {data_path}",
            details={"errors": e.errors(include_url=False)},
        ) from e

    seen: set[int] = set()
    for user in users:
        if user.id in seen:
            raise InternalFailureException(f"Duplicate user id {user.id} in {data_path}")
        seen.add(user.id)

    logger.info(f"Loaded {len(users)} users from {data_path}")
    return tuple(users)


def init_collection(app: FastAPI) -> None:
    """Load the configured data file onto the application state."""
    app.state.users = load_users(settings.USERS_DATA_FILE)


def get_user_collection(request: Request) -> UserCollection:
    """
    Dependency that provides the read-only user collection.

    Returns:
        tuple[User, ...]: Users loaded at startup
    """
    return request.app.state.users
