import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from httpx import AsyncClient, ASGITransport

from app.api.db.collection import get_user_collection
from app.api.v1.models.user import User
from main import app

FIVE_USERS = (
    User(name="Jorn", id=0),
    User(name="Markus", id=3),
    User(name="Andrew", id=2),
    User(name="Ori", id=4),
    User(name="Mike", id=1),
)


@pytest.fixture
def five_users():
    return FIVE_USERS


@pytest_asyncio.fixture
async def client():
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac


@pytest_asyncio.fixture
async def small_client(client, five_users):
    app.dependency_overrides[get_user_collection] = lambda: five_users
    try:
        yield client
    finally:
        app.dependency_overrides.pop(get_user_collection, None)
