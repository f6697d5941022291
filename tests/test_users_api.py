import pytest

from app.api.db.collection import get_user_collection
from main import app, format_uptime


@pytest.mark.asyncio
async def test_default_pagination(client):
    resp = await client.get("/api/v1/users")

    assert resp.status_code == 200
    body = resp.json()
    assert len(body["data"]) == 10
    assert body["data"][0] == {"id": 0, "name": "Jorn"}
    assert body["paging"] == {
        "totalResults": 50,
        "next": "http://test/api/v1/users?page=2&size=10",
    }


@pytest.mark.asyncio
async def test_legacy_unversioned_route(client):
    resp = await client.get("/api/users?size=5")

    assert resp.status_code == 200
    body = resp.json()
    assert len(body["data"]) == 5
    assert body["paging"]["next"] == "http://test/api/users?page=2&size=5"


@pytest.mark.asyncio
async def test_sort_by_name_across_pages(client):
    first = (await client.get("/api/v1/users?sort=name&size=1")).json()
    second = (await client.get("/api/v1/users?sort=name&size=1&page=2")).json()

    assert first["data"] == [{"id": 16, "name": "Aisha"}]
    assert second["data"] == [{"id": 2, "name": "Andrew"}]
    assert second["paging"]["previous"] == "http://test/api/v1/users?page=1&size=1&sort=name"
    assert second["paging"]["next"] == "http://test/api/v1/users?page=3&size=1&sort=name"


@pytest.mark.asyncio
async def test_sort_by_id_last_page(client):
    resp = await client.get("/api/v1/users?sort=id&page=4&size=15")

    body = resp.json()
    assert [user["id"] for user in body["data"]] == [45, 46, 47, 48, 49]
    assert "next" not in body["paging"]
    assert body["paging"]["previous"] == "http://test/api/v1/users?page=3&size=15&sort=id"


@pytest.mark.asyncio
async def test_page_beyond_data_returns_empty_list(client):
    resp = await client.get("/api/v1/users?page=100&size=10")

    assert resp.status_code == 200
    body = resp.json()
    assert body["data"] == []
    assert body["paging"]["totalResults"] == 50
    assert body["paging"]["previous"] == "http://test/api/v1/users?page=99&size=10"
    assert "next" not in body["paging"]


@pytest.mark.asyncio
async def test_scenario_sort_name_single_page(small_client):
    resp = await small_client.get("/api/v1/users?sort=name&page=1&size=10")

    body = resp.json()
    assert [user["name"] for user in body["data"]] == ["Andrew", "Jorn", "Markus", "Mike", "Ori"]
    assert body["paging"] == {"totalResults": 5}


@pytest.mark.asyncio
async def test_scenario_sort_id_first_page(small_client):
    resp = await small_client.get("/api/v1/users?sort=id&page=1&size=2")

    body = resp.json()
    assert body["data"] == [{"id": 0, "name": "Jorn"}, {"id": 1, "name": "Mike"}]
    assert body["paging"]["next"] == "http://test/api/v1/users?page=2&size=2&sort=id"
    assert "previous" not in body["paging"]


@pytest.mark.asyncio
async def test_scenario_page_past_end(small_client):
    resp = await small_client.get("/api/v1/users?page=10&size=2")

    assert resp.status_code == 200
    body = resp.json()
    assert body["data"] == []
    assert body["paging"]["totalResults"] == 5
    assert "previous" in body["paging"]
    assert "next" not in body["paging"]


@pytest.mark.asyncio
async def test_size_too_large_is_rejected(client):
    resp = await client.get("/api/v1/users?size=101")

    assert resp.status_code == 422
    body = resp.json()
    assert body["status"] is False
    assert body["detail"] == "VALIDATION_ERROR"
    assert body["message"] == "Invalid size parameter. Must be between 1 and 100"
    assert body["request_id"] == resp.headers["X-Request-ID"]


@pytest.mark.asyncio
async def test_invalid_sort_is_rejected(client):
    resp = await client.get("/api/v1/users?sort=invalid")

    assert resp.status_code == 422
    assert resp.json()["message"] == "Invalid sort field. Valid fields: name, id"


@pytest.mark.asyncio
async def test_first_invalid_param_is_reported(client):
    resp = await client.get("/api/v1/users?page=abc&size=0&sort=invalid")

    assert resp.status_code == 422
    assert resp.json()["message"] == "Invalid page parameter"


@pytest.mark.asyncio
async def test_injection_attempt_is_rejected(client):
    resp = await client.get("/api/v1/users", params={"page": "1<script>alert(1)</script>"})

    assert resp.status_code == 422
    assert resp.json()["detail"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_upstream_request_id_is_echoed(client):
    resp = await client.get("/api/v1/users", headers={"X-Request-ID": "abc-123"})

    assert resp.headers["X-Request-ID"] == "abc-123"


@pytest.mark.asyncio
async def test_request_id_generated_when_missing(client):
    resp = await client.get("/api/v1/users")

    assert len(resp.headers["X-Request-ID"]) == 36


@pytest.mark.asyncio
async def test_health_check(client):
    resp = await client.get("/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "healthy"
    assert body["app_name"] == "User Directory Service"
    assert isinstance(body["uptime"]["seconds"], int)
    assert body["uptime"]["formatted"].endswith("s")


@pytest.mark.asyncio
async def test_root(client):
    resp = await client.get("/")

    assert resp.status_code == 200
    assert resp.json()["docs"] == "/docs"


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0s"),
        (59.9, "59s"),
        (61, "1m 1s"),
        (3600, "1h 0s"),
        (90061, "1d 1h 1m 1s"),
    ],
)
def test_format_uptime(seconds, expected):
    assert format_uptime(seconds) == expected


@pytest.mark.asyncio
async def test_page_with_too_many_digits_is_rejected(client):
    resp = await client.get("/api/v1/users", params={"page": "9" * 5000})

    assert resp.status_code == 422
    assert resp.json()["message"] == "Invalid page parameter"


@pytest.mark.asyncio
async def test_unexpected_error_keeps_request_id(client):
    def broken_collection():
        raise RuntimeError("collection unavailable")

    app.dependency_overrides[get_user_collection] = broken_collection
    try:
        resp = await client.get("/api/v1/users", headers={"X-Request-ID": "req-500"})
    finally:
        app.dependency_overrides.pop(get_user_collection, None)

    assert resp.status_code == 500
    assert resp.headers["X-Request-ID"] == "req-500"
    body = resp.json()
    assert body["detail"] == "INTERNAL_SERVER_ERROR"
    assert body["request_id"] == "req-500"
