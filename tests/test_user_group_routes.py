from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from app.constants.user_group_errors import UserGroupErrorCode
from app.core.dependencies import get_user_group_service
from app.core.exceptions import InvalidArgumentException, NotFoundException
from app.database import get_db_connection
from app.dtos.user_group_dtos import UserGroupWithMembersDTO
from app.main import app
from app.models.user_in_group import UserInGroup


@pytest.fixture
def service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def client(service):
    app.dependency_overrides[get_user_group_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "disconnected"}


def test_list_members(client, service):
    service.get_group_members.return_value = [
        UserInGroup(id="u-42", username="alice"),
        UserInGroup(id="", username="bob"),
    ]

    response = client.get("/api/v1/user-groups/g-1/users")

    assert response.status_code == 200
    body = response.json()
    assert body["error"] is None
    assert body["data"] == {
        "items": [
            {"id": "u-42", "username": "alice"},
            {"id": "", "username": "bob"},
        ],
        "total": 2,
    }
    assert body["meta"]["request_id"]
    service.get_group_members.assert_awaited_once_with("g-1")


def test_group_detail(client, service, engineering):
    service.get_group_with_members.return_value = UserGroupWithMembersDTO(
        group=engineering,
        users=[UserInGroup(id="u-42", username="alice")],
    )

    response = client.get("/api/v1/user-groups/g-1")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == "g-1"
    assert data["name"] == "Engineering"
    assert data["users"] == [{"id": "u-42", "username": "alice"}]


def test_unknown_group_returns_error_envelope(client, service):
    service.get_group_members.side_effect = NotFoundException(
        code=UserGroupErrorCode.USER_GROUP_NOT_FOUND.value,
        message="User group with id g-404 not found",
    )

    response = client.get("/api/v1/user-groups/g-404/users")

    assert response.status_code == 404
    body = response.json()
    assert body["data"] is None
    assert body["error"]["code"] == "USER_GROUP_NOT_FOUND"


def test_add_member(client, service):
    service.add_user_to_group.return_value = UserInGroup(id="u-42", username="alice")

    response = client.put("/api/v1/user-groups/g-1/users/u-42")

    assert response.status_code == 200
    assert response.json()["data"] == {"id": "u-42", "username": "alice"}
    service.add_user_to_group.assert_awaited_once_with("g-1", "u-42")


def test_remove_member(client, service):
    service.remove_user_from_group.return_value = False

    response = client.delete("/api/v1/user-groups/g-1/users/u-42")

    assert response.status_code == 200
    assert response.json()["data"] == {"removed": False}


def test_invalid_argument_maps_to_400_with_target(client, service):
    service.get_group_members.side_effect = InvalidArgumentException(
        "Cannot build a group member from a missing user", argument="user"
    )

    response = client.get("/api/v1/user-groups/g-1/users")

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "INVALID_ARGUMENT"
    assert error["target"] == "user"


def test_unexpected_error_maps_to_500(service):
    service.get_group_members.side_effect = RuntimeError("boom")
    app.dependency_overrides[get_user_group_service] = lambda: service
    try:
        response = TestClient(app, raise_server_exceptions=False).get(
            "/api/v1/user-groups/g-1/users"
        )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    body = response.json()
    assert body["data"] is None
    assert body["error"]["code"] == "INTERNAL_ERROR"


def test_repositories_share_the_request_connection(engineering):
    conn = AsyncMock()
    conn.fetchrow.return_value = engineering.model_dump()
    conn.fetch.return_value = []

    async def _fake_connection():
        yield conn

    app.dependency_overrides[get_db_connection] = _fake_connection
    try:
        response = TestClient(app).get("/api/v1/user-groups/g-1/users")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.json()["data"] == {"items": [], "total": 0}
    conn.fetchrow.assert_awaited_once()
    conn.fetch.assert_awaited_once()
