"""API tests for the /api/v1/user endpoints."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from userbase.domain.shared.exceptions import StoreError
from userbase.presentation.api.app import create_app
from userbase.presentation.api.dependencies import get_user_repository

USERS_URL = "/api/v1/user"


def _create(client, name="Ana", email="ana@example.com"):
    return client.post(USERS_URL, json={"name": name, "email": email})


class TestCreateUser:
    """POST /api/v1/user"""

    def test_create_returns_201_with_user(self, client):
        response = _create(client)

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Ana"
        assert data["email"] == "ana@example.com"
        assert data["id"]

    def test_invalid_email_returns_400_with_field(self, client):
        response = _create(client, email="not-an-email")

        assert response.status_code == 400
        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert data["field"] == "email"

    def test_too_long_name_returns_400(self, client):
        response = _create(client, name="x" * 101)

        assert response.status_code == 400
        assert response.json()["field"] == "name"

    def test_missing_field_is_rejected_by_schema(self, client):
        response = client.post(USERS_URL, json={"name": "Ana"})

        assert response.status_code == 422

    def test_duplicate_email_returns_409(self, client):
        _create(client, name="A", email="a@x.com")

        response = _create(client, name="B", email="a@x.com")

        assert response.status_code == 409
        assert response.json() == {
            "detail": "email already in use",
            "code": "EMAIL_ALREADY_EXISTS",
            "field": "email",
        }


class TestListUsers:
    """GET /api/v1/user"""

    def test_empty_list(self, client):
        response = client.get(USERS_URL)

        assert response.status_code == 200
        assert response.json() == {
            "items": [],
            "total": 0,
            "page": 1,
            "pageSize": 10,
            "totalPages": 0,
        }

    def test_pagination_uses_camel_case_fields(self, client):
        for i in range(5):
            _create(client, name=f"U{i}", email=f"u{i}@x.com")

        response = client.get(USERS_URL, params={"page": 2, "pageSize": 2})

        assert response.status_code == 200
        data = response.json()
        assert [u["name"] for u in data["items"]] == ["U2", "U3"]
        assert data["total"] == 5
        assert data["page"] == 2
        assert data["pageSize"] == 2
        assert data["totalPages"] == 3

    def test_page_beyond_last_is_empty(self, client):
        _create(client)

        response = client.get(USERS_URL, params={"page": 9})

        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["total"] == 1
        assert data["totalPages"] == 1

    def test_page_zero_is_rejected(self, client):
        response = client.get(USERS_URL, params={"page": 0})

        assert response.status_code == 422

    def test_page_size_above_maximum_returns_400(self, client):
        response = client.get(USERS_URL, params={"pageSize": 101})

        assert response.status_code == 400
        assert response.json()["field"] == "page_size"


class TestGetUser:
    """GET /api/v1/user/{id}"""

    def test_get_existing_user(self, client):
        created = _create(client).json()

        response = client.get(f"{USERS_URL}/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing_user_returns_404(self, client):
        response = client.get(f"{USERS_URL}/missing-id")

        assert response.status_code == 404
        assert response.json() == {
            "detail": "User #missing-id not found",
            "code": "USER_NOT_FOUND",
        }


class TestUpdateUser:
    """PATCH /api/v1/user/{id}"""

    def test_partial_update_keeps_other_fields(self, client):
        created = _create(client, email="a@b.com").json()

        response = client.patch(f"{USERS_URL}/{created['id']}", json={"name": "New"})

        assert response.status_code == 200
        assert response.json() == {
            "id": created["id"],
            "name": "New",
            "email": "a@b.com",
        }
        assert client.get(f"{USERS_URL}/{created['id']}").json()["name"] == "New"

    def test_explicit_null_is_rejected(self, client):
        created = _create(client).json()

        response = client.patch(f"{USERS_URL}/{created['id']}", json={"name": None})

        assert response.status_code == 400
        assert response.json()["field"] == "name"

    def test_update_to_taken_email_returns_409(self, client):
        _create(client, name="A", email="a@x.com")
        other = _create(client, name="B", email="b@x.com").json()

        response = client.patch(
            f"{USERS_URL}/{other['id']}",
            json={"email": "a@x.com"},
        )

        assert response.status_code == 409
        assert client.get(f"{USERS_URL}/{other['id']}").json()["email"] == "b@x.com"

    def test_update_missing_user_returns_404(self, client):
        response = client.patch(f"{USERS_URL}/missing-id", json={"name": "X"})

        assert response.status_code == 404


class TestDeleteUser:
    """DELETE /api/v1/user/{id}"""

    def test_delete_returns_204_and_removes_user(self, client):
        created = _create(client).json()

        response = client.delete(f"{USERS_URL}/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"{USERS_URL}/{created['id']}").status_code == 404

    def test_delete_missing_user_returns_404(self, client):
        response = client.delete(f"{USERS_URL}/missing-id")

        assert response.status_code == 404


class TestStoreUnavailable:
    """Persistence failures surface as 503."""

    @pytest.fixture
    def failing_client(self, app):
        repo = AsyncMock()
        repo.find_by_id.side_effect = StoreError("connection refused")
        app.dependency_overrides[get_user_repository] = lambda: repo
        with TestClient(app) as test_client:
            yield test_client
        app.dependency_overrides.clear()

    def test_store_error_returns_503(self, failing_client):
        response = failing_client.get(f"{USERS_URL}/some-id")

        assert response.status_code == 503
        assert response.json() == {
            "detail": "The data store is currently unavailable",
            "code": "STORE_ERROR",
        }


class TestInfoEndpoints:
    """Unversioned endpoints."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "version": "1.0.0",
            "api_versions": ["v1"],
        }

    def test_root_lists_endpoints(self, client):
        data = client.get("/").json()

        assert data["api_base"] == "/api/v1"
        assert data["endpoints"]["users"] == "/api/v1/user"
        assert data["docs"] is None

    def test_docs_hidden_without_debug(self, client):
        assert client.get("/docs").status_code == 404


class TestAppSettings:
    """Settings given to create_app drive paging and the database."""

    @pytest.fixture
    def small_pages_client(self, make_settings):
        app = create_app(make_settings(default_page_size=2, max_page_size=5))
        with TestClient(app) as test_client:
            yield test_client

    def test_default_page_size_comes_from_app_settings(self, small_pages_client):
        for i in range(3):
            _create(small_pages_client, name=f"U{i}", email=f"u{i}@x.com")

        data = small_pages_client.get(USERS_URL).json()

        assert data["pageSize"] == 2
        assert len(data["items"]) == 2
        assert data["totalPages"] == 2

    def test_max_page_size_comes_from_app_settings(self, small_pages_client):
        response = small_pages_client.get(USERS_URL, params={"pageSize": 50})

        assert response.status_code == 400
        assert response.json()["field"] == "page_size"

    def test_page_size_at_max_is_accepted(self, small_pages_client):
        response = small_pages_client.get(USERS_URL, params={"pageSize": 5})

        assert response.status_code == 200

    def test_apps_with_different_databases_are_isolated(self, tmp_path, make_settings):
        first = create_app(
            make_settings(database_url_override=f"sqlite+aiosqlite:///{tmp_path}/a.db"),
        )
        second = create_app(
            make_settings(database_url_override=f"sqlite+aiosqlite:///{tmp_path}/b.db"),
        )

        with TestClient(first) as client_a, TestClient(second) as client_b:
            _create(client_a)

            assert client_a.get(USERS_URL).json()["total"] == 1
            assert client_b.get(USERS_URL).json()["total"] == 0
