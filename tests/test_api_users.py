"""
Tests for the users API endpoints.

Tests FastAPI routes against an in-memory users service (see the
``client`` fixture) and, for edge cases, a mocked service.
Validates response bodies, status codes and error translation.
"""

from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from accounts.domain.users.entities import User
from accounts.domain.users.ports import UserServicePort
from accounts.interfaces.users.dependencies import get_users_service
from accounts.main import app
from accounts.shared.security.headers import SECURE_HEADERS

USERS = "/api/v1/users"

NEW_USER = {"name": "A", "email": "a@x.com", "password": "p", "cpass": "p"}


def _create(client: TestClient, **overrides) -> dict:
    response = client.post(USERS, json={**NEW_USER, **overrides})
    assert response.status_code == 200, response.text
    return response.json()


def _id_of(client: TestClient, email: str) -> str:
    return next(u["id"] for u in client.get(USERS).json() if u["email"] == email)


class TestCreateEndpoint:
    """Tests for POST /api/v1/users."""

    def test_create_echoes_name_and_email(self, client: TestClient) -> None:
        response = client.post(USERS, json=NEW_USER)

        assert response.status_code == 200
        assert response.json() == {"name": "A", "email": "a@x.com"}

    def test_password_mismatch(self, client: TestClient) -> None:
        response = client.post(USERS, json={**NEW_USER, "cpass": "q"})

        assert response.status_code == 403
        assert response.json() == {
            "error": "INVALID_PASSWORD_ERROR",
            "detail": "Passwords do not match",
        }
        assert client.get(USERS).json() == []

    def test_email_taken(self, client: TestClient) -> None:
        _create(client)

        response = client.post(USERS, json={**NEW_USER, "name": "B"})

        assert response.status_code == 422
        assert response.json()["error"] == "EMAIL_ALREADY_TAKEN_ERROR"

    def test_missing_field_rejected(self, client: TestClient) -> None:
        response = client.post(USERS, json={"name": "A", "email": "a@x.com"})
        assert response.status_code == 422

    def test_malformed_email_rejected(self, client: TestClient) -> None:
        response = client.post(USERS, json={**NEW_USER, "email": "not-an-email"})
        assert response.status_code == 422


class TestReadEndpoints:
    """Tests for GET /api/v1/users and GET /api/v1/users/{id}."""

    def test_list_never_exposes_passwords(self, client: TestClient) -> None:
        _create(client)
        _create(client, email="b@x.com", name="B")

        users = client.get(USERS).json()

        assert [u["email"] for u in users] == ["a@x.com", "b@x.com"]
        assert all(set(u) == {"id", "name", "email"} for u in users)

    def test_get_one(self, client: TestClient) -> None:
        _create(client)
        user_id = _id_of(client, "a@x.com")

        response = client.get(f"{USERS}/{user_id}")

        assert response.status_code == 200
        assert response.json() == {"id": user_id, "name": "A", "email": "a@x.com"}

    def test_get_unknown_user(self, client: TestClient) -> None:
        response = client.get(f"{USERS}/missing")

        assert response.status_code == 422
        assert response.json() == {
            "error": "UNPROCESSABLE_ENTITY_ERROR",
            "detail": "Unknown user",
        }


class TestUpdateEndpoint:
    """Tests for PUT /api/v1/users/{id}."""

    def test_update(self, client: TestClient) -> None:
        _create(client)
        user_id = _id_of(client, "a@x.com")

        response = client.put(f"{USERS}/{user_id}", json={"name": "Z", "email": "z@x.com"})

        assert response.status_code == 200
        assert response.json() == {"id": user_id}
        assert client.get(f"{USERS}/{user_id}").json()["name"] == "Z"

    def test_taken_email_leaves_user_untouched(self, client: TestClient) -> None:
        _create(client)
        _create(client, email="b@x.com", name="B")
        user_id = _id_of(client, "b@x.com")

        response = client.put(f"{USERS}/{user_id}", json={"name": "Changed", "email": "a@x.com"})

        assert response.status_code == 422
        assert response.json()["error"] == "EMAIL_ALREADY_TAKEN_ERROR"
        assert client.get(f"{USERS}/{user_id}").json()["name"] == "B"

    def test_unknown_user(self, client: TestClient) -> None:
        response = client.put(f"{USERS}/missing", json={"name": "Z", "email": "z@x.com"})

        assert response.status_code == 422
        assert response.json()["detail"] == "Failed to update user"


class TestDeleteEndpoint:
    """Tests for DELETE /api/v1/users/{id}."""

    def test_delete(self, client: TestClient) -> None:
        _create(client)
        user_id = _id_of(client, "a@x.com")

        response = client.delete(f"{USERS}/{user_id}")

        assert response.status_code == 200
        assert response.json() == {"id": user_id}
        assert client.get(USERS).json() == []

    def test_delete_failure(self) -> None:
        service = MagicMock(spec=UserServicePort)
        service.delete_user.return_value = False
        app.dependency_overrides[get_users_service] = lambda: service
        try:
            response = TestClient(app).delete(f"{USERS}/1")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 422
        assert response.json() == {
            "error": "UNPROCESSABLE_ENTITY_ERROR",
            "detail": "Failed to delete user",
        }
        service.delete_user.assert_called_once_with("1")


class TestChangePasswordEndpoint:
    """Tests for POST /api/v1/users/{id}/change-password."""

    def test_change_password(self, client: TestClient) -> None:
        _create(client)
        user_id = _id_of(client, "a@x.com")

        response = client.post(
            f"{USERS}/{user_id}/change-password",
            json={"oldpass": "p", "newpass": "n", "copass": "n"},
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Password changed successfully"}

    def test_wrong_old_password(self, client: TestClient) -> None:
        _create(client)
        user_id = _id_of(client, "a@x.com")

        response = client.post(
            f"{USERS}/{user_id}/change-password",
            json={"oldpass": "wrong", "newpass": "n", "copass": "n"},
        )

        assert response.status_code == 500
        assert response.json() == {
            "error": "SERVER_ERROR",
            "detail": "Failed to change password",
        }


class TestUnexpectedErrors:
    """Service exceptions reach the catch-all handler unchanged."""

    def test_service_exception_is_500_without_internals(self) -> None:
        service = MagicMock(spec=UserServicePort)
        service.get_users.side_effect = RuntimeError("connection refused to db:5432")
        app.dependency_overrides[get_users_service] = lambda: service
        try:
            response = TestClient(app, raise_server_exceptions=False).get(USERS)
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert "5432" not in response.text


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self, client: TestClient) -> None:
        response = client.get(USERS)
        for name, value in SECURE_HEADERS.items():
            assert response.headers[name] == value

    def test_headers_on_error_responses(self, client: TestClient) -> None:
        response = client.get(f"{USERS}/missing")
        assert response.headers["X-Frame-Options"] == "DENY"


def test_user_entity_password_not_serialized() -> None:
    service = MagicMock(spec=UserServicePort)
    service.get_user.return_value = User(id="1", name="A", email="a@x.com", password="hash")
    app.dependency_overrides[get_users_service] = lambda: service
    try:
        body = TestClient(app).get(f"{USERS}/1").json()
    finally:
        app.dependency_overrides.clear()

    assert "password" not in body
