"""Tests for the users API."""

from collections.abc import Callable
from datetime import timedelta

from fastapi.testclient import TestClient

from ecommerce.domain.identity.entities.user import User


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class TestGetUser:
    def test_returns_existing_user(self, client: TestClient, test_user: User) -> None:
        response = client.get(f"/api/v1/users/{test_user.id.value}")
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == test_user.id.value
        assert data["username"] == "alice"
        assert data["email"] == "alice@example.com"
        assert data["phone"] == "13800000000"

    def test_unknown_user_is_user_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/users/999")
        assert response.status_code == 404
        assert response.json() == {"code": "USER_NOT_FOUND", "message": "用户不存在: 999"}

    def test_id_beyond_bigint_is_user_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/users/9223372036854775808")
        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"


class TestGetMe:
    def test_valid_token(
        self, client: TestClient, test_user: User, make_token: Callable[..., str]
    ) -> None:
        response = client.get("/api/v1/users/me", headers=_auth(make_token(test_user.id.value)))
        assert response.status_code == 200
        assert response.json()["username"] == "alice"

    def test_missing_token(self, client: TestClient) -> None:
        response = client.get("/api/v1/users/me")
        assert response.status_code == 401
        assert response.json() == {"code": "INVALID_TOKEN", "message": "令牌无效或已过期"}

    def test_malformed_token(self, client: TestClient) -> None:
        response = client.get("/api/v1/users/me", headers=_auth("not-a-jwt"))
        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_TOKEN"

    def test_expired_token(
        self, client: TestClient, test_user: User, make_token: Callable[..., str]
    ) -> None:
        token = make_token(test_user.id.value, expires_in=timedelta(minutes=-1))
        response = client.get("/api/v1/users/me", headers=_auth(token))
        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_TOKEN"

    def test_refresh_token_rejected(
        self, client: TestClient, test_user: User, make_token: Callable[..., str]
    ) -> None:
        token = make_token(test_user.id.value, token_type="refresh")
        response = client.get("/api/v1/users/me", headers=_auth(token))
        assert response.status_code == 401

    def test_token_for_deleted_user(
        self, client: TestClient, make_token: Callable[..., str]
    ) -> None:
        response = client.get("/api/v1/users/me", headers=_auth(make_token(42)))
        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"

    def test_subject_beyond_bigint(
        self, client: TestClient, make_token: Callable[..., str]
    ) -> None:
        token = make_token("99999999999999999999")
        response = client.get("/api/v1/users/me", headers=_auth(token))
        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_TOKEN"
