"""
Tests for the token gate and the registration/login endpoints.
"""

import pytest
from unittest.mock import MagicMock, AsyncMock
from fastapi.testclient import TestClient
from datetime import datetime, timezone

from api.app import create_app
from api.dependencies import get_auth_service, get_token_service
from api.middleware.auth import authenticate_token
from modules.auth.service import AuthService
from modules.auth.models import User
from modules.auth.exceptions import (
    NoTokenError,
    InvalidTokenError,
    DuplicateEmailError,
    InvalidCredentialsError,
)

from tests.conftest import TEST_USER_ID, create_test_token


def make_user() -> User:
    return User(
        id=TEST_USER_ID,
        name="Ada",
        email="ada@example.com",
        avatar="https://www.gravatar.com/avatar/x",
        date=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


class TestAuthenticateToken:
    """The gate decision depends only on the header value and the token service."""

    def test_missing_token(self, token_service):
        with pytest.raises(NoTokenError):
            authenticate_token(None, token_service)

    def test_empty_token(self, token_service):
        with pytest.raises(NoTokenError):
            authenticate_token("", token_service)

    def test_invalid_token(self, token_service):
        with pytest.raises(InvalidTokenError):
            authenticate_token("not-a-token", token_service)

    def test_expired_token(self, token_service):
        with pytest.raises(InvalidTokenError):
            authenticate_token(create_test_token(expired=True), token_service)

    def test_valid_token(self, token_service):
        user = authenticate_token(create_test_token(), token_service)
        assert user.id == TEST_USER_ID


@pytest.fixture
def service():
    return MagicMock()


@pytest.fixture
def client(service, token_service):
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: service
    app.dependency_overrides[get_token_service] = lambda: token_service
    return TestClient(app)


class TestCurrentUser:
    def test_no_token(self, client):
        response = client.get("/api/auth")
        assert response.status_code == 401
        assert response.json() == {"msg": "No token, authorization denied"}

    def test_invalid_token(self, client):
        response = client.get("/api/auth", headers={"x-auth-token": "garbage"})
        assert response.status_code == 401
        assert response.json() == {"msg": "Token is not valid."}

    def test_expired_token(self, client):
        response = client.get("/api/auth", headers={"x-auth-token": create_test_token(expired=True)})
        assert response.status_code == 401

    def test_valid_token(self, client, service, auth_headers):
        service.get_user_by_id = AsyncMock(return_value=make_user())

        response = client.get("/api/auth", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == TEST_USER_ID
        assert "password" not in data
        service.get_user_by_id.assert_awaited_once_with(TEST_USER_ID)


class TestRegister:
    def test_register(self, client, service):
        service.register = AsyncMock(return_value="issued-token")

        response = client.post(
            "/api/users",
            json={"name": "Ada", "email": "ada@example.com", "password": "abc1"},
        )

        assert response.status_code == 200
        assert response.json() == {"token": "issued-token"}
        service.register.assert_awaited_once_with("Ada", "ada@example.com", "abc1")

    def test_register_weak_password(self, client, service):
        service.register = AsyncMock()

        response = client.post(
            "/api/users",
            json={"name": "Ada", "email": "ada@example.com", "password": "abc"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "errors": [{"msg": "Password must contain at least 4 characters", "param": "password"}]
        }
        service.register.assert_not_called()

    def test_register_reports_every_invalid_field(self, client, service):
        service.register = AsyncMock()

        response = client.post("/api/users", json={"name": "", "email": "nope", "password": "abcd"})

        assert response.status_code == 400
        params = [error["param"] for error in response.json()["errors"]]
        assert params == ["name", "email", "password"]

    def test_register_duplicate_email(self, client, service):
        service.register = AsyncMock(side_effect=DuplicateEmailError("ada@example.com"))

        response = client.post(
            "/api/users",
            json={"name": "Ada", "email": "ada@example.com", "password": "abc1"},
        )

        assert response.status_code == 400
        assert response.json() == {"errors": [{"msg": "User already exists."}]}


class TestLogin:
    def test_login(self, client, service):
        service.authenticate = AsyncMock(return_value="issued-token")

        response = client.post("/api/auth", json={"email": "ada@example.com", "password": "abc1"})

        assert response.status_code == 200
        assert response.json() == {"token": "issued-token"}

    def test_invalid_credentials(self, client, service):
        service.authenticate = AsyncMock(side_effect=InvalidCredentialsError())

        response = client.post("/api/auth", json={"email": "ada@example.com", "password": "wrong1"})

        assert response.status_code == 400
        assert response.json() == {"errors": [{"msg": "Invalid credentials"}]}


class TestRegisterThenFetchCurrentUser:
    """End to end through the real auth service with the store mocked out."""

    def test_token_from_registration_opens_private_route(self, token_service):
        repository = MagicMock()
        repository.get_by_email.return_value = None
        repository.create.return_value = make_user()
        repository.get_by_id.return_value = make_user()
        auth = AuthService(repository=repository, tokens=token_service, bcrypt_rounds=4)

        app = create_app()
        app.dependency_overrides[get_auth_service] = lambda: auth
        app.dependency_overrides[get_token_service] = lambda: token_service
        client = TestClient(app)

        registered = client.post(
            "/api/users",
            json={"name": "Ada", "email": "ada@example.com", "password": "abc1"},
        )
        token = registered.json()["token"]
        response = client.get("/api/auth", headers={"x-auth-token": token})

        assert response.status_code == 200
        assert response.json()["email"] == "ada@example.com"
        repository.get_by_id.assert_called_once_with(TEST_USER_ID)
