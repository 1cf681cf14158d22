"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import MagicMock

from api.dependencies import reset_container
from modules.auth.tokens import TokenService
from shared.database import reset_client_cache


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

TEST_USER_ID = "8d7f4c1e-2b6a-4f0e-9c3d-1a2b3c4d5e6f"
OTHER_USER_ID = "5b1e9a70-3c4d-4e8f-a1b2-c3d4e5f60718"
TEST_POST_ID = "0f6e2d9c-7a1b-4c3d-8e5f-6a7b8c9d0e1f"


def create_test_token(
    user_id: str = TEST_USER_ID,
    expired: bool = False,
) -> str:
    """
    Create a test token for authentication.

    Args:
        user_id: User ID to include in the token
        expired: If True, creates a token that expired an hour ago

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    issued_at = now - timedelta(hours=2) if expired else now
    tokens = TokenService(TEST_JWT_SECRET, clock=lambda: issued_at)
    return tokens.issue(user_id)


def mock_result(data) -> MagicMock:
    """A stand-in for a postgrest APIResponse."""
    result = MagicMock()
    result.data = data
    return result


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the service container and database client before and after each test."""
    reset_container()
    reset_client_cache()
    yield
    reset_container()
    reset_client_cache()


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(TEST_JWT_SECRET)


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return TEST_USER_ID


@pytest.fixture
def auth_token(test_user_id: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create token headers with a valid token."""
    return {"x-auth-token": auth_token}
