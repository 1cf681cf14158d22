"""
Authentication module data models.

Request models validate input at the route boundary so the service
only ever sees well-formed credentials.
"""

import re
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

# bcrypt ignores (newer releases reject) input beyond 72 bytes
MAX_PASSWORD_BYTES = 72


class User(BaseModel):
    """A user record as exposed by the API (never includes the password)."""

    id: str = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    avatar: Optional[str] = Field(None, description="Gravatar URL")
    date: datetime = Field(..., description="Registration time")


class UserRecord(User):
    """A user row including the bcrypt hash. Internal to the auth module."""

    password: str = Field(..., description="bcrypt hash")

    def to_public(self) -> User:
        return User(**self.model_dump(exclude={"password"}))


class RegisterRequest(BaseModel):
    """Request body for POST /api/users."""

    name: str = Field(..., description="Display name")
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., description="Plaintext password")

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name cannot be empty.")
        return value

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        if len(value) < 4:
            raise ValueError("Password must contain at least 4 characters")
        if not re.search(r"\d", value):
            raise ValueError("Password must contain a number")
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginRequest(BaseModel):
    """Request body for POST /api/auth."""

    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=1, description="Plaintext password")


class TokenResponse(BaseModel):
    """Response carrying a freshly issued bearer token."""

    token: str
